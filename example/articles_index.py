#!/usr/bin/env python3
"""Example: declare an ``articles`` index, (re)create it, index and search posts."""

import argparse
import logging

from search_index import Document, IndexManager, StructuredQuery, create_client, load_config

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

INDEXES = {
    "example-articles": {
        "settings": {"number_of_shards": 1, "number_of_replicas": 0},
        "types": {
            "post": {
                "mappings": {
                    "title": {"type": "text"},
                    "category": {"type": "keyword"},
                }
            },
            "draft": {},
        },
    },
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Create and query the example articles index")
    parser.add_argument("--reset", action="store_true",
                        help="Delete and recreate the index before indexing")
    parser.add_argument("--doc-type", default=None,
                        help="Document type to write under (omit for typeless clusters)")
    args = parser.parse_args()

    manager = IndexManager(create_client(config=load_config()), INDEXES)
    index = manager.get_index("example-articles")
    logger.info("Mappings sent on create: %s", index.get_mappings())

    if args.reset:
        index.reset()
    else:
        index.ensure()

    index.put_documents(
        args.doc_type,
        [
            Document(id="1", data={"title": "OpenSearch Basics", "category": "tutorial"}),
            Document(id="2", data={"title": "Index Tuning", "category": "operations"}),
        ],
    )
    index.refresh()

    result = index.search(StructuredQuery({"query": {"match": {"title": "basics"}}}))
    logger.info("Hits: %d", result["hits"]["total"]["value"])

    index.delete_documents(args.doc_type, ["1", "2"])


if __name__ == "__main__":
    main()
