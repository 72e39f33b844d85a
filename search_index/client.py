"""The cluster client an :class:`~search_index.index.Index` borrows.

An index only needs ``indices.*``, ``index``/``delete``/``search`` for
typeless requests and ``transport.perform_request`` for typed ones, which
both opensearch-py and elasticsearch-py 7.x provide.
"""

import logging
from typing import Any, Optional

from .connection_settings import ConnectionConfig, load_config

try:
    from opensearchpy import OpenSearch
except ModuleNotFoundError:  # pragma: no cover
    OpenSearch = None  # type: ignore[assignment]

try:
    from elasticsearch import Elasticsearch
except ModuleNotFoundError:  # pragma: no cover
    Elasticsearch = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


def installed_client_classes() -> list[type]:
    """Client classes that can be imported, preferred first."""
    return [cls for cls in (OpenSearch, Elasticsearch) if cls is not None]


def create_client(
    config: Optional[ConnectionConfig] = None,
    client_class: Optional[type] = None,
    **overrides,
) -> Any:
    """Build one client to share between every :class:`Index` that needs it.

    Args:
        config: Connection settings; built with :func:`load_config` from the
            environment and *overrides* when omitted.
        client_class: Force a client class instead of the first installed one.
    """
    if config is None:
        config = load_config(**overrides)

    if client_class is None:
        candidates = installed_client_classes()
        if not candidates:
            raise ModuleNotFoundError(
                "Install 'opensearch-py' (or the 'elasticsearch' extra) to create a client."
            )
        client_class = candidates[0]

    logger.debug("Connecting %s to %s:%s", client_class.__name__, config.host, config.port)
    return client_class(**config.client_kwargs())
