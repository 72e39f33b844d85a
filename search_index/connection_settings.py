"""Connection settings for the cluster client.

Host and port are kept separate (not a combined URL), matching what
opensearch-py expects in its ``hosts`` list.  Every field can be set from an
``OPENSEARCH_*`` environment variable or passed directly to
:func:`load_config`.
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class ConnectionConfig:
    """How to reach an OpenSearch / Elasticsearch 7.x cluster."""

    host: str = "localhost"
    port: int = 9200
    user: str = "admin"
    password: str = "admin"
    use_ssl: bool = True
    verify_certs: bool = False
    ssl_show_warn: bool = False
    ca_certs: Optional[str] = None
    timeout: int = 30
    max_retries: int = 3
    retry_on_timeout: bool = True

    @property
    def http_auth(self) -> Optional[tuple[str, str]]:
        if self.user and self.password:
            return (self.user, self.password)
        return None

    @property
    def hosts(self) -> list[dict]:
        scheme = "https" if self.use_ssl else "http"
        return [{"host": self.host, "port": self.port, "scheme": scheme}]

    def client_kwargs(self) -> dict:
        """Keyword arguments for an ``OpenSearch`` / ``Elasticsearch`` 7.x client."""
        kwargs: dict = {
            "hosts": self.hosts,
            "use_ssl": self.use_ssl,
            "verify_certs": self.verify_certs,
            "ssl_show_warn": self.ssl_show_warn,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "retry_on_timeout": self.retry_on_timeout,
        }
        if self.http_auth:
            kwargs["http_auth"] = self.http_auth
        if self.ca_certs:
            kwargs["ca_certs"] = self.ca_certs
        return kwargs


# env var -> (field, parser); empty values are ignored except for booleans
_ENV_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "OPENSEARCH_HOST": ("host", str),
    "OPENSEARCH_PORT": ("port", int),
    "OPENSEARCH_USER": ("user", str),
    "OPENSEARCH_PASSWORD": ("password", str),
    "OPENSEARCH_USE_SSL": ("use_ssl", _parse_bool),
    "OPENSEARCH_VERIFY_CERTS": ("verify_certs", _parse_bool),
    "OPENSEARCH_CA_CERTS": ("ca_certs", str),
    "OPENSEARCH_TIMEOUT": ("timeout", int),
    "OPENSEARCH_MAX_RETRIES": ("max_retries", int),
    "OPENSEARCH_RETRY_ON_TIMEOUT": ("retry_on_timeout", _parse_bool),
}


def load_config(**overrides) -> ConnectionConfig:
    """Build a ConnectionConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. Environment variables (``OPENSEARCH_HOST``, ``OPENSEARCH_PORT``, ...)
      3. Explicit keyword arguments

    Raises:
        ValueError: a boolean env var holds something other than a
            recognised true/false spelling.
        TypeError: an override names a field ConnectionConfig does not have.
    """
    cfg = ConnectionConfig()

    for env_name, (field, parse) in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        if parse is not _parse_bool and not raw:
            continue
        setattr(cfg, field, parse(raw))

    for key, value in overrides.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)
        else:
            raise TypeError(f"Unknown config key: {key!r}")

    return cfg
