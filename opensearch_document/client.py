"""Client contract, default client slot, and the opensearch-py adapter."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from opensearchpy import OpenSearch

from .config import ConnectionConfig, load_config

logger = logging.getLogger(__name__)

_default_client: Optional["DocumentClient"] = None
_default_strict = False


@runtime_checkable
class DocumentClient(Protocol):
    """What a :class:`~opensearch_document.document.Document` needs from a client.

    ``url`` is a path such as ``/index/type/id``; for ``post``, ``put``
    and ``delete`` it may already carry a query string.  ``body`` is a
    JSON-encoded string (empty for deletes).  Each method returns the
    response synchronously; the builder hands that value back unchanged.
    """

    def get(self, url: str, params: Mapping[str, Any]) -> Any: ...

    def post(self, url: str, body: str) -> Any: ...

    def put(self, url: str, body: str) -> Any: ...

    def delete(self, url: str, body: str) -> Any: ...


def set_default_client(client: Optional[DocumentClient]) -> None:
    """Set the client used by documents created without one.

    Pass ``None`` to clear it.
    """
    global _default_client
    _default_client = client


def get_default_client() -> Optional[DocumentClient]:
    return _default_client


def set_default_strict(strict: bool) -> None:
    """Set whether new documents reject unknown enumerated option values."""
    global _default_strict
    _default_strict = strict


def get_default_strict() -> bool:
    return _default_strict


def create_client(
    config: Optional[ConnectionConfig] = None,
    **overrides,
) -> OpenSearch:
    """Create and return an OpenSearch client.

    Args:
        config: An explicit :class:`ConnectionConfig`.  When ``None``,
            one is built via :func:`load_config` (env vars + *overrides*).
        **overrides: Passed to :func:`load_config` when *config* is ``None``.

    Returns:
        A configured ``opensearchpy.OpenSearch`` instance.
    """
    if config is None:
        config = load_config(**overrides)

    kwargs: dict = {
        "hosts": config.hosts,
        "use_ssl": config.use_ssl,
        "verify_certs": config.verify_certs,
        "ssl_show_warn": config.ssl_show_warn,
        "timeout": config.timeout,
        "max_retries": config.max_retries,
        "retry_on_timeout": config.retry_on_timeout,
        "http_compress": config.http_compress,
    }

    http_auth = config.http_auth
    if http_auth:
        kwargs["http_auth"] = http_auth

    if config.ca_certs:
        kwargs["ca_certs"] = config.ca_certs

    return OpenSearch(**kwargs)


class TransportClient:
    """:class:`DocumentClient` backed by an opensearch-py client.

    Requests go through ``client.transport.perform_request`` so the URLs
    built by the document are sent as-is, with opensearch-py handling
    retries, timeouts and connection pooling.
    """

    def __init__(self, client: Any):
        self.client = client

    @classmethod
    def from_config(
        cls,
        config: Optional[ConnectionConfig] = None,
        **overrides,
    ) -> "TransportClient":
        return cls(create_client(config=config, **overrides))

    def _perform(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[str] = None,
    ) -> Any:
        logger.debug("%s %s", method, url)
        return self.client.transport.perform_request(
            method,
            url,
            params=dict(params) if params else None,
            body=body or None,
        )

    def get(self, url: str, params: Mapping[str, Any]) -> Any:
        return self._perform("GET", url, params=params)

    def post(self, url: str, body: str) -> Any:
        return self._perform("POST", url, body=body)

    def put(self, url: str, body: str) -> Any:
        return self._perform("PUT", url, body=body)

    def delete(self, url: str, body: str) -> Any:
        return self._perform("DELETE", url, body=body)


def configure(
    config: Optional[ConnectionConfig] = None,
    **overrides,
) -> TransportClient:
    """Build a :class:`TransportClient` and make it the default client.

    Also applies ``config.strict_options`` as the default strictness of
    new documents.
    """
    if config is None:
        config = load_config(**overrides)

    client = TransportClient.from_config(config)
    set_default_client(client)
    set_default_strict(config.strict_options)
    logger.info("Default client configured for %s:%s", config.host, config.port)
    return client
