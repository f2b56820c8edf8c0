"""Fluent document request builder for OpenSearch."""

from .client import (
    DocumentClient,
    TransportClient,
    configure,
    create_client,
    get_default_client,
    get_default_strict,
    set_default_client,
    set_default_strict,
)
from .config import ConnectionConfig, load_config
from .document import Document
from .errors import (
    ClientNotSetError,
    DocumentError,
    InvalidOptionError,
    MissingFieldError,
)
from .options import Consistency, OpType, Replication, VersionType

__all__ = [
    # document
    "Document",
    # options
    "VersionType",
    "OpType",
    "Replication",
    "Consistency",
    # client
    "DocumentClient",
    "TransportClient",
    "configure",
    "create_client",
    "get_default_client",
    "set_default_client",
    "get_default_strict",
    "set_default_strict",
    # config
    "ConnectionConfig",
    "load_config",
    # errors
    "DocumentError",
    "ClientNotSetError",
    "MissingFieldError",
    "InvalidOptionError",
]
