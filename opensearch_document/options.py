"""Enumerated document options and their validation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union


class VersionType(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


class OpType(str, Enum):
    INDEX = "index"
    CREATE = "create"


class Replication(str, Enum):
    ASYNC = "async"
    SYNC = "sync"
    DEFAULT = "default"


class Consistency(str, Enum):
    DEFAULT = "default"
    ONE = "one"
    QUORUM = "quorum"
    ALL = "all"


# option name -> enum holding its allowed values
CHOICES: dict[str, type[Enum]] = {
    "version_type": VersionType,
    "op_type": OpType,
    "replication": Replication,
    "consistency": Consistency,
}

# Options sent in the request body rather than the URL.
BODY_OPTIONS = frozenset({"upsert", "source", "script", "lang", "params"})


def allowed_values(option: str) -> list[str]:
    """Return the allowed string values of an enumerated option."""
    return [member.value for member in CHOICES[option]]


def normalize_choice(option: str, value: Union[str, Enum, Any]) -> Optional[str]:
    """Return the canonical value for *option*, or ``None`` if not allowed.

    Strings are compared case-insensitively.  Enum members are accepted
    for their ``value``.
    """
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        return None

    candidate = value.lower()
    if candidate in allowed_values(option):
        return candidate
    return None
