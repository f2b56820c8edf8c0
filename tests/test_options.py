from __future__ import annotations

import pytest

from opensearch_document.options import (
    BODY_OPTIONS,
    Consistency,
    OpType,
    allowed_values,
    normalize_choice,
)


@pytest.mark.parametrize(
    "option, expected",
    [
        ("version_type", ["internal", "external"]),
        ("op_type", ["index", "create"]),
        ("replication", ["async", "sync", "default"]),
        ("consistency", ["default", "one", "quorum", "all"]),
    ],
)
def test_allowed_values(option, expected):
    assert allowed_values(option) == expected


def test_normalize_choice_is_case_insensitive():
    assert normalize_choice("consistency", "QUORUM") == "quorum"
    assert normalize_choice("op_type", "Create") == "create"


def test_normalize_choice_accepts_enum_members():
    assert normalize_choice("consistency", Consistency.ALL) == "all"
    assert normalize_choice("op_type", OpType.INDEX) == "index"


def test_normalize_choice_rejects_values_outside_the_set():
    assert normalize_choice("version_type", "bogus") is None
    assert normalize_choice("replication", 1) is None
    # a member of another enum is only accepted if its value is allowed
    assert normalize_choice("consistency", OpType.CREATE) is None


def test_body_options():
    assert BODY_OPTIONS == {"upsert", "source", "script", "lang", "params"}
