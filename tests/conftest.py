from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from opensearch_document import client as client_module  # noqa: E402


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.getenv("OPENSEARCH_RUN_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(
        reason="Set OPENSEARCH_RUN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


class RecordingClient:
    """Stands in for a DocumentClient and records every call."""

    def __init__(self):
        self.calls = []

    def _record(self, verb, url, payload):
        self.calls.append((verb, url, payload))
        return {"verb": verb, "url": url}

    def get(self, url, params):
        return self._record("get", url, params)

    def post(self, url, body):
        return self._record("post", url, body)

    def put(self, url, body):
        return self._record("put", url, body)

    def delete(self, url, body):
        return self._record("delete", url, body)


@pytest.fixture
def recorder() -> RecordingClient:
    return RecordingClient()


@pytest.fixture(autouse=True)
def reset_defaults():
    yield
    client_module.set_default_client(None)
    client_module.set_default_strict(False)
