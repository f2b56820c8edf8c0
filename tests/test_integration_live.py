from __future__ import annotations

import uuid

import pytest

from opensearch_document import Document, TransportClient


@pytest.mark.integration
def test_live_cluster_document_round_trip() -> None:
    client = TransportClient.from_config()
    assert client.client.ping() is True

    index_name = f"test-opensearch-document-{uuid.uuid4().hex[:8]}"

    try:
        created = (
            Document(index_name, "_doc", "1", client=client)
            .source({"title": "first", "views": 1})
            .refresh(True)
            .do_index()
        )
        assert created["result"] == "created"

        got = Document(index_name, "_doc", "1", client=client).do_get()
        assert got["_source"] == {"title": "first", "views": 1}

        deleted = Document(index_name, "_doc", "1", client=client).refresh(True).do_delete()
        assert deleted["result"] == "deleted"
    finally:
        if client.client.indices.exists(index=index_name):
            client.client.indices.delete(index=index_name)
