"""Fluent builder for single-document requests.

A :class:`Document` collects the identity of a document (index, type,
id) and its request options, then sends one of four requests through a
:class:`~opensearch_document.client.DocumentClient`::

    doc = Document("blog", "post", "1", client=client)
    doc.routing("user-7").refresh(True).source({"title": "hello"})
    doc.do_index()

Every option method reads the stored value when called without an
argument and stores the value (returning the document) otherwise, so
calls can be chained.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote

from .client import DocumentClient, get_default_client, get_default_strict
from .errors import ClientNotSetError, InvalidOptionError, MissingFieldError
from .options import BODY_OPTIONS, allowed_values, normalize_choice

logger = logging.getLogger(__name__)

# characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _render_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(_render_value(item)) for item in value)
    return value


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class Document:
    """Create, replace, update, fetch and delete a document in an index.

    Neither the index nor the type has to exist beforehand; the cluster
    creates them when the first document is stored.
    Index, type and id are percent-encoded as URL path segments, so an
    id such as ``"a/b"`` is sent as ``a%2Fb``.

    Args:
        index: The index the document belongs to.
        doc_type: The type the document belongs to.
        doc_id: The document id.  Required for every operation except
            :meth:`do_index`, where a missing id lets the cluster
            generate one.
        client: Client used to send requests.  Falls back to the client
            registered with :func:`~opensearch_document.client.set_default_client`.
        strict: Raise :class:`InvalidOptionError` for enumerated options
            given an unknown value instead of ignoring it.  Defaults to
            the value set by :func:`~opensearch_document.client.set_default_strict`.
    """

    def __init__(
        self,
        index: Optional[str] = None,
        doc_type: Optional[str] = None,
        doc_id: Optional[str] = None,
        *,
        client: Optional[DocumentClient] = None,
        strict: Optional[bool] = None,
    ):
        self._index = index
        self._type = doc_type
        self._id = doc_id
        self._client = client
        self.strict = get_default_strict() if strict is None else strict
        self._params: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # internal helpers

    def _option(self, name: str, value: Any):
        if value is None:
            return self._params.get(name)
        self._params[name] = value
        return self

    def _choice(self, name: str, value: Any):
        if value is None:
            return self._params.get(name)

        normalized = normalize_choice(name, value)
        if normalized is None:
            if self.strict:
                raise InvalidOptionError(name, value, allowed_values(name))
            logger.warning(
                "Ignoring invalid %s value %r (allowed: %s)",
                name,
                value,
                ", ".join(allowed_values(name)),
            )
            return self

        self._params[name] = normalized
        return self

    def _mapping(self, name: str, value: Any):
        if value is None:
            return self._params.get(name)
        if not isinstance(value, Mapping):
            raise TypeError("Argument must be a mapping")
        # json.dumps only serializes plain dicts
        self._params[name] = dict(value)
        return self

    # ------------------------------------------------------------------
    # identity

    def index(self, idx: Optional[str] = None):
        """Get or set the index the document belongs to."""
        if idx is None:
            return self._index
        self._index = idx
        return self

    def type(self, doc_type: Optional[str] = None):
        """Get or set the type of the document."""
        if doc_type is None:
            return self._type
        self._type = doc_type
        return self

    def id(self, doc_id: Optional[str] = None):
        """Get or set the document id."""
        if doc_id is None:
            return self._id
        self._id = doc_id
        return self

    def client(self, client: Optional[DocumentClient] = None):
        """Get or set the client; reading falls back to the default client."""
        if client is None:
            return self._client if self._client is not None else get_default_client()
        self._client = client
        return self

    # ------------------------------------------------------------------
    # options

    def routing(self, route: Optional[str] = None):
        """Routing value fed to the shard hash instead of the document id.

        Valid for index, delete, get and update.
        """
        return self._option("routing", route)

    def parent(self, parent: Optional[str] = None):
        """Parent id of a child document; also used as routing unless set.

        Valid for index, delete, get and update.
        """
        return self._option("parent", parent)

    def timestamp(self, ts: Optional[str] = None):
        """Document timestamp.  Defaults to the indexing time on the server."""
        return self._option("timestamp", ts)

    def ttl(self, length: Any = None):
        """Time to live, in milliseconds or as a time value such as ``"1d"``.

        Relative to the document timestamp.  Valid for index and update.
        """
        return self._option("ttl", length)

    def timeout(self, length: Any = None):
        """How long to wait for the primary shard.  Valid for index, delete and update."""
        return self._option("timeout", length)

    def refresh(self, flag: Optional[bool] = None):
        """Refresh the index right after the operation."""
        return self._option("refresh", flag)

    def version(self, version: Optional[int] = None):
        """Expected version, for optimistic concurrency control."""
        return self._option("version", version)

    def version_type(self, vt: Any = None):
        """``internal`` (default) or ``external`` versioning."""
        return self._choice("version_type", vt)

    def percolate(self, qry: Optional[str] = None):
        """Percolate at index time; ``*`` matches all registered queries."""
        return self._option("percolate", qry)

    def op_type(self, op: Any = None):
        """``index`` (create or replace) or ``create`` (create only)."""
        return self._choice("op_type", op)

    def replication(self, mode: Any = None):
        """Replication mode: ``async``, ``sync`` or ``default``."""
        return self._choice("replication", mode)

    def consistency(self, level: Any = None):
        """Write consistency: ``one``, ``quorum``, ``all`` or ``default``."""
        return self._choice("consistency", level)

    def preference(self, pref: Optional[str] = None):
        """Shard replicas to run a get on, e.g. ``_primary`` or ``_local``."""
        return self._option("preference", pref)

    def realtime(self, flag: Optional[bool] = None):
        """Whether a get is realtime (the server default) or waits for refresh."""
        return self._option("realtime", flag)

    def fields(self, fields: Any = None):
        """Fields to return on get and update.

        A single name is appended to the current list; a list or tuple
        replaces it.
        """
        if self._params.get("fields") is None:
            self._params["fields"] = []

        if fields is None:
            return self._params["fields"]

        if isinstance(fields, str):
            self._params["fields"].append(fields)
        elif isinstance(fields, (list, tuple)):
            self._params["fields"] = list(fields)
        else:
            raise TypeError("Argument must be string or list")

        return self

    def script(self, script: Optional[str] = None):
        """Update script."""
        return self._option("script", script)

    def lang(self, lang: Optional[str] = None):
        """Language of the update script."""
        return self._option("lang", lang)

    def params(self, params: Optional[Mapping[str, Any]] = None):
        """Parameters passed to the update script."""
        return self._mapping("params", params)

    def retry_on_conflict(self, num: Optional[int] = None):
        """How many times an update retries after a version conflict."""
        return self._option("retry_on_conflict", num)

    def upsert(self, doc: Optional[Mapping[str, Any]] = None):
        """Document stored when the update target does not exist."""
        return self._mapping("upsert", doc)

    def source(self, doc: Optional[Mapping[str, Any]] = None):
        """Document body for index, or the partial document for update."""
        return self._mapping("source", doc)

    # ------------------------------------------------------------------
    # serialization

    def client_params(self) -> dict[str, Any]:
        """Options that travel in the URL, ready to hand to a client.

        Body options are left out, lists are comma-joined and booleans
        become ``"true"``/``"false"``.
        """
        rendered: dict[str, Any] = {}
        for name, value in self._params.items():
            if name in BODY_OPTIONS:
                continue
            # an empty list (left by a plain fields() read) is not sent as "fields="
            if isinstance(value, (list, tuple)) and not value:
                continue
            rendered[name] = _render_value(value)
        return rendered

    def query_string(self) -> str:
        """Return the URL options as ``key=value`` pairs joined by ``&``."""
        return "&".join(
            f"{name}={quote(str(value), safe=_URI_COMPONENT_SAFE)}"
            for name, value in self.client_params().items()
        )

    def update_body(self) -> dict[str, Any]:
        """Body of an update request; ``source`` is sent as ``doc``."""
        body: dict[str, Any] = {}
        for name in ("script", "lang", "params", "upsert"):
            if self._params.get(name) is not None:
                body[name] = self._params[name]
        if self._params.get("source") is not None:
            body["doc"] = self._params["source"]
        return body

    def to_json(self) -> str:
        """Serialize the options (not index, type or id) as JSON."""
        return json.dumps(self._params)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return (
            f"Document(index={self._index!r}, doc_type={self._type!r}, "
            f"doc_id={self._id!r}, options={self._params!r})"
        )

    def _type_name(self) -> str:
        return "document"

    def to_dict(self) -> dict[str, Any]:
        """Return the internal option map.  Mutating it mutates the document."""
        return self._params

    # ------------------------------------------------------------------
    # requests

    def _require_client(self) -> DocumentClient:
        client = self.client()
        if client is None:
            raise ClientNotSetError("No client set")
        return client

    def _require_identity(self) -> None:
        if self._index is None or self._type is None or self._id is None:
            raise MissingFieldError("Index, type, and id must be set")

    def _path(self, *segments: Any) -> str:
        return "".join(f"/{_segment(segment)}" for segment in segments)

    def _with_query(self, url: str) -> str:
        query = self.query_string()
        if query:
            return f"{url}?{query}"
        return url

    def do_get(self) -> Any:
        """Fetch the document.

        Options are passed to the client as a dict rather than encoded
        into the URL.
        """
        client = self._require_client()
        self._require_identity()

        url = self._path(self._index, self._type, self._id)
        logger.debug("GET %s", url)
        return client.get(url, self.client_params())

    def do_index(self) -> Any:
        """Store the document from :meth:`source`.

        Uses POST so the server assigns an id when none is set, PUT
        otherwise.
        """
        client = self._require_client()
        if self._index is None or self._type is None:
            raise MissingFieldError("Index and type must be set")
        if self._params.get("source") is None:
            raise MissingFieldError("No source document found")

        url = self._path(self._index, self._type)
        if self._id is not None:
            url = f"{url}/{_segment(self._id)}"
        url = self._with_query(url)
        data = json.dumps(self._params["source"])

        if self._id is None:
            logger.debug("POST %s", url)
            return client.post(url, data)
        logger.debug("PUT %s", url)
        return client.put(url, data)

    def do_update(self) -> Any:
        """Update the document with a script or a partial document.

        If the document does not exist, the :meth:`upsert` document is
        stored instead when one is set.
        """
        client = self._require_client()
        self._require_identity()
        if self._params.get("script") is None and self._params.get("source") is None:
            raise MissingFieldError("Update script or document required")

        url = self._with_query(self._path(self._index, self._type, self._id) + "/_update")
        logger.debug("POST %s", url)
        return client.post(url, json.dumps(self.update_body()))

    def do_delete(self) -> Any:
        """Delete the document."""
        client = self._require_client()
        self._require_identity()

        url = self._with_query(self._path(self._index, self._type, self._id))
        logger.debug("DELETE %s", url)
        return client.delete(url, "")
