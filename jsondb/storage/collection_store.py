from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
import logging
import threading
from typing import Any, Dict, List, Optional

from .document_store import DocumentStore
from .result import Result

logger = logging.getLogger(__name__)

# Missing/unreadable file, bad or too deeply nested JSON.
READ_ERRORS = (OSError, ValueError, RecursionError)
# Disk full, permissions, values json can't encode (sets, cycles).
WRITE_ERRORS = (OSError, ValueError, TypeError, RecursionError)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def next_id(items: List[Any]) -> int:
    """1 + the largest numeric id in ``items``; anything else counts as 0."""
    ids = [it.get("id") for it in items if isinstance(it, dict)]
    return max([0] + [i for i in ids if _is_number(i)]) + 1


def _index_of(items, item_id) -> Optional[int]:
    if not isinstance(items, list):
        return None
    for i, it in enumerate(items):
        if isinstance(it, dict) and it.get("id") == item_id:
            return i
    return None


def _without_id(fields: Mapping) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k != "id"}


class CollectionStore:
    """Named collections of items inside a single JSON document.

    Every call is a full read -> modify in memory -> full write of the
    document; nothing is cached between calls. Reads fail soft (an
    unreadable document looks empty); only ``create`` lets a write error
    escape.

    With ``serialize_writes`` on, mutations run one at a time under an
    in-process lock. With it off, two overlapping mutations can both read
    the same document and the later write silently drops the earlier one.
    """

    def __init__(self, documents: Optional[DocumentStore] = None, serialize_writes: bool = True):
        self.documents = documents
        self.serialize_writes = serialize_writes
        self._lock = threading.Lock()

    def init_app(self, app):
        """Bind to ``JSONDB_PATH`` and make sure the file exists.

        A failure to create the file propagates; the app can't start without it.
        """
        self.documents = DocumentStore(app.config["JSONDB_PATH"])
        self.serialize_writes = bool(app.config.get("JSONDB_SERIALIZE_WRITES", True))
        app.extensions["jsondb"] = self
        self.initialize()

    def _docs(self) -> DocumentStore:
        if self.documents is None:
            raise RuntimeError("CollectionStore is not bound to a document; call init_app() first")
        return self.documents

    @contextmanager
    def _mutating(self):
        if not self.serialize_writes:
            yield
            return
        with self._lock:
            yield

    def _load(self) -> Result:
        docs = self._docs()
        try:
            doc = docs.read_document()
        except READ_ERRORS as e:
            logger.warning("Could not read %s: %s", docs.path, e)
            return Result.failed(e)
        if not isinstance(doc, dict):
            logger.warning("Document at %s is not a JSON object", docs.path)
            return Result.failed(ValueError("document root must be a JSON object"))
        return Result.ok(doc)

    def _save(self, doc: Dict[str, Any]) -> Result:
        docs = self._docs()
        try:
            docs.write_document(doc)
        except WRITE_ERRORS as e:
            logger.warning("Could not write %s: %s", docs.path, e)
            return Result.failed(e)
        return Result.ok(doc)

    def initialize(self):
        self._docs().initialize()

    # -----------------------------
    # Result-returning operations
    # -----------------------------
    def read_collection(self, collection: str) -> Result:
        loaded = self._load()
        if loaded.is_error:
            return loaded
        items = loaded.value.get(collection)
        if not isinstance(items, list):
            return Result.empty()
        return Result.ok(items)

    def find(self, collection: str, item_id) -> Result:
        found = self.read_collection(collection)
        if not found.is_ok:
            return found
        idx = _index_of(found.value, item_id)
        return Result.empty() if idx is None else Result.ok(found.value[idx])

    def update(self, collection: str, item_id, patch: Mapping) -> Result:
        if not isinstance(patch, Mapping):
            return Result.failed(TypeError("patch must be a mapping"))
        with self._mutating():
            loaded = self._load()
            if loaded.is_error:
                return loaded
            doc = loaded.value
            items = doc.get(collection)
            idx = _index_of(items, item_id)
            if idx is None:
                return Result.empty()
            item = items[idx]
            item.update(_without_id(patch))
            saved = self._save(doc)
        return Result.ok(item) if saved.is_ok else saved

    def delete(self, collection: str, item_id) -> Result:
        with self._mutating():
            loaded = self._load()
            if loaded.is_error:
                return loaded
            doc = loaded.value
            items = doc.get(collection)
            idx = _index_of(items, item_id)
            if idx is None:
                return Result.empty()
            removed = items.pop(idx)
            saved = self._save(doc)
        return Result.ok(removed) if saved.is_ok else saved

    # -----------------------------
    # Plain-value operations
    # -----------------------------
    def list_all(self, collection: str) -> List[Dict[str, Any]]:
        return self.read_collection(collection).unwrap_or([])

    def get_one(self, collection: str, item_id) -> Optional[Dict[str, Any]]:
        return self.find(collection, item_id).unwrap_or(None)

    def create(self, collection: str, payload: Mapping) -> Dict[str, Any]:
        """Append ``payload`` under a fresh id and return the stored item.

        An unreadable document is treated as empty, so a transient read
        error here can drop other collections on the next write. Write
        errors are raised.
        """
        if not isinstance(payload, Mapping):
            raise TypeError("payload must be a mapping")
        with self._mutating():
            doc = self._load().unwrap_or({})
            items = doc.get(collection)
            if not isinstance(items, list):
                if items is not None:
                    logger.warning("Replacing non-list collection %r", collection)
                items = doc[collection] = []
            item = {"id": next_id(items)}
            item.update(_without_id(payload))
            items.append(item)
            self._docs().write_document(doc)
        return item

    def update_item(self, collection: str, item_id, patch: Mapping) -> Optional[Dict[str, Any]]:
        return self.update(collection, item_id, patch).unwrap_or(None)

    def delete_item(self, collection: str, item_id) -> bool:
        return self.delete(collection, item_id).is_ok
