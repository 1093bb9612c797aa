"""Persistent per-document cache of summaries and reconciled risks."""

import dataclasses
import json
from typing import Any

from clausemap.cache.base import BaseStorage
from clausemap.cache.models import PLACEHOLDER_FILENAME, CachedDocument, utc_now
from clausemap.logging.logger import Log
from clausemap.risks.models import RiskRecord

DEFAULT_KEY_PREFIX = "doc_cache_"
DEFAULT_CURRENT_DOC_KEY = "current_doc_id"


class DocumentCache:
    """Document snapshots keyed by document id, plus a "current document" marker.

    Each document lives under ``key_prefix + doc_id`` as JSON. Writes are
    whole-record; ``patch`` merges a partial update over the stored record so
    fields it does not mention are kept. A stored value that fails to decode is
    reported as absent.
    """

    def __init__(
        self,
        storage: BaseStorage,
        *,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        current_doc_key: str = DEFAULT_CURRENT_DOC_KEY,
    ) -> None:
        self._storage = storage
        self._key_prefix = key_prefix
        self._current_doc_key = current_doc_key

    def get(self, doc_id: str) -> CachedDocument | None:
        raw = self._storage.get_item(self._key(doc_id))
        if raw is None:
            return None
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise TypeError(f"expected an object, got {type(data).__name__}")
            return CachedDocument.from_dict(data)
        except (
            json.JSONDecodeError,
            KeyError,
            TypeError,
            ValueError,
            OverflowError,
            OSError,
        ) as exc:
            Log.warning(f"Ignoring corrupt cache entry: {exc}", doc_id=doc_id)
            return None

    def put(self, doc: CachedDocument) -> None:
        self._storage.set_item(self._key(doc.doc_id), json.dumps(doc.to_dict()))
        self.set_current_doc_id(doc.doc_id)

    def patch(self, doc_id: str, **fields: Any) -> CachedDocument:
        """Merge ``fields`` over the stored document, creating it if needed.

        A new document gets a placeholder filename and the current time as
        ``uploaded_at`` unless ``fields`` provides them.

        Raises:
            TypeError: if a field name is not a CachedDocument field.
        """
        names = sorted(fields)
        existing = self.get(doc_id)
        if existing is None:
            base = CachedDocument(
                doc_id=doc_id,
                filename=fields.pop("filename", None) or PLACEHOLDER_FILENAME,
                uploaded_at=fields.pop("uploaded_at", None) or utc_now(),
            )
        else:
            base = existing
        updated = dataclasses.replace(base, **fields)
        self.put(updated)
        Log.debug(f"Patched cache fields {names}", doc_id=doc_id)
        return updated

    def get_summary(self, doc_id: str) -> str | None:
        doc = self.get(doc_id)
        if doc is None or not doc.summary:
            return None
        return doc.summary

    def get_risks(self, doc_id: str) -> list[RiskRecord] | None:
        doc = self.get(doc_id)
        if doc is None or not doc.risks:
            return None
        return doc.risks

    def is_complete(self, doc_id: str) -> bool:
        """True once both a summary and a non-empty risk list are cached."""
        return self.get_summary(doc_id) is not None and self.get_risks(doc_id) is not None

    def get_current_doc_id(self) -> str | None:
        return self._storage.get_item(self._current_doc_key)

    def set_current_doc_id(self, doc_id: str) -> None:
        self._storage.set_item(self._current_doc_key, doc_id)

    def clear_current_doc_id(self) -> None:
        self._storage.remove_item(self._current_doc_key)

    def clear_all(self) -> None:
        """Remove every cached document and the current-document marker."""
        removed = 0
        for key in self._storage.keys():
            if key.startswith(self._key_prefix):
                self._storage.remove_item(key)
                removed += 1
        self.clear_current_doc_id()
        Log.info(f"Cleared {removed} cached documents")

    def _key(self, doc_id: str) -> str:
        return f"{self._key_prefix}{doc_id}"
