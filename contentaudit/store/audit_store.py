from typing import Any

from contentaudit.logging.logger import Log
from contentaudit.store.base import BaseDocumentStore


class AuditDocumentStore(BaseDocumentStore):
    """Read-through wrapper that discards writes.

    Lets the document auditor run the full write path without touching
    content when clean mode is off.
    """

    def __init__(self, inner: BaseDocumentStore) -> None:
        self._inner = inner
        self.skipped_writes: list[str] = []

    def list_paths(self, collection: str) -> list[str]:
        return self._inner.list_paths(collection)

    def get(self, collection: str, path: str) -> dict[str, Any]:
        return self._inner.get(collection, path)

    def put(self, collection: str, path: str, data: dict[str, Any]) -> None:
        self.skipped_writes.append(path)
        Log.debug(f"Audit mode: skipping write to {path}")
