from pathlib import Path
from typing import Any

from contentaudit.schema.exceptions import CollectionNotDeclaredError
from contentaudit.schema.models import Schema
from contentaudit.store.base import BaseDocumentStore
from contentaudit.store.exceptions import (
    CollectionNotFoundError,
    DocumentNotFoundError,
    DocumentParseError,
)
from contentaudit.store.parsing import parse_document, serialize_document


class FilesystemDocumentStore(BaseDocumentStore):
    """Documents stored as files under {root}/{collection.path}."""

    def __init__(self, root: Path, schema: Schema) -> None:
        self._root = root
        self._schema = schema

    def list_paths(self, collection: str) -> list[str]:
        directory = self._root / self._collection_path(collection)
        if not directory.is_dir():
            return []
        return sorted(
            path.relative_to(self._root).as_posix()
            for path in directory.rglob("*")
            if path.is_file()
        )

    def get(self, collection: str, path: str) -> dict[str, Any]:
        self._collection_path(collection)
        file_path = self._root / path
        if not file_path.is_file():
            raise DocumentNotFoundError(f"Document not found: {path}")
        try:
            raw = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentParseError(f"Document {path} is not UTF-8 text: {exc}") from exc
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(f"Document not found: {path}") from exc
        except OSError as exc:
            raise DocumentParseError(f"Document {path} could not be read: {exc}") from exc
        return parse_document(path, raw)

    def put(self, collection: str, path: str, data: dict[str, Any]) -> None:
        self._collection_path(collection)
        file_path = self._root / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(serialize_document(data), encoding="utf-8")

    def _collection_path(self, collection: str) -> str:
        try:
            return self._schema.get_collection(collection).path
        except CollectionNotDeclaredError as exc:
            raise CollectionNotFoundError(str(exc)) from exc
