from contentaudit.config.settings import Settings
from contentaudit.schema.models import Schema
from contentaudit.store.base import BaseDocumentStore
from contentaudit.store.filesystem_store import FilesystemDocumentStore
from contentaudit.store.postgres_store import PostgresDocumentStore


class DocumentStoreFactory:
    """Creates the configured document store backend."""

    BACKENDS = ("filesystem", "postgres")

    @classmethod
    def create(cls, settings: Settings, schema: Schema) -> BaseDocumentStore:
        backend = settings.store_backend.lower()
        if backend == "filesystem":
            return FilesystemDocumentStore(settings.content_root, schema)
        if backend == "postgres":
            return PostgresDocumentStore()
        raise ValueError(
            f"Unknown store backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
