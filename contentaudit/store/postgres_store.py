from typing import Any

from psycopg.rows import dict_row

from contentaudit.database.connection import get_connection
from contentaudit.database.models import DocumentRecord
from contentaudit.store.base import BaseDocumentStore
from contentaudit.store.exceptions import DocumentNotFoundError
from contentaudit.store.parsing import parse_document, serialize_document


class PostgresDocumentStore(BaseDocumentStore):
    """Documents stored as text bodies in the content_documents table."""

    def list_paths(self, collection: str) -> list[str]:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT path
                    FROM content_documents
                    WHERE collection = %s
                    ORDER BY path
                    """,
                    (collection,),
                )
                rows = cur.fetchall()
        return [row[0] for row in rows]

    def get(self, collection: str, path: str) -> dict[str, Any]:
        record = self.find_record(collection, path)
        if record is None or record.body is None:
            raise DocumentNotFoundError(f"Document not found: {path}")
        return parse_document(path, record.body)

    def put(self, collection: str, path: str, data: dict[str, Any]) -> None:
        """Replace a document body.

        Raises:
            DocumentNotFoundError: if no row exists for this path.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE content_documents
                    SET body = %s, updated_at = NOW()
                    WHERE collection = %s AND path = %s
                    """,
                    (serialize_document(data), collection, path),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document not found: {path}")
            conn.commit()

    def find_record(self, collection: str, path: str) -> DocumentRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT collection, path, body, updated_at
                    FROM content_documents
                    WHERE collection = %s AND path = %s
                    """,
                    (collection, path),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return DocumentRecord(
            collection=row["collection"],
            path=row["path"],
            body=row["body"],
            updated_at=row["updated_at"],
        )
