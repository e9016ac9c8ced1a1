from dataclasses import dataclass
from datetime import datetime


@dataclass
class DocumentRecord:
    """Represents a row from the content_documents table."""

    collection: str
    path: str
    body: str | None = None
    updated_at: datetime | None = None
