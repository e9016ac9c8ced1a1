from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from contentaudit.schema.models import Collection
from contentaudit.store.models import DocumentRef


class BaseCollectionAuditor(ABC):
    """Contract for collection-level checks."""

    @abstractmethod
    def audit(
        self,
        collection: Collection,
        documents: Sequence[DocumentRef],
        root_path: Path,
        use_default_values: bool,
    ) -> bool:
        """Check collection-wide conditions over the listed documents.

        Returns:
            True if any warning was found.
        """


class BaseDocumentAuditor(ABC):
    """Contract for per-document validation and repair."""

    @abstractmethod
    def audit(
        self,
        collection: Collection,
        documents: Sequence[DocumentRef],
        root_path: Path,
        use_default_values: bool,
        verbose: bool,
    ) -> bool:
        """Validate each document and resubmit the conformed payload.

        Returns:
            True if any document had errors.
        """
