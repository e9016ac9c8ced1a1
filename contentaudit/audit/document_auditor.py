from collections.abc import Sequence
from pathlib import Path

from contentaudit.audit.base import BaseDocumentAuditor
from contentaudit.audit.validator import conform_document, validate_document
from contentaudit.logging.logger import Log
from contentaudit.schema.models import Collection
from contentaudit.store.base import BaseDocumentStore
from contentaudit.store.exceptions import DocumentNotFoundError, DocumentParseError
from contentaudit.store.models import DocumentRef


class DocumentAuditor(BaseDocumentAuditor):
    """Validates each document and resubmits its conformed form to the store.

    Whether the resubmission reaches disk is up to the store: an
    AuditDocumentStore discards it.
    """

    def __init__(self, store: BaseDocumentStore) -> None:
        self._store = store

    def audit(
        self,
        collection: Collection,
        documents: Sequence[DocumentRef],
        root_path: Path,
        use_default_values: bool,
        verbose: bool,
    ) -> bool:
        Log.info(f"Checking documents in {collection.name}")
        error = False
        for document in documents:
            if not self._audit_document(collection, document, root_path, use_default_values, verbose):
                error = True
        return error

    def _audit_document(
        self,
        collection: Collection,
        document: DocumentRef,
        root_path: Path,
        use_default_values: bool,
        verbose: bool,
    ) -> bool:
        """Return True if the document passed."""
        location = root_path / document.path
        try:
            data = self._store.get(collection.name, document.path)
        except (DocumentParseError, DocumentNotFoundError) as exc:
            Log.error(f"Error in document {location}: {exc}", collection=collection.name)
            return False

        payload = conform_document(collection, data, use_default_values)
        issues = validate_document(collection, payload)
        if issues:
            for issue in issues:
                Log.error(f"Error in document {location}: {issue}", collection=collection.name)
            return False

        if payload != data:
            Log.debug(f"Submitting conformed payload for {location}")
            try:
                self._store.put(collection.name, document.path, payload)
            except DocumentNotFoundError as exc:
                Log.error(f"Error in document {location}: {exc}", collection=collection.name)
                return False
        if verbose:
            Log.info(f"Document {location} is valid")
        return True
