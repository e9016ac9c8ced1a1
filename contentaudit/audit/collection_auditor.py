from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from contentaudit.audit.base import BaseCollectionAuditor
from contentaudit.logging.logger import Log
from contentaudit.schema.models import Collection
from contentaudit.store.models import DocumentRef


class CollectionAuditor(BaseCollectionAuditor):
    """Flags documents stored where the schema does not expect them."""

    def audit(
        self,
        collection: Collection,
        documents: Sequence[DocumentRef],
        root_path: Path,
        use_default_values: bool,
    ) -> bool:
        Log.info(f"Checking collection {collection.name}")
        warning = False
        expected_extension = f".{collection.format}"
        for document in documents:
            location = root_path / document.path
            doc_path = PurePosixPath(document.path)
            if collection.path and not doc_path.is_relative_to(collection.path):
                warning = True
                Log.warning(
                    f"WARNING: document is outside of the collection path "
                    f"`{collection.path}`\n\nlocation: {location}",
                    collection=collection.name,
                )
            if doc_path.suffix != expected_extension:
                warning = True
                Log.warning(
                    f"WARNING: there is a file with extension `{doc_path.suffix}` "
                    f"but in your schema it is defined to be `{expected_extension}`"
                    f"\n\nlocation: {location}",
                    collection=collection.name,
                )
        return warning
