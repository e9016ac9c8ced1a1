from contentaudit.audit.base import BaseCollectionAuditor, BaseDocumentAuditor
from contentaudit.logging.logger import Log
from contentaudit.pipeline.models import AuditOutcome, CollectionFault
from contentaudit.pipeline.pipeline import RunContext
from contentaudit.schema.models import Collection
from contentaudit.store.models import DocumentRef


class CollectionRunner:
    """Audit one collection, isolating any fault from the rest of the run."""

    def __init__(
        self,
        collection_auditor: BaseCollectionAuditor,
        document_auditor: BaseDocumentAuditor,
    ) -> None:
        self._collection_auditor = collection_auditor
        self._document_auditor = document_auditor

    def run(self, collection: Collection, context: RunContext) -> AuditOutcome | None:
        """Audit a collection and fold its verdict into the run state.

        Returns None when the collection faulted; a faulted collection
        contributes neither a warning nor an error.
        """
        options = context.options
        # Defaults only reach a store that keeps writes.
        use_default_values = options.use_default_values and options.clean
        try:
            # Listing stays unhydrated so one malformed body cannot fail it.
            result = context.store.query(
                collection.name,
                first=-1,
                filter_chain=[],
                hydrator=DocumentRef,
            )
            warning = self._collection_auditor.audit(
                collection,
                result.edges,
                context.root_path,
                use_default_values,
            )
            error = self._document_auditor.audit(
                collection,
                result.edges,
                context.root_path,
                use_default_values,
                options.verbose,
            )
        except Exception as exc:
            self._handle_failure(collection, exc, context)
            return None

        outcome = AuditOutcome(warning=bool(warning), error=bool(error))
        context.outcomes[collection.name] = outcome
        context.state.record(outcome)
        Log.debug(
            f"Collection {collection.name} audited "
            f"(warning={outcome.warning}, error={outcome.error})"
        )
        return outcome

    def _handle_failure(self, collection: Collection, exc: Exception, context: RunContext) -> None:
        cause = f"{type(exc).__name__}: {exc}"
        context.faults.append(CollectionFault(collection=collection.name, cause=cause))
        Log.error(f"Collection {collection.name} could not be audited: {cause}")
