from contentaudit.audit.collection_auditor import CollectionAuditor
from contentaudit.audit.document_auditor import DocumentAuditor
from contentaudit.config.settings import Settings
from contentaudit.confirmation.base import BaseConfirmationGate
from contentaudit.confirmation.typer_gate import TyperConfirmationGate
from contentaudit.logging.logger import Log
from contentaudit.pipeline.collection_runner import CollectionRunner
from contentaudit.pipeline.models import AuditOptions, RunState
from contentaudit.pipeline.pipeline import PipelineStep, RunContext
from contentaudit.pipeline.steps import (
    AuditCollectionsStep,
    ConfirmCleanStep,
    ReportOutcomeStep,
    SubmitTelemetryStep,
    WarnDefaultValuesStep,
)
from contentaudit.schema.provider import SchemaProvider
from contentaudit.store.audit_store import AuditDocumentStore
from contentaudit.store.base import BaseDocumentStore
from contentaudit.store.factory import DocumentStoreFactory
from contentaudit.telemetry.client import Telemetry


class AuditPipeline:
    """Runs the audit steps in order.

    Steps: telemetry -> confirm clean -> default-values advisory ->
    audit collections -> report.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def run(self, context: RunContext) -> RunState:
        """Run every step against the context.

        Raises:
            AuditDeclinedError: if clean mode was declined; nothing was audited.
        """
        mode = "clean" if context.options.clean else "audit"
        Log.info(f"Starting content audit of {context.root_path} ({mode} mode)")
        for step in self._steps:
            context = step.run(context)
        return context.state


def build_pipeline(
    settings: Settings,
    options: AuditOptions,
    gate: BaseConfirmationGate | None = None,
    telemetry: Telemetry | None = None,
) -> tuple[AuditPipeline, RunContext]:
    """Build the pipeline and its run context from settings and options."""
    schema_provider = SchemaProvider(settings.resolved_schema_path())
    store: BaseDocumentStore = DocumentStoreFactory.create(
        settings, schema_provider.get_schema()
    )
    if not options.clean:
        store = AuditDocumentStore(store)
    if telemetry is None:
        telemetry = Telemetry(
            disabled=options.no_telemetry or settings.telemetry_disabled,
            endpoint=settings.telemetry_endpoint,
            timeout_seconds=settings.telemetry_timeout_seconds,
        )
    runner = CollectionRunner(
        collection_auditor=CollectionAuditor(),
        document_auditor=DocumentAuditor(store),
    )
    steps: list[PipelineStep] = [
        SubmitTelemetryStep(telemetry),
        ConfirmCleanStep(gate if gate is not None else TyperConfirmationGate()),
        WarnDefaultValuesStep(),
        AuditCollectionsStep(runner),
        ReportOutcomeStep(),
    ]
    context = RunContext(
        store=store,
        schema_provider=schema_provider,
        root_path=settings.content_root,
        options=options,
    )
    return AuditPipeline(steps), context
