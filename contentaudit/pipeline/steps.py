from contentaudit.confirmation.base import BaseConfirmationGate
from contentaudit.logging.logger import Log
from contentaudit.pipeline.collection_runner import CollectionRunner
from contentaudit.pipeline.exceptions import AuditDeclinedError
from contentaudit.pipeline.pipeline import PipelineStep, RunContext
from contentaudit.pipeline.reporter import report
from contentaudit.telemetry.client import Telemetry

INVOKE_EVENT = "contentaudit:cli:audit:invoke"


class SubmitTelemetryStep(PipelineStep):
    def __init__(self, telemetry: Telemetry) -> None:
        self._telemetry = telemetry

    def run(self, context: RunContext) -> RunContext:
        self._telemetry.submit_record(
            {
                "name": INVOKE_EVENT,
                "clean": context.options.clean,
                "useDefaults": context.options.use_default_values,
            }
        )
        return context


class ConfirmCleanStep(PipelineStep):
    """Gate clean mode behind an explicit operator confirmation."""

    def __init__(self, gate: BaseConfirmationGate) -> None:
        self._gate = gate

    def run(self, context: RunContext) -> RunContext:
        if not context.options.clean:
            return context
        Log.info(
            "You are using the `--clean` option. This will modify your content as if "
            "a user is submitting a form. Before running this you should have a clean "
            "git tree so unwanted changes can be undone."
        )
        if not self._gate.confirm("Do you want to continue?"):
            Log.warning("Audit not complete")
            raise AuditDeclinedError("Operator declined clean mode")
        return context


class WarnDefaultValuesStep(PipelineStep):
    def run(self, context: RunContext) -> RunContext:
        if context.options.use_default_values and not context.options.clean:
            Log.warning(
                "WARNING: using `--use-default-values` without the `--clean` flag has "
                "no effect. Please re-run audit and add the `--clean` flag"
            )
        return context


class AuditCollectionsStep(PipelineStep):
    """Audit every declared collection in schema order, one at a time."""

    def __init__(self, runner: CollectionRunner) -> None:
        self._runner = runner

    def run(self, context: RunContext) -> RunContext:
        schema = context.schema_provider.get_schema()
        for collection in schema.get_collections():
            self._runner.run(collection, context)
        if context.faults:
            names = ", ".join(fault.collection for fault in context.faults)
            Log.warning(f"{len(context.faults)} collection(s) could not be audited: {names}")
        return context


class ReportOutcomeStep(PipelineStep):
    def run(self, context: RunContext) -> RunContext:
        context.outcome = report(context.state)
        return context
