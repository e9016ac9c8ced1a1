import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from contentaudit.pipeline.exceptions import AuditDeclinedError
from contentaudit.pipeline.models import AuditOptions, CollectionFault, RunState
from contentaudit.pipeline.pipeline import RunContext
from contentaudit.pipeline.reporter import Outcome
from contentaudit.pipeline.steps import (
    INVOKE_EVENT,
    AuditCollectionsStep,
    ConfirmCleanStep,
    ReportOutcomeStep,
    SubmitTelemetryStep,
    WarnDefaultValuesStep,
)
from contentaudit.schema.models import Schema


def _make_context(options: AuditOptions | None = None) -> RunContext:
    return RunContext(
        store=MagicMock(),
        schema_provider=MagicMock(),
        root_path=Path("/site"),
        options=options or AuditOptions(),
    )


class TestSubmitTelemetryStep:
    def test_submits_invoke_event_with_flags(self) -> None:
        telemetry = MagicMock()
        context = _make_context(AuditOptions(clean=True, use_default_values=False))

        SubmitTelemetryStep(telemetry).run(context)

        telemetry.submit_record.assert_called_once_with(
            {"name": INVOKE_EVENT, "clean": True, "useDefaults": False}
        )


class TestConfirmCleanStep:
    def test_skips_gate_without_clean(self) -> None:
        gate = MagicMock()

        ConfirmCleanStep(gate).run(_make_context())

        gate.confirm.assert_not_called()

    def test_continues_when_confirmed(self) -> None:
        gate = MagicMock()
        gate.confirm.return_value = True
        context = _make_context(AuditOptions(clean=True))

        assert ConfirmCleanStep(gate).run(context) is context
        gate.confirm.assert_called_once_with("Do you want to continue?")

    def test_raises_when_declined(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="contentaudit")
        gate = MagicMock()
        gate.confirm.return_value = False

        with pytest.raises(AuditDeclinedError):
            ConfirmCleanStep(gate).run(_make_context(AuditOptions(clean=True)))

        assert "clean git tree" in caplog.text
        assert "Audit not complete" in caplog.text


class TestWarnDefaultValuesStep:
    def test_warns_without_clean(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="contentaudit")

        WarnDefaultValuesStep().run(_make_context(AuditOptions(use_default_values=True)))

        assert "has no effect" in caplog.text

    def test_silent_with_clean(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="contentaudit")

        WarnDefaultValuesStep().run(
            _make_context(AuditOptions(clean=True, use_default_values=True))
        )

        assert caplog.text == ""


class TestAuditCollectionsStep:
    def test_runs_each_collection_in_schema_order(self, schema: Schema) -> None:
        runner = MagicMock()
        context = _make_context()
        context.schema_provider.get_schema.return_value = schema

        AuditCollectionsStep(runner).run(context)

        assert [c.args[0].name for c in runner.run.call_args_list] == ["posts", "pages"]

    def test_summarises_faults(
        self, schema: Schema, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="contentaudit")
        runner = MagicMock()
        context = _make_context()
        context.schema_provider.get_schema.return_value = schema
        runner.run.side_effect = lambda collection, ctx: ctx.faults.append(
            CollectionFault(collection=collection.name, cause="boom")
        )

        AuditCollectionsStep(runner).run(context)

        assert "2 collection(s) could not be audited: posts, pages" in caplog.text

    def test_schema_failure_propagates(self) -> None:
        context = _make_context()
        context.schema_provider.get_schema.side_effect = RuntimeError("no schema")

        with pytest.raises(RuntimeError, match="no schema"):
            AuditCollectionsStep(MagicMock()).run(context)


class TestReportOutcomeStep:
    def test_stores_outcome_on_context(self) -> None:
        context = _make_context()
        context.state = RunState(warning=True)

        ReportOutcomeStep().run(context)

        assert context.outcome is Outcome.PASSED_WITH_WARNINGS
