from enum import Enum

from contentaudit.logging.logger import Log
from contentaudit.pipeline.models import RunState


class Outcome(str, Enum):
    FAILED = "failed"
    PASSED_WITH_WARNINGS = "passed_with_warnings"
    PASSED = "passed"

    @property
    def exit_code(self) -> int:
        return 1 if self is Outcome.FAILED else 0


def classify(state: RunState) -> Outcome:
    """Errors take precedence over warnings."""
    if state.error:
        return Outcome.FAILED
    if state.warning:
        return Outcome.PASSED_WITH_WARNINGS
    return Outcome.PASSED


def report(state: RunState) -> Outcome:
    """Classify the run and emit the final message."""
    outcome = classify(state)
    if outcome is Outcome.FAILED:
        Log.error("Audit failed with errors")
    elif outcome is Outcome.PASSED_WITH_WARNINGS:
        Log.warning("Audit passed with warnings")
    else:
        Log.info("Audit passed")
    return outcome
