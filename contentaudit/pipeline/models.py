from dataclasses import dataclass


@dataclass(frozen=True)
class AuditOptions:
    """Flags recognised by an audit run."""

    clean: bool = False
    use_default_values: bool = False
    no_telemetry: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class AuditOutcome:
    """Verdict for one collection."""

    warning: bool = False
    error: bool = False


@dataclass
class RunState:
    """Severities aggregated over every collection that produced a verdict."""

    warning: bool = False
    error: bool = False

    def record(self, outcome: AuditOutcome) -> None:
        self.warning = self.warning or outcome.warning
        self.error = self.error or outcome.error


@dataclass(frozen=True)
class CollectionFault:
    """A collection whose processing raised before producing a verdict."""

    collection: str
    cause: str
