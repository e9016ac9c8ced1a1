class PipelineError(Exception):
    """Base exception for audit pipeline errors."""


class AuditDeclinedError(PipelineError):
    """Raised when the operator declines the clean-mode confirmation."""
