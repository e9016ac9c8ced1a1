from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentIssue:
    """A single schema violation found in a document."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
