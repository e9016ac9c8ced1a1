from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocumentRef:
    """Unhydrated handle to a stored document (content-root relative path)."""

    path: str


@dataclass
class QueryResult:
    """Listing result; each edge is whatever the hydrator produced for a path."""

    edges: list[Any] = field(default_factory=list)


PathFilter = Callable[[str], bool]
Hydrator = Callable[[str], Any]
