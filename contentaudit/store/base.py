from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from contentaudit.store.models import DocumentRef, Hydrator, PathFilter, QueryResult


class BaseDocumentStore(ABC):
    """Contract for all document store adapters."""

    def query(
        self,
        collection: str,
        first: int = -1,
        filter_chain: Sequence[PathFilter] | None = None,
        hydrator: Hydrator | None = None,
    ) -> QueryResult:
        """List documents of a collection without reading their bodies.

        Args:
            collection: Collection name.
            first: Maximum number of edges; negative means unbounded.
            filter_chain: Path predicates, all of which must accept a path.
            hydrator: Maps each path to an edge. Defaults to DocumentRef.

        Raises:
            CollectionNotFoundError: if the collection is unknown to the store.
        """
        paths = [
            path
            for path in self.list_paths(collection)
            if all(predicate(path) for predicate in filter_chain or ())
        ]
        if first >= 0:
            paths = paths[:first]
        hydrate = hydrator if hydrator is not None else DocumentRef
        return QueryResult(edges=[hydrate(path) for path in paths])

    @abstractmethod
    def list_paths(self, collection: str) -> list[str]:
        """Return sorted content-root relative paths stored for a collection."""

    @abstractmethod
    def get(self, collection: str, path: str) -> dict[str, Any]:
        """Read and parse one document.

        Raises:
            DocumentNotFoundError: if the document does not exist.
            DocumentParseError: if the body is not a JSON object.
        """

    @abstractmethod
    def put(self, collection: str, path: str, data: dict[str, Any]) -> None:
        """Write one document, replacing its current body."""
