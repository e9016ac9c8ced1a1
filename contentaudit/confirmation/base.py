from abc import ABC, abstractmethod


class BaseConfirmationGate(ABC):
    """Contract for asking an operator a yes/no question."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Return True if the operator agreed."""
