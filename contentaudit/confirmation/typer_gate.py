import typer

from contentaudit.confirmation.base import BaseConfirmationGate


class TyperConfirmationGate(BaseConfirmationGate):
    """Terminal prompt; declines unless the operator answers yes."""

    def confirm(self, message: str) -> bool:
        return bool(typer.confirm(message, default=False))
