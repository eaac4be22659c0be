"""Step context exceptions."""

from bddprogress.domain.exceptions.base import BddProgressError


class NoActiveStepError(BddProgressError):
    """Step-scoped operation called while no step is running.

    Attributes:
        operation: What was attempted, e.g. 'comment' (must not be empty)
    """

    def __init__(self, operation: str) -> None:
        # FAIL-FIRST validation
        if not operation:
            raise ValueError("operation must not be empty")

        self.operation = operation
        super().__init__(f"Cannot {operation}: no step is running")
