"""Step nesting exceptions."""

from bddprogress.domain.exceptions.base import BddProgressError


class StepDepthExceededError(BddProgressError):
    """Step parent chain is deeper than the configured limit.

    Attributes:
        step_name: Step whose chain was walked (must not be empty)
        limit: Maximum allowed number of ancestors (must be >= 1)
    """

    def __init__(self, step_name: str, limit: int) -> None:
        # FAIL-FIRST validation
        if not step_name:
            raise ValueError("step_name must not be empty")
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        self.step_name = step_name
        self.limit = limit
        super().__init__(f"Step '{step_name}' is nested more than {limit} levels deep")
