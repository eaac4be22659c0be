"""Base exceptions for bddprogress domain."""


class BddProgressError(Exception):
    """Root exception for all bddprogress errors.

    All domain exceptions inherit from this.
    Allows catching all bddprogress-specific errors.
    """
