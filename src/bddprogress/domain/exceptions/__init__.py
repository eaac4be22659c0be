"""Domain exceptions."""

from bddprogress.domain.exceptions.active_step import NoActiveStepError
from bddprogress.domain.exceptions.base import BddProgressError
from bddprogress.domain.exceptions.step_depth import StepDepthExceededError

__all__ = [
    "BddProgressError",
    "NoActiveStepError",
    "StepDepthExceededError",
]
