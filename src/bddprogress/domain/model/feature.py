"""Feature value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FeatureInfo:
    """Feature metadata known before execution.

    Attributes:
        name: Feature name (must not be empty)
        labels: Labels in declaration order
        description: Free text, may span lines. None or blank = absent.
    """

    name: str
    labels: tuple[str, ...] = ()
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("feature name must not be empty")
        if isinstance(self.labels, str):
            raise TypeError("labels must be a tuple of strings, not str")


@dataclass(frozen=True, slots=True)
class FeatureResult:
    """Feature after all its scenarios ran."""

    info: FeatureInfo
