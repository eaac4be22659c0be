"""Step parameter value objects.

A step parameter carries one of three detail kinds:
    TabularParameterDetails: table of rows (optionally verified)
    TreeParameterDetails: hierarchical object tree
    InlineParameterDetails: plain value, shown inside the step name by hosts
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from bddprogress.domain.model.enums import ParameterStatus, TableRowType


@dataclass(frozen=True, slots=True)
class TabularColumn:
    """Table column.

    Attributes:
        name: Column header (must not be empty)
        is_key: Column identifies rows during verification
    """

    name: str
    is_key: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("column name must not be empty")


@dataclass(frozen=True, slots=True)
class TabularRow:
    """Table row: one value per column.

    Attributes:
        values: Cell texts in column order
        row_type: Matching, surplus or missing (verifiable tables)
        status: Verification status of the row
    """

    values: tuple[str, ...]
    row_type: TableRowType = TableRowType.MATCHING
    status: ParameterStatus = ParameterStatus.NOT_APPLICABLE

    @property
    def is_verified(self) -> bool:
        """True if row carries verification data."""
        return self.row_type is not TableRowType.MATCHING or self.status is not ParameterStatus.NOT_APPLICABLE


@dataclass(frozen=True, slots=True)
class TabularParameterDetails:
    """Tabular parameter: columns plus rows.

    Invariant: every row has exactly len(columns) values.
    """

    columns: tuple[TabularColumn, ...]
    rows: tuple[TabularRow, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.columns:
            raise ValueError("table must have at least one column")
        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row.values) != width:
                raise ValueError(f"row {index} has {len(row.values)} values, expected {width}")

    @property
    def is_verifiable(self) -> bool:
        """True if any row carries verification data."""
        return any(row.is_verified for row in self.rows)

    @classmethod
    def from_rows(cls, header: tuple[str, ...], *rows: tuple[str, ...]) -> TabularParameterDetails:
        """Build plain (non-verified) table from header and row tuples."""
        return cls(
            columns=tuple(TabularColumn(name) for name in header),
            rows=tuple(TabularRow(tuple(values)) for values in rows),
        )


@dataclass(frozen=True, slots=True)
class TreeNode:
    """Node of a tree parameter.

    Attributes:
        name: Node name or path segment ('$' for root by convention)
        value: Node text
        children: Child nodes in display order
        status: Verification status of the node
    """

    name: str
    value: str
    children: tuple[TreeNode, ...] = ()
    status: ParameterStatus = ParameterStatus.NOT_APPLICABLE


@dataclass(frozen=True, slots=True)
class TreeParameterDetails:
    """Tree parameter: single root node."""

    root: TreeNode

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.root is None:
            raise TypeError("root must not be None")


@dataclass(frozen=True, slots=True)
class InlineParameterDetails:
    """Inline parameter value. Not rendered in progress output."""

    value: str
    status: ParameterStatus = ParameterStatus.NOT_APPLICABLE


ParameterDetails: TypeAlias = TabularParameterDetails | TreeParameterDetails | InlineParameterDetails


@dataclass(frozen=True, slots=True)
class StepParameter:
    """Named step parameter.

    Attributes:
        name: Parameter name (must not be empty)
        details: Tabular, tree or inline details
    """

    name: str
    details: ParameterDetails

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")
        if self.details is None:
            raise TypeError("details must not be None")
