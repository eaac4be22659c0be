"""Tabular parameter renderer: TabularParameterDetails → ASCII table text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.table import Table
from rich.text import Text

from bddprogress.application.renderers._console import render_to_text
from bddprogress.domain.model.enums import TableRowType

if TYPE_CHECKING:
    from bddprogress.domain.model.parameter import TabularParameterDetails, TabularRow

STATUS_COLUMN = "#"


def row_marker(row: TabularRow) -> str:
    """Verification marker for a row.

    '+' surplus, '-' missing, '!' failed, '=' otherwise.
    """
    match row.row_type:
        case TableRowType.SURPLUS:
            return "+"
        case TableRowType.MISSING:
            return "-"
        case TableRowType.MATCHING:
            return "!" if row.status.is_failing else "="


def render_table(details: TabularParameterDetails, prefix: str = "") -> str:
    """Render table with ASCII borders.

    Verifiable tables get a leading '#' column with row markers.
    Cell text is never interpreted as rich markup.

    Args:
        details: Table to render.
        prefix: Text prepended to every line.

    Returns:
        Multi-line table text.
    """
    verifiable = details.is_verifiable
    table = Table(box=box.ASCII, show_header=True, header_style=None, highlight=False)

    if verifiable:
        table.add_column(Text(STATUS_COLUMN))
    for column in details.columns:
        table.add_column(Text(column.name))

    for row in details.rows:
        cells = [Text(value) for value in row.values]
        if verifiable:
            cells.insert(0, Text(row_marker(row)))
        table.add_row(*cells)

    return render_to_text(table, prefix)
