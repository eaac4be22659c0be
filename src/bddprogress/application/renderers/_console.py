"""Shared rich console capture for text renderers."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from rich.console import RenderableType

# Upper bound for measuring; rendering happens at the measured width
MEASURE_WIDTH = 1_000_000


def render_to_text(renderable: RenderableType, prefix: str) -> str:
    """Render with plain (no color) console, prefix every line.

    The console is sized to the renderable's natural width, so table
    cells and tree labels are never truncated or wrapped.

    Args:
        renderable: Rich table, tree, etc.
        prefix: Text prepended to every output line.

    Returns:
        Rendered lines joined with newline, trailing whitespace removed.
    """
    output = StringIO()
    console = Console(
        file=output,
        width=MEASURE_WIDTH,
        force_terminal=False,
        color_system=None,
        highlight=False,
        emoji=False,
    )
    console.width = max(console.measure(renderable).maximum, 1)
    console.print(renderable)

    lines = output.getvalue().rstrip("\n").split("\n")
    return "\n".join(f"{prefix}{line}".rstrip() for line in lines)
