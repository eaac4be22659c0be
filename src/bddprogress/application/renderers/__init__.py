"""Parameter renderers for step finish notifications.

Both renderers draw with rich and return plain text.
"""

from bddprogress.application.renderers.table import render_table
from bddprogress.application.renderers.tree import render_tree

__all__ = [
    "render_table",
    "render_tree",
]
