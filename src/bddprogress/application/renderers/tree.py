"""Tree parameter renderer: TreeParameterDetails → guide-line tree text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from rich.tree import Tree

from bddprogress.application.renderers._console import render_to_text

if TYPE_CHECKING:
    from bddprogress.domain.model.parameter import TreeNode, TreeParameterDetails

FAILURE_MARKER = "!"


def node_label(node: TreeNode) -> Text:
    """Label 'name: value', prefixed with '!' for failing nodes."""
    label = f"{node.name}: {node.value}"
    if node.status.is_failing:
        label = f"{FAILURE_MARKER}{label}"
    return Text(label)


def render_tree(details: TreeParameterDetails, prefix: str = "") -> str:
    """Render node tree with guide lines.

    Args:
        details: Tree to render.
        prefix: Text prepended to every line.

    Returns:
        Multi-line tree text.
    """
    tree = Tree(node_label(details.root), highlight=False)

    # Iterative walk: (source node, rendered branch)
    pending: list[tuple[TreeNode, Tree]] = [(details.root, tree)]
    while pending:
        node, branch = pending.pop()
        for child in node.children:
            pending.append((child, branch.add(node_label(child))))

    return render_to_text(tree, prefix)
