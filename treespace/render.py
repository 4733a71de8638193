"""Rendering of a namespace for terminal output."""

from __future__ import annotations

from rich.markup import escape
from rich.tree import Tree

from treespace.namespace import NamespaceContext, Node


def _label(ctx: NamespaceContext, node: Node) -> str:
    if node.node_id == ctx.root.node_id:
        return "[bold]/[/bold]"
    name = escape(node.name)
    if node.is_dir:
        return f"[cyan]{name}/[/cyan]"
    return f"[green]{name}[/green]"


def build_tree(ctx: NamespaceContext, node: Node | None = None) -> Tree:
    """Build a Rich tree of *node* (default: root), children in insertion order."""
    start = node or ctx.root
    tree = Tree(_label(ctx, start))
    # (node, rich branch) pairs still to expand
    pending: list[tuple[Node, Tree]] = [(start, tree)]
    while pending:
        cur, branch = pending.pop()
        for child in ctx.children(cur):
            pending.append((child, branch.add(_label(ctx, child))))
    return tree


def render_plain(ctx: NamespaceContext, node: Node | None = None) -> str:
    """Indented text listing, two spaces per level, directories suffixed with '/'."""
    lines = []
    for depth, cur in ctx.walk(node):
        if cur.parent_id is None:
            lines.append("/")
            continue
        suffix = "/" if cur.is_dir else ""
        lines.append(f"{'  ' * depth}{cur.name}{suffix}")
    return "\n".join(lines)
