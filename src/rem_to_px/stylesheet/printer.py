"""Writer that turns a Root tree back into stylesheet text.

Parsed nodes are written from their ``raws``; nodes created in code get a
two-space-indented, one-declaration-per-line layout.
"""

from __future__ import annotations

from rem_to_px.stylesheet.model import AtRule, Container, Declaration, Node, Root, Rule

__all__ = ["serialize_stylesheet"]

_INDENT = "  "


def _depth(node: Node) -> int:
    depth = 0
    parent = node.parent
    while parent is not None and not isinstance(parent, Root):
        depth += 1
        parent = parent.parent
    return depth


def _before(node: Node, is_first: bool) -> str:
    if "before" in node.raws:
        return node.raws["before"]
    depth = _depth(node)
    if depth == 0:
        return "" if is_first else "\n"
    return "\n" + _INDENT * depth


def _declaration(decl: Declaration) -> str:
    text = decl.prop + decl.raws.get("between", ": ") + decl.value
    if decl.important:
        text += decl.raws.get("important", " !important")
    return text


def _body(container: Container) -> str:
    nodes = container.nodes or []
    parts: list[str] = []
    for i, node in enumerate(nodes):
        parts.append(_before(node, is_first=i == 0))
        if isinstance(node, Declaration):
            parts.append(_declaration(node))
            is_last = i == len(nodes) - 1
            if not is_last or container.raws.get("semicolon", not isinstance(container, Root)):
                parts.append(node.raws.get("beforeSemicolon", "") + ";")
        else:
            parts.append(_block_node(node))
    return "".join(parts)


def _closing(container: Rule | AtRule) -> str:
    if "after" in container.raws:
        return container.raws["after"]
    return "\n" + _INDENT * _depth(container)


def _block_node(node: Rule | AtRule) -> str:
    if isinstance(node, Rule):
        head = node.selector + node.raws.get("between", " ")
        return head + "{" + _body(node) + _closing(node) + "}"

    head = "@" + node.name
    if node.params:
        head += node.raws.get("afterName", " ") + node.params
    if node.nodes is None:
        return head + node.raws.get("between", "") + ";"
    head += node.raws.get("between", " ")
    return head + "{" + _body(node) + _closing(node) + "}"


def serialize_stylesheet(root: Root) -> str:
    """Render *root* as stylesheet text."""
    return _body(root) + root.raws.get("after", "")
