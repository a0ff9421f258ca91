"""Stylesheet tree: Root, Rule, AtRule and Declaration nodes.

Every node carries a ``raws`` dict holding the source text around it
(whitespace, comments, separators) so an unmodified tree serializes back to
the exact input. Nodes built in code leave ``raws`` empty and the writer
falls back to default formatting.

Raw keys:
    before     text before the node (all nodes except Root)
    between    Rule/AtRule: text before ``{``; Declaration: the ``:`` separator
    after      Root/Rule/AtRule: text after the last child
    afterName  AtRule: text between the name and the params
    semicolon  Root/Rule/AtRule: True if the last declaration ends with ``;``
    important  Declaration: the original ``!important`` spelling
    beforeSemicolon  Declaration: text between the value and its ``;``
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator, Union

Node = Union["Declaration", "Rule", "AtRule"]


class Container:
    """Behaviour shared by nodes that own a list of child nodes."""

    nodes: list[Node] | None

    def _children(self) -> list[Node]:
        if self.nodes is None:
            self.nodes = []
        return self.nodes

    def append(self, *nodes: Node) -> None:
        """Add *nodes* to the end of this container."""
        children = self._children()
        for node in nodes:
            node.parent = self  # type: ignore[assignment]
            children.append(node)

    def index(self, child: Node) -> int:
        """Return the position of *child* by identity, or -1."""
        for i, node in enumerate(self.nodes or ()):
            if node is child:
                return i
        return -1

    def insert_after(self, existing: Node, new: Node) -> None:
        """Insert *new* directly after *existing* (appends if not found)."""
        children = self._children()
        new.parent = self  # type: ignore[assignment]
        idx = self.index(existing)
        if idx < 0:
            children.append(new)
        else:
            children.insert(idx + 1, new)

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in document order.

        Children are snapshotted per container, so nodes inserted while
        walking are not visited.
        """
        for node in list(self.nodes or ()):
            yield node
            if isinstance(node, Container):
                yield from node.walk()

    def walk_decls(self) -> Iterator[Declaration]:
        for node in self.walk():
            if isinstance(node, Declaration):
                yield node

    def walk_at_rules(self, name: str | None = None) -> Iterator[AtRule]:
        """Yield at-rules, optionally only those named *name* (case-insensitive)."""
        for node in self.walk():
            if isinstance(node, AtRule) and (name is None or node.name.lower() == name.lower()):
                yield node


@dataclass(eq=False)
class Declaration:
    """A single ``prop: value`` pair."""

    prop: str
    value: str
    important: bool = False
    raws: dict[str, Any] = field(default_factory=dict)
    parent: Rule | AtRule | Root | None = field(default=None, repr=False)

    @property
    def selector(self) -> str | None:
        """Selector of the enclosing rule, or None outside a rule."""
        return getattr(self.parent, "selector", None)

    @property
    def siblings(self) -> list[Node]:
        """All nodes sharing this declaration's parent, including itself."""
        if self.parent is None:
            return [self]
        return list(self.parent.nodes or ())

    def clone(self, **overrides: Any) -> Declaration:
        """Return a detached copy, with *overrides* applied to its fields."""
        overrides.setdefault("raws", dict(self.raws))
        return replace(self, parent=None, **overrides)


@dataclass(eq=False)
class Rule(Container):
    """A qualified rule: ``selector { ... }``."""

    selector: str
    nodes: list[Node] = field(default_factory=list)
    raws: dict[str, Any] = field(default_factory=dict)
    parent: AtRule | Root | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for node in self.nodes:
            node.parent = self


@dataclass(eq=False)
class AtRule(Container):
    """An at-rule such as ``@media screen { ... }`` or ``@import "a.css";``.

    ``nodes`` is None for statement at-rules that end with ``;``.
    """

    name: str
    params: str = ""
    nodes: list[Node] | None = None
    raws: dict[str, Any] = field(default_factory=dict)
    parent: AtRule | Root | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for node in self.nodes or ():
            node.parent = self


@dataclass(eq=False)
class Root(Container):
    """The top of a parsed stylesheet."""

    nodes: list[Node] = field(default_factory=list)
    raws: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for node in self.nodes:
            node.parent = self
