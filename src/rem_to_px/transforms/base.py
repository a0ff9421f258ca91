"""Protocols for the tree objects the rewriters work on, and for transforms."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from rem_to_px.stylesheet.model import Root


class DeclarationNode(Protocol):
    """A ``prop: value`` pair that can see its siblings and parent selector."""

    prop: str
    value: str

    @property
    def parent(self) -> Any: ...

    @property
    def selector(self) -> str | None: ...

    @property
    def siblings(self) -> Sequence[Any]: ...

    def clone(self, **overrides: Any) -> DeclarationNode: ...


class AtRuleNode(Protocol):
    """An at-rule with a keyword and an editable parameter string."""

    name: str
    params: str


class Transform(Protocol):
    """A stylesheet-to-stylesheet transformation step."""

    def apply(self, root: Root) -> Root: ...
