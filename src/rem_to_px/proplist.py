"""Property allow/deny lists.

Syntax of a ``prop_list`` entry:
    *            every property
    font         exactly ``font``
    *position*   any property containing ``position``
    font*        any property starting with ``font``
    *-spacing    any property ending with ``-spacing``
    !font-size   the same four forms prefixed with ``!`` exclude instead

Exclusions always win over inclusions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

__all__ = ["PropertyPatternSet", "prop_matches"]

WILDCARD = "*"

_EXACT_RE = re.compile(r"^[^*!]+$")
_CONTAIN_RE = re.compile(r"^\*(.+)\*$")
_START_WITH_RE = re.compile(r"^([^*!]+)\*$")
_END_WITH_RE = re.compile(r"^\*([^*]+)$")
_NOT_EXACT_RE = re.compile(r"^!([^*]+)$")
_NOT_CONTAIN_RE = re.compile(r"^!\*(.+)\*$")
_NOT_START_WITH_RE = re.compile(r"^!([^*]+)\*$")
_NOT_END_WITH_RE = re.compile(r"^!\*([^*]+)$")


def _collect(pattern: re.Pattern[str], entries: Iterable[str]) -> tuple[str, ...]:
    found: list[str] = []
    for entry in entries:
        match = pattern.match(entry)
        if match:
            found.append(match.group(1) if pattern.groups else entry)
    return tuple(found)


@dataclass(frozen=True)
class PropertyPatternSet:
    """The eight include/exclude pattern groups derived from a prop list."""

    has_wild: bool
    match_all: bool
    exact: tuple[str, ...] = ()
    contain: tuple[str, ...] = ()
    start_with: tuple[str, ...] = ()
    end_with: tuple[str, ...] = ()
    not_exact: tuple[str, ...] = ()
    not_contain: tuple[str, ...] = ()
    not_start_with: tuple[str, ...] = ()
    not_end_with: tuple[str, ...] = ()

    @classmethod
    def from_prop_list(cls, prop_list: Iterable[str]) -> PropertyPatternSet:
        entries = list(prop_list)
        has_wild = WILDCARD in entries
        return cls(
            has_wild=has_wild,
            match_all=has_wild and len(entries) == 1,
            exact=_collect(_EXACT_RE, entries),
            contain=_collect(_CONTAIN_RE, entries),
            start_with=_collect(_START_WITH_RE, entries),
            end_with=_collect(_END_WITH_RE, entries),
            not_exact=_collect(_NOT_EXACT_RE, entries),
            not_contain=_collect(_NOT_CONTAIN_RE, entries),
            not_start_with=_collect(_NOT_START_WITH_RE, entries),
            not_end_with=_collect(_NOT_END_WITH_RE, entries),
        )


def prop_matches(patterns: PropertyPatternSet, prop: str) -> bool:
    """Return True if *prop* is eligible for conversion under *patterns*."""
    if patterns.match_all:
        return True

    included = (
        patterns.has_wild
        or prop in patterns.exact
        or any(m in prop for m in patterns.contain)
        or any(prop.startswith(m) for m in patterns.start_with)
        or any(prop.endswith(m) for m in patterns.end_with)
    )
    if not included:
        return False

    excluded = (
        prop in patterns.not_exact
        or any(m in prop for m in patterns.not_contain)
        or any(prop.startswith(m) for m in patterns.not_start_with)
        or any(prop.endswith(m) for m in patterns.not_end_with)
    )
    return not excluded
