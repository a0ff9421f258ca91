"""Selector blacklist entries and the blacklist predicate."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from rem_to_px.errors import ConfigError

__all__ = ["BlacklistEntry", "is_blacklisted"]

# "/body$/i" style entries written in config files.
_REGEX_LITERAL_RE = re.compile(r"^/(?P<body>.+)/(?P<flags>[imsx]*)$")

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


@dataclass(frozen=True)
class BlacklistEntry:
    """A single selector exclusion.

    ``kind`` is ``"literal"`` (matches when the text occurs anywhere in the
    selector) or ``"pattern"`` (matches when the regex is found in it).
    """

    kind: str  # "literal", "pattern"
    value: str
    pattern: re.Pattern[str] | None = field(default=None, compare=False)

    @classmethod
    def literal(cls, text: str) -> BlacklistEntry:
        return cls(kind="literal", value=text)

    @classmethod
    def regex(cls, pattern: str | re.Pattern[str], flags: int = 0) -> BlacklistEntry:
        try:
            compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
        except re.error as exc:
            raise ConfigError(f"Invalid selector pattern {pattern!r}: {exc}") from exc
        return cls(kind="pattern", value=compiled.pattern, pattern=compiled)

    @classmethod
    def from_raw(cls, raw: object) -> BlacklistEntry:
        """Build an entry from a config value.

        Compiled patterns and ``/regex/flags`` strings become pattern entries;
        any other string is a literal.
        """
        if isinstance(raw, BlacklistEntry):
            return raw
        if isinstance(raw, re.Pattern):
            return cls.regex(raw)
        if isinstance(raw, str):
            match = _REGEX_LITERAL_RE.match(raw)
            if match:
                flags = 0
                for ch in match.group("flags"):
                    flags |= _FLAG_MAP[ch]
                return cls.regex(match.group("body"), flags)
            return cls.literal(raw)
        raise ConfigError(
            f"Selector blacklist entries must be strings or patterns, got {type(raw).__name__}"
        )

    def matches(self, selector: str) -> bool:
        if self.kind == "pattern" and self.pattern is not None:
            return self.pattern.search(selector) is not None
        return self.value in selector


def is_blacklisted(blacklist: Iterable[BlacklistEntry], selector: object) -> bool:
    """Return True if any entry in *blacklist* matches *selector*.

    Declarations without a selector (root level, inside ``@font-face`` and
    similar) are never blacklisted.
    """
    if not isinstance(selector, str):
        return False
    return any(entry.matches(selector) for entry in blacklist)
