"""Per-declaration rem -> px rewriting."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Sequence

from rem_to_px.config import RemToPxConfig
from rem_to_px.proplist import PropertyPatternSet, prop_matches
from rem_to_px.selectors import is_blacklisted
from rem_to_px.transforms.base import DeclarationNode
from rem_to_px.units import UnitConverter

logger = logging.getLogger(__name__)


class RewriteAction(Enum):
    """What the rewriter did with one declaration."""

    SKIPPED = "skipped"
    REPLACED = "replaced"
    INSERTED = "inserted"


def declaration_exists(siblings: Sequence[Any], prop: str, value: str) -> bool:
    """True if any sibling already declares exactly ``prop: value``."""
    return any(
        getattr(node, "prop", None) == prop and getattr(node, "value", None) == value
        for node in siblings
    )


class DeclarationRewriter:
    """Decide, for each declaration, whether to skip, replace or insert.

    The checks run cheapest first: a substring test on the value, the
    property allow/deny list, the selector blacklist, the conversion itself,
    and finally a scan of the siblings for an identical px declaration.
    """

    def __init__(self, config: RemToPxConfig, converter: UnitConverter | None = None) -> None:
        self.config = config
        self.converter = converter or UnitConverter(
            root_value=config.root_value,
            unit_precision=config.unit_precision,
            min_unit_value=config.min_unit_value,
        )
        self.patterns = PropertyPatternSet.from_prop_list(config.prop_list)

    def candidate(self, decl: DeclarationNode) -> str | None:
        """Return the converted value for *decl*, or None if it must be left alone."""
        if not self.converter.may_contain_units(decl.value):
            return None
        if not prop_matches(self.patterns, decl.prop):
            return None
        if is_blacklisted(self.config.selector_black_list, decl.selector):
            return None

        value = self.converter.convert(decl.value)

        # An equivalent px declaration is already there (or nothing changed).
        if declaration_exists(decl.siblings, decl.prop, value):
            return None
        return value

    def rewrite(self, decl: DeclarationNode) -> RewriteAction:
        """Apply the conversion to *decl* and report what was done."""
        value = self.candidate(decl)
        if value is None:
            return RewriteAction.SKIPPED

        if self.config.replace:
            logger.debug("%s: %s -> %s", decl.prop, decl.value, value)
            decl.value = value
            return RewriteAction.REPLACED

        logger.debug("%s: %s (+ %s)", decl.prop, decl.value, value)
        decl.parent.insert_after(decl, decl.clone(value=value))
        return RewriteAction.INSERTED
