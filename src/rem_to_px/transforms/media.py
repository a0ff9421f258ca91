"""Rewriting of rem lengths inside ``@media`` parameters."""

from __future__ import annotations

import logging

from rem_to_px.transforms.base import AtRuleNode
from rem_to_px.units import UnitConverter

logger = logging.getLogger(__name__)

MEDIA_KEYWORD = "media"


class MediaQueryRewriter:
    """Convert the whole parameter string of ``@media`` rules.

    No property or selector filtering applies here.
    """

    def __init__(self, converter: UnitConverter) -> None:
        self.converter = converter

    def candidate(self, at_rule: AtRuleNode) -> str | None:
        """Return the converted params, or None if nothing would change."""
        if at_rule.name.lower() != MEDIA_KEYWORD:
            return None
        if not self.converter.may_contain_units(at_rule.params):
            return None
        params = self.converter.convert(at_rule.params)
        if params == at_rule.params:
            return None
        return params

    def rewrite(self, at_rule: AtRuleNode) -> bool:
        params = self.candidate(at_rule)
        if params is None:
            return False
        logger.debug("@%s %s -> %s", at_rule.name, at_rule.params, params)
        at_rule.params = params
        return True
