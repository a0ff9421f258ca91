"""The rem -> px stylesheet transform and helpers to run it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from rem_to_px.config import RemToPxConfig
from rem_to_px.stylesheet import Root, parse_stylesheet, serialize_stylesheet
from rem_to_px.transforms.base import Transform
from rem_to_px.transforms.declarations import DeclarationRewriter, RewriteAction
from rem_to_px.transforms.media import MEDIA_KEYWORD, MediaQueryRewriter
from rem_to_px.units import UnitConverter

logger = logging.getLogger(__name__)

__all__ = [
    "ConversionReport",
    "DeclarationRewriter",
    "MediaQueryRewriter",
    "RemToPxTransform",
    "RewriteAction",
    "Transform",
    "apply_transforms",
    "convert_css",
]


@dataclass
class ConversionReport:
    """Counts of what one transform run changed."""

    replaced: int = 0
    inserted: int = 0
    media_queries: int = 0

    @property
    def declarations(self) -> int:
        return self.replaced + self.inserted

    @property
    def changed(self) -> bool:
        return bool(self.declarations or self.media_queries)


class RemToPxTransform:
    """Convert rem lengths to px across a whole stylesheet tree, in place.

    Declarations are visited in document order. ``@media`` parameters are
    converted afterwards when ``config.media_query`` is set.
    """

    def __init__(self, config: RemToPxConfig | None = None) -> None:
        self.config = config or RemToPxConfig()
        converter = UnitConverter(
            root_value=self.config.root_value,
            unit_precision=self.config.unit_precision,
            min_unit_value=self.config.min_unit_value,
        )
        self.declarations = DeclarationRewriter(self.config, converter)
        self.media = MediaQueryRewriter(converter)

    def run(self, root: Root) -> ConversionReport:
        """Transform *root* and return counts of what changed."""
        report = ConversionReport()
        for decl in root.walk_decls():
            action = self.declarations.rewrite(decl)
            if action is RewriteAction.REPLACED:
                report.replaced += 1
            elif action is RewriteAction.INSERTED:
                report.inserted += 1

        if self.config.media_query:
            for at_rule in root.walk_at_rules(MEDIA_KEYWORD):
                if self.media.rewrite(at_rule):
                    report.media_queries += 1

        logger.info(
            "rem -> px: %d replaced, %d inserted, %d media queries",
            report.replaced,
            report.inserted,
            report.media_queries,
        )
        return report

    def apply(self, root: Root) -> Root:
        self.run(root)
        return root


def apply_transforms(
    root: Root,
    config: RemToPxConfig | None = None,
    custom_transforms: Iterable[Transform] | None = None,
) -> Root:
    """Apply the rem -> px transform (and any custom ones) to *root*."""
    transforms: list[Transform] = [RemToPxTransform(config)]
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        root = t.apply(root)
    return root


def convert_css(source: str, config: RemToPxConfig | None = None) -> str:
    """Parse *source*, convert its rem values and return the new text."""
    root = apply_transforms(parse_stylesheet(source), config)
    return serialize_stylesheet(root)
