from rem_to_px.stylesheet.model import AtRule, Container, Declaration, Root, Rule
from rem_to_px.stylesheet.parser import parse_stylesheet
from rem_to_px.stylesheet.printer import serialize_stylesheet

__all__ = [
    "parse_stylesheet",
    "serialize_stylesheet",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
    "Container",
]
