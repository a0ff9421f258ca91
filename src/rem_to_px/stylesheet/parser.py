"""Lark-based reader that turns stylesheet source into a Root tree.

Only the block structure is parsed. The source text between nodes is stored
in each node's ``raws`` so that the writer can reproduce it untouched.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from rem_to_px.errors import StylesheetParseError
from rem_to_px.stylesheet.model import AtRule, Declaration, Node, Root, Rule

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_DECL_PARTS_RE = re.compile(
    r"""
    (?P<prop>\*?[-\w]+)
    (?P<between>\s*:\s*)
    (?P<value>.*?)
    (?P<important>\s*!\s*important)?
    \s*$
    """,
    re.VERBOSE | re.DOTALL | re.IGNORECASE,
)


class _Parsed:
    """A node together with its source span."""

    def __init__(self, node: Node, start: int, end: int):
        self.node = node
        self.start = start
        self.end = end


class _Block:
    """The children of a ``{ ... }`` block plus its brace tokens."""

    def __init__(self, items: list[object], open_brace: Token, close_brace: Token):
        self.items = items
        self.open_brace = open_brace
        self.close_brace = close_brace


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a Root, filling in ``raws``."""

    def __init__(self, source: str):
        super().__init__()
        self.source = source

    # ---- leaves ----

    def declaration(self, items: list[Token]) -> _Parsed:
        token = items[0]
        text = str(token)
        match = _DECL_PARTS_RE.match(text)
        if match is None:
            raise StylesheetParseError(
                f"Malformed declaration {text!r}", line=token.line, column=token.column
            )
        decl = Declaration(
            prop=match.group("prop"),
            value=match.group("value"),
            important=match.group("important") is not None,
            raws={"between": match.group("between")},
        )
        if decl.important:
            decl.raws["important"] = match.group("important")
        # Trailing whitespace belongs to whatever follows the declaration.
        return _Parsed(decl, token.start_pos, token.start_pos + len(text.rstrip()))

    # ---- structural ----

    def block(self, items: list[object]) -> _Block:
        return _Block(items[1:-1], items[0], items[-1])  # type: ignore[arg-type]

    def rule(self, items: list[object]) -> _Parsed:
        selector_token, block = items[0], items[1]
        raw_selector = str(selector_token)
        selector = raw_selector.rstrip()
        rule = Rule(selector=selector, raws={"between": raw_selector[len(selector):]})
        self._fill(rule, block)  # type: ignore[arg-type]
        return _Parsed(rule, selector_token.start_pos, block.close_brace.end_pos)  # type: ignore[union-attr]

    def at_rule(self, items: list[object]) -> _Parsed:
        keyword = items[0]
        tail = items[-1]
        params_token = items[1] if len(items) == 3 else None
        at_rule = AtRule(name=str(keyword)[1:])  # type: ignore[index]

        body_start = tail.open_brace.start_pos if isinstance(tail, _Block) else tail.start_pos  # type: ignore[union-attr]
        if params_token is not None:
            raw_params = str(params_token)
            at_rule.params = raw_params.rstrip()
            at_rule.raws["afterName"] = self.source[keyword.end_pos:params_token.start_pos]  # type: ignore[union-attr]
            at_rule.raws["between"] = self.source[
                params_token.start_pos + len(at_rule.params):body_start  # type: ignore[union-attr]
            ]
        else:
            at_rule.raws["afterName"] = ""
            at_rule.raws["between"] = self.source[keyword.end_pos:body_start]  # type: ignore[union-attr]

        if isinstance(tail, _Block):
            at_rule.nodes = []
            self._fill(at_rule, tail)
            end = tail.close_brace.end_pos
        else:
            end = tail.end_pos  # type: ignore[union-attr]
        return _Parsed(at_rule, keyword.start_pos, end)  # type: ignore[union-attr]

    def start(self, items: list[object]) -> Root:
        root = Root()
        end = self._assemble(root, items, 0)
        root.raws["after"] = self.source[end:]
        return root

    # ---- helpers ----

    def _fill(self, container: Rule | AtRule, block: _Block) -> None:
        end = self._assemble(container, block.items, block.open_brace.end_pos)
        container.raws["after"] = self.source[end:block.close_brace.start_pos]

    def _assemble(self, container: Root | Rule | AtRule, items: list[object], start: int) -> int:
        """Append parsed children to *container*; return the end of the last one.

        A ``;`` directly after a declaration is that declaration's terminator.
        Any other ``;`` is left in the raw text around its neighbours.
        """
        prev_end = start
        open_decl: Declaration | None = None
        ended_with_semicolon = False
        for item in items:
            if isinstance(item, Token):
                if open_decl is not None:
                    open_decl.raws["beforeSemicolon"] = self.source[prev_end:item.start_pos]
                    prev_end = item.end_pos
                    open_decl = None
                    ended_with_semicolon = True
                continue
            parsed: _Parsed = item  # type: ignore[assignment]
            parsed.node.raws["before"] = self.source[prev_end:parsed.start]
            container.append(parsed.node)
            prev_end = parsed.end
            ended_with_semicolon = False
            open_decl = parsed.node if isinstance(parsed.node, Declaration) else None
        container.raws["semicolon"] = ended_with_semicolon
        return prev_end


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_stylesheet(source: str) -> Root:
    """Parse stylesheet *source* into a Root tree.

    Raises StylesheetParseError (with line/column when known) if the block
    structure is malformed.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise StylesheetParseError(str(e), line=line, column=column) from e
    try:
        return StylesheetTransformer(source).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, StylesheetParseError):
            raise e.orig_exc from None
        raise
