"""Parser for the relation expression DSL.

The grammar is small::

    expr        := chain ("." chain)*
    chain       := token | array_token
    array_token := "[" expr ("," expr)* "]"

Splitting is bracket-aware: separators nested inside ``[...]`` belong to the
enclosing array token and are handled by the recursive call for that token.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from .ast import RelationNode, Token, TokenKind
from .errors import InvalidRelationExpression

if TYPE_CHECKING:
    from .relation import RelationExpression

logger = logging.getLogger(__name__)

CHAIN_SEPARATOR = "."
ARRAY_SEPARATOR = ","


class UnbalancedBrackets(Exception):
    pass


def split_tokens(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator`` at bracket depth zero.

    Every token is stripped of surrounding whitespace. Empty tokens are kept,
    rejecting them is up to the caller.

    Raises :class:`UnbalancedBrackets` if ``[`` and ``]`` do not pair up.
    """
    tokens: List[str] = []
    depth = 0
    start = 0

    for i, ch in enumerate(text):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == separator and depth == 0:
            tokens.append(text[start:i].strip())
            start = i + 1

    if depth != 0:
        raise UnbalancedBrackets(text)

    # end of input closes the last token
    tokens.append(text[start:].strip())
    return tokens


def classify_token(text: str) -> Token:
    if len(text) >= 2 and text.startswith("[") and text.endswith("]"):
        return Token(kind=TokenKind.ARRAY, text=text)
    return Token(kind=TokenKind.PLAIN, text=text)


class RelationExpressionParser:
    """Turns one DSL string into a forest of :class:`RelationNode`.

    The parser remembers the original input so that errors raised while
    parsing a nested array part still report the whole expression.
    """

    def __init__(self) -> None:
        self.source: Optional[str] = None

    def parse(self, value: Any) -> List[RelationNode]:
        if not isinstance(value, str) or not value:
            return []

        self.source = value
        nodes = self._parse_chain(value)
        logger.debug("Parsed relation expression %r into %d root node(s)", value, len(nodes))
        return nodes

    def _parse_chain(self, text: str) -> List[RelationNode]:
        tokens = [classify_token(t) for t in self._split(text, CHAIN_SEPARATOR)]
        return self._build(tokens)

    def _build(self, tokens: Sequence[Token]) -> List[RelationNode]:
        # A plain token closes its level, the tokens after it form its children.
        # Array members join the level they appear on.
        levels: List[List[RelationNode]] = [[]]
        names: List[str] = []

        for token in tokens:
            if token.kind is TokenKind.ARRAY:
                for part in self._split(token.inner(), ARRAY_SEPARATOR):
                    levels[-1].extend(self._parse_chain(part))
                continue

            if not token.text:
                raise self._error("empty relation name")

            names.append(token.text)
            levels.append([])

        # fold from the innermost level outwards
        siblings = levels.pop()
        while names:
            node = RelationNode(name=names.pop(), children=tuple(siblings))
            siblings = levels.pop()
            siblings.append(node)

        return siblings

    def _split(self, text: str, separator: str) -> List[str]:
        try:
            return split_tokens(text, separator)
        except UnbalancedBrackets:
            raise self._error("unbalanced brackets") from None

    def _error(self, reason: str) -> InvalidRelationExpression:
        logger.debug("Rejected relation expression %r: %s", self.source, reason)
        return InvalidRelationExpression(self.source)


def parse_relation_expression(value: Any) -> "RelationExpression":
    """Parse ``value`` into a :class:`RelationExpression`.

    Non-string and empty input yields the empty expression. Malformed input
    raises :class:`InvalidRelationExpression`.
    """
    from .relation import RelationExpression  # local import to avoid cycles

    return RelationExpression(tuple(RelationExpressionParser().parse(value)))


__all__ = [
    "CHAIN_SEPARATOR",
    "ARRAY_SEPARATOR",
    "UnbalancedBrackets",
    "split_tokens",
    "classify_token",
    "RelationExpressionParser",
    "parse_relation_expression",
]
