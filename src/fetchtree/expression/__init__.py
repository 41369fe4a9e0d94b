"""Relation expression DSL: parsing and tree queries."""

from .ast import ALL_RECURSIVE, RECURSION_MARKER, RESERVED_NAMES, RelationNode, Token, TokenKind
from .errors import InvalidRelationExpression
from .parser import (
    RelationExpressionParser,
    UnbalancedBrackets,
    classify_token,
    parse_relation_expression,
    split_tokens,
)
from .relation import RelationExpression

__all__ = [
    "ALL_RECURSIVE",
    "RECURSION_MARKER",
    "RESERVED_NAMES",
    "RelationNode",
    "Token",
    "TokenKind",
    "InvalidRelationExpression",
    "RelationExpressionParser",
    "UnbalancedBrackets",
    "classify_token",
    "parse_relation_expression",
    "split_tokens",
    "RelationExpression",
]
