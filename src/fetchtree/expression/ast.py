from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

ALL_RECURSIVE = "*"
RECURSION_MARKER = "^"
RESERVED_NAMES = frozenset({ALL_RECURSIVE, RECURSION_MARKER})


@dataclass(frozen=True)
class RelationNode:
    """One named step of a relation tree."""

    name: str
    children: Tuple["RelationNode", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


class TokenKind(str, Enum):
    PLAIN = "plain"
    ARRAY = "array"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def inner(self) -> str:
        """Content of an array token without the outer brackets."""
        if self.kind is not TokenKind.ARRAY:
            raise ValueError(f"Token {self.text!r} is not an array token")
        return self.text[1:-1]
