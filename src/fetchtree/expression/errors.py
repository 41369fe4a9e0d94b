from __future__ import annotations

from typing import Any


class InvalidRelationExpression(ValueError):
    def __init__(self, expression: Any):
        super().__init__(f"invalid relation expression: {expression}")
        self.expression = expression
