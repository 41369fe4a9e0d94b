from __future__ import annotations

from typing import Annotated, Any, List

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from ..expression import RelationExpression


def _coerce_expression(value: Any) -> RelationExpression:
    if isinstance(value, RelationExpression):
        return value
    # InvalidRelationExpression is a ValueError, pydantic reports it as a validation error
    return RelationExpression.parse(value)


EagerExpression = Annotated[
    RelationExpression,
    PlainValidator(_coerce_expression),
    PlainSerializer(lambda expr: expr.to_string(), return_type=str),
]


class EagerRequest(BaseModel):
    """Root entity plus the relation expression to fetch eagerly."""

    model_config = ConfigDict(frozen=True)

    root_entity: str
    eager: EagerExpression = Field(default_factory=RelationExpression)


class EagerNode(BaseModel):
    relation: str
    entity: str
    recursive: bool = False
    children: List[EagerNode] = Field(default_factory=list)


class EagerPlan(BaseModel):
    root_entity: str
    expression: str = ""
    nodes: List[EagerNode] = Field(default_factory=list)

    def paths(self) -> List[str]:
        """Dotted root-to-leaf relation paths, depth first."""
        out: List[str] = []

        def _walk(node: EagerNode, prefix: str) -> None:
            path = f"{prefix}.{node.relation}" if prefix else node.relation
            if not node.children:
                out.append(path)
                return
            for child in node.children:
                _walk(child, path)

        for node in self.nodes:
            _walk(node, "")
        return out
