from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from .ast import ALL_RECURSIVE, RECURSION_MARKER, RelationNode
from .parser import parse_relation_expression


@dataclass(frozen=True)
class RelationExpression:
    """Parsed relation expression, a forest of :class:`RelationNode`.

    ``children.[movies.actors.[pets, children], pets]`` describes the tree::

                   children
                      |
              -----------------
              |               |
            movies           pets
              |
            actors
              |
         -----------
         |         |
        pets    children

    Expressions are values: every query returns a new expression (or ``self``)
    that shares nodes with the original forest.
    """

    nodes: Tuple[RelationNode, ...] = ()

    @classmethod
    def parse(cls, value: Any) -> "RelationExpression":
        return parse_relation_expression(value)

    def __bool__(self) -> bool:
        return bool(self.nodes)

    def __str__(self) -> str:
        return self.to_string()

    def root_names(self) -> List[str]:
        return [node.name for node in self.nodes]

    def is_all_recursive(self) -> bool:
        return len(self.nodes) == 1 and self.nodes[0].name == ALL_RECURSIVE

    def is_recursive(self, relation_name: str) -> bool:
        node = self._find(relation_name)
        if node is None:
            return False
        return len(node.children) == 1 and node.children[0].name == RECURSION_MARKER

    def relation(self, relation_name: str) -> Optional["RelationExpression"]:
        """Descend one level into ``relation_name``.

        Returns ``None`` when the relation is not part of the expression and
        an empty expression when it is present but has no children. A
        recursive relation keeps itself as the only root so that recursion
        is detected again on the next level.
        """
        if self.is_all_recursive():
            return self

        node = self._find(relation_name)
        if node is None:
            return None

        if self.is_recursive(relation_name):
            return RelationExpression((node,))
        return RelationExpression(node.children)

    def is_sub_expression(self, other: Union[str, "RelationExpression", None]) -> bool:
        """Test if every root-to-leaf path of ``other`` is found in this expression.

        Sub expressions of ``children.[movies.actors, pets]`` include
        ``children``, ``children.pets``, ``children.movies.actors`` and
        ``children.[movies, pets]``.

        As soon as one relation is recursive in both expressions the whole
        comparison is considered satisfied, remaining relations of ``other``
        are not checked.
        """
        if not isinstance(other, RelationExpression):
            other = parse_relation_expression(other)

        if other.is_all_recursive():
            return self.is_all_recursive()

        for relation_name in other.root_names():
            if other.is_recursive(relation_name) and (
                self.is_all_recursive() or self.is_recursive(relation_name)
            ):
                return True

            sub_expression = other.relation(relation_name)
            own_sub_expression = self.relation(relation_name)

            if own_sub_expression is None or not own_sub_expression.is_sub_expression(sub_expression):
                return False

        return True

    def to_string(self) -> str:
        """Render the expression back to canonical DSL text."""
        if len(self.nodes) == 1:
            return _render_node(self.nodes[0])
        if not self.nodes:
            return ""
        return _render_forest(self.nodes)

    def to_dict(self) -> Dict[str, Any]:
        return {node.name: _node_to_dict(node) for node in self.nodes}

    def _find(self, relation_name: str) -> Optional[RelationNode]:
        for node in self.nodes:
            if node.name == relation_name:
                return node
        return None


def _render_node(node: RelationNode) -> str:
    if not node.children:
        return node.name
    if len(node.children) == 1:
        return f"{node.name}.{_render_node(node.children[0])}"
    return f"{node.name}.{_render_forest(node.children)}"


def _render_forest(nodes: Tuple[RelationNode, ...]) -> str:
    return "[" + ", ".join(_render_node(n) for n in nodes) + "]"


def _node_to_dict(node: RelationNode) -> Dict[str, Any]:
    # duplicate sibling names collapse into the last one
    return {child.name: _node_to_dict(child) for child in node.children}


__all__ = ["RelationExpression"]
