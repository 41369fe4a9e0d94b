from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..expression import RESERVED_NAMES, RelationExpression
from ..schema import RelationDescriptor, SchemaRegistry, UnknownRelation
from .diagnostics import Diagnostics, Severity
from .models import EagerNode, EagerPlan, EagerRequest
from .policy import EagerPolicy

logger = logging.getLogger(__name__)


def plan_eager(
    request: Union[EagerRequest, Mapping[str, Any]],
    registry: SchemaRegistry,
    policy: Optional[EagerPolicy] = None,
) -> Tuple[EagerPlan, Diagnostics]:
    """Resolve an eager request against the schema graph.

    Starting at ``request.root_entity`` every outgoing relation is offered to
    the expression via :meth:`RelationExpression.relation`; relations the
    expression selects become :class:`EagerNode` entries and are expanded
    with the sub-expression on the target entity.
    """
    if not isinstance(request, EagerRequest):
        request = EagerRequest.model_validate(request)
    policy = policy or EagerPolicy()
    diagnostics = Diagnostics()

    registry.entity(request.root_entity)
    planner = _Planner(registry, policy, diagnostics)
    nodes = planner.expand(request.root_entity, request.eager, depth=0, path="")

    plan = EagerPlan(
        root_entity=request.root_entity,
        expression=request.eager.to_string(),
        nodes=nodes,
    )
    logger.info(
        "Eager plan for %s (%r): %d path(s), %d diagnostic(s)",
        request.root_entity,
        plan.expression,
        len(plan.paths()),
        len(diagnostics.messages),
    )
    return plan, diagnostics


def covers(fetched: Union[str, RelationExpression], requested: Union[str, RelationExpression]) -> bool:
    """True if data loaded with ``fetched`` already contains ``requested``."""
    if not isinstance(fetched, RelationExpression):
        fetched = RelationExpression.parse(fetched)
    return fetched.is_sub_expression(requested)


class _Planner:
    def __init__(self, registry: SchemaRegistry, policy: EagerPolicy, diagnostics: Diagnostics) -> None:
        self.registry = registry
        self.policy = policy
        self.diagnostics = diagnostics
        self.node_count = 0
        self.budget_exhausted = False

    def expand(
        self,
        entity: str,
        expression: RelationExpression,
        *,
        depth: int,
        path: str,
        recursed_via: Optional[str] = None,
    ) -> List[EagerNode]:
        """Expand ``expression`` on ``entity``.

        ``recursed_via`` names the relation whose ``^`` marker led to this
        level; that relation may be missing here, which ends the recursion.
        """
        relations = self.registry.relations_from(entity)
        self._check_unknown(entity, expression, relations, path=path, recursed_via=recursed_via)

        selected: List[Tuple[RelationDescriptor, RelationExpression]] = []
        for rel in relations:
            sub = expression.relation(rel.name)
            if sub is not None:
                selected.append((rel, sub))
        if not selected:
            return []

        if depth >= self.policy.max_depth:
            logger.debug("Stopping eager expansion at %r: max_depth=%d", path, self.policy.max_depth)
            self.diagnostics.add(
                "max_depth_reached",
                f"expansion stopped after {self.policy.max_depth} level(s)",
                path,
                Severity.INFO,
            )
            return []

        nodes: List[EagerNode] = []
        for rel, sub in selected:
            if self.node_count >= self.policy.max_nodes:
                self._exhaust_budget(path)
                break
            self.node_count += 1

            rel_path = f"{path}.{rel.name}" if path else rel.name
            recursive = expression.is_recursive(rel.name)
            nodes.append(
                EagerNode(
                    relation=rel.name,
                    entity=rel.to_entity,
                    recursive=recursive or expression.is_all_recursive(),
                    children=self.expand(
                        rel.to_entity,
                        sub,
                        depth=depth + 1,
                        path=rel_path,
                        recursed_via=rel.name if recursive else None,
                    ),
                )
            )
        return nodes

    def _exhaust_budget(self, path: str) -> None:
        if self.budget_exhausted:
            return
        self.budget_exhausted = True
        logger.warning("Eager plan truncated at %r: max_nodes=%d", path, self.policy.max_nodes)
        self.diagnostics.add(
            "max_nodes_reached",
            f"plan truncated after {self.policy.max_nodes} relation node(s)",
            path,
            Severity.WARNING,
        )

    def _check_unknown(
        self,
        entity: str,
        expression: RelationExpression,
        relations: List[RelationDescriptor],
        *,
        path: str,
        recursed_via: Optional[str],
    ) -> None:
        known = {rel.name for rel in relations}
        for name in expression.root_names():
            if name in RESERVED_NAMES or name in known:
                continue
            if name == recursed_via:
                continue
            if self.policy.strict:
                raise UnknownRelation(name, entity)
            if self.policy.warn_unknown_relations:
                logger.debug("Relation %r is not defined on %s", name, entity)
                self.diagnostics.add(
                    "unknown_relation",
                    f"relation '{name}' is not defined on entity '{entity}'",
                    f"{path}.{name}" if path else name,
                    Severity.WARNING,
                )
