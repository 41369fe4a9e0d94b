from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EagerPolicy:
    max_depth: int = 10
    max_nodes: int = 500  # total EagerNode budget for one plan
    strict: bool = False  # raise UnknownRelation instead of warning
    warn_unknown_relations: bool = True
