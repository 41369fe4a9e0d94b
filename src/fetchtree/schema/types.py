from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass
class EntityDescriptor:
    name: str
    label: Optional[str] = None


@dataclass
class RelationDescriptor:
    name: str
    from_entity: str
    to_entity: str
    cardinality: Optional[str] = None  # "one" | "many"


@dataclass
class ProviderSchema:
    entities: List[EntityDescriptor] = field(default_factory=list)
    relations: List[RelationDescriptor] = field(default_factory=list)

    def entity_index(self) -> dict[str, EntityDescriptor]:
        return {e.name: e for e in self.entities}

    def relation_index(self) -> dict[str, List[RelationDescriptor]]:
        index: dict[str, List[RelationDescriptor]] = {}
        for rel in self.relations:
            index.setdefault(rel.name, []).append(rel)
        return index

    @classmethod
    def from_descriptors(
        cls,
        entities: Iterable[object],
        relations: Iterable[object],
    ) -> "ProviderSchema":
        """Build :class:`ProviderSchema` from foreign descriptor objects.

        Any object exposing ``name`` (entities) or ``name``, ``from_entity``
        and ``to_entity`` (relations) is accepted, e.g. ORM model metadata.
        """

        ent_list = [
            EntityDescriptor(name=getattr(ent, "name", ""), label=getattr(ent, "label", None))
            for ent in entities
        ]
        rel_list = [
            RelationDescriptor(
                name=getattr(rel, "name", ""),
                from_entity=getattr(rel, "from_entity", ""),
                to_entity=getattr(rel, "to_entity", ""),
                cardinality=getattr(rel, "cardinality", None),
            )
            for rel in relations
        ]
        return cls(entities=ent_list, relations=rel_list)
