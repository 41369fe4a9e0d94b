from __future__ import annotations

from typing import Dict, List

from .errors import UnknownEntity, UnknownRelation
from .types import EntityDescriptor, ProviderSchema, RelationDescriptor


class SchemaRegistry:
    """Entity graph used to walk relations level by level."""

    entity_by_name: Dict[str, EntityDescriptor]
    relations_by_entity: Dict[str, List[RelationDescriptor]]

    def __init__(self, schema: ProviderSchema):
        self.entity_by_name = {}
        self.relations_by_entity = {}

        for entity in schema.entities:
            if entity.name in self.entity_by_name:
                raise ValueError(f"Duplicate entity name: {entity.name}")
            self.entity_by_name[entity.name] = entity
            self.relations_by_entity[entity.name] = []

        for relation in schema.relations:
            if relation.from_entity not in self.entity_by_name or relation.to_entity not in self.entity_by_name:
                raise ValueError(
                    f"Relation {relation.name} references unknown entities: "
                    f"{relation.from_entity} -> {relation.to_entity}"
                )
            outgoing = self.relations_by_entity[relation.from_entity]
            if any(r.name == relation.name for r in outgoing):
                raise ValueError(f"Duplicate relation name {relation.name} on entity {relation.from_entity}")
            outgoing.append(relation)

    def has_entity(self, name: str) -> bool:
        return name in self.entity_by_name

    def entity(self, name: str) -> EntityDescriptor:
        if name not in self.entity_by_name:
            raise UnknownEntity(name)
        return self.entity_by_name[name]

    def relations_from(self, entity: str) -> List[RelationDescriptor]:
        if entity not in self.relations_by_entity:
            raise UnknownEntity(entity)
        return list(self.relations_by_entity[entity])

    def relation(self, entity: str, name: str) -> RelationDescriptor:
        for rel in self.relations_from(entity):
            if rel.name == name:
                return rel
        raise UnknownRelation(name, entity)


__all__ = ["SchemaRegistry"]
