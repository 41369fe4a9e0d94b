from types import SimpleNamespace

import pytest

from fetchtree.schema import (
    EntityDescriptor,
    ProviderSchema,
    RelationDescriptor,
    SchemaRegistry,
    UnknownEntity,
    UnknownRelation,
)


def make_schema() -> ProviderSchema:
    return ProviderSchema(
        entities=[EntityDescriptor(name="Person"), EntityDescriptor(name="Animal")],
        relations=[
            RelationDescriptor(name="pets", from_entity="Person", to_entity="Animal", cardinality="many"),
            RelationDescriptor(name="children", from_entity="Person", to_entity="Person", cardinality="many"),
            RelationDescriptor(name="owner", from_entity="Animal", to_entity="Person", cardinality="one"),
        ],
    )


def test_relations_from_keeps_declaration_order():
    registry = SchemaRegistry(make_schema())
    assert [r.name for r in registry.relations_from("Person")] == ["pets", "children"]
    assert [r.name for r in registry.relations_from("Animal")] == ["owner"]


def test_entity_lookup():
    registry = SchemaRegistry(make_schema())
    assert registry.has_entity("Person")
    assert not registry.has_entity("Movie")
    assert registry.entity("Animal").name == "Animal"
    with pytest.raises(UnknownEntity):
        registry.entity("Movie")
    with pytest.raises(UnknownEntity):
        registry.relations_from("Movie")


def test_relation_lookup():
    registry = SchemaRegistry(make_schema())
    assert registry.relation("Animal", "owner").to_entity == "Person"
    with pytest.raises(UnknownRelation, match="Unknown relation 'owner' for entity 'Person'"):
        registry.relation("Person", "owner")


def test_duplicate_entity_rejected():
    schema = make_schema()
    schema.entities.append(EntityDescriptor(name="Person"))
    with pytest.raises(ValueError, match="Duplicate entity name"):
        SchemaRegistry(schema)


def test_relation_to_unknown_entity_rejected():
    schema = make_schema()
    schema.relations.append(RelationDescriptor(name="movies", from_entity="Person", to_entity="Movie"))
    with pytest.raises(ValueError, match="unknown entities"):
        SchemaRegistry(schema)


def test_duplicate_relation_name_on_entity_rejected():
    schema = make_schema()
    schema.relations.append(RelationDescriptor(name="pets", from_entity="Person", to_entity="Person"))
    with pytest.raises(ValueError, match="Duplicate relation name pets"):
        SchemaRegistry(schema)


def test_same_relation_name_on_different_entities_allowed():
    schema = make_schema()
    schema.relations.append(RelationDescriptor(name="children", from_entity="Animal", to_entity="Animal"))
    registry = SchemaRegistry(schema)
    assert registry.relation("Animal", "children").to_entity == "Animal"
    assert len(schema.relation_index()["children"]) == 2


def test_from_descriptors_accepts_foreign_objects():
    schema = ProviderSchema.from_descriptors(
        [SimpleNamespace(name="Person"), SimpleNamespace(name="Movie", label="Film")],
        [SimpleNamespace(name="movies", from_entity="Person", to_entity="Movie")],
    )
    assert schema.entity_index()["Movie"].label == "Film"
    assert schema.relations[0].cardinality is None
    assert SchemaRegistry(schema).relation("Person", "movies").to_entity == "Movie"
