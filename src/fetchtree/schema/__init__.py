"""Entity/relation schema walked by the eager planner."""

from .errors import UnknownEntity, UnknownRelation
from .registry import SchemaRegistry
from .types import EntityDescriptor, ProviderSchema, RelationDescriptor

__all__ = [
    "ProviderSchema",
    "EntityDescriptor",
    "RelationDescriptor",
    "SchemaRegistry",
    "UnknownEntity",
    "UnknownRelation",
]
