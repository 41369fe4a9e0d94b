from pydantic import __version__ as _pydantic_version

# Eager request/plan models rely on the Pydantic v2 API (field_validator, model_dump, etc.).
if not _pydantic_version.startswith("2"):
    raise ImportError(
        "fetchtree requires pydantic>=2.0; detected version %s" % _pydantic_version
    )

from .expression import (
    ALL_RECURSIVE,
    RECURSION_MARKER,
    InvalidRelationExpression,
    RelationExpression,
    RelationNode,
    parse_relation_expression,
)
from .schema import (
    EntityDescriptor,
    ProviderSchema,
    RelationDescriptor,
    SchemaRegistry,
    UnknownEntity,
    UnknownRelation,
)
from .eager import (
    Diagnostic,
    Diagnostics,
    EagerNode,
    EagerPlan,
    EagerPolicy,
    EagerRequest,
    Severity,
    covers,
    plan_eager,
)

__all__ = [
    # expression
    "ALL_RECURSIVE",
    "RECURSION_MARKER",
    "InvalidRelationExpression",
    "RelationExpression",
    "RelationNode",
    "parse_relation_expression",
    # schema
    "EntityDescriptor",
    "ProviderSchema",
    "RelationDescriptor",
    "SchemaRegistry",
    "UnknownEntity",
    "UnknownRelation",
    # eager
    "Diagnostic",
    "Diagnostics",
    "EagerNode",
    "EagerPlan",
    "EagerPolicy",
    "EagerRequest",
    "Severity",
    "covers",
    "plan_eager",
]
