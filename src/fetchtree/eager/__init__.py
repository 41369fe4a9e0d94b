"""Eager loading plans built from relation expressions."""

from .diagnostics import Diagnostic, Diagnostics, Severity
from .models import EagerNode, EagerPlan, EagerRequest
from .planner import covers, plan_eager
from .policy import EagerPolicy

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "EagerNode",
    "EagerPlan",
    "EagerRequest",
    "EagerPolicy",
    "covers",
    "plan_eager",
]
