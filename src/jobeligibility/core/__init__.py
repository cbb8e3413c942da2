"""Core eligibility components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .company import NO_REQUIREMENTS, Company
from .eligibility import EligibilityResult, EligibilityService
from .requirements import (
    CompositeRequirement,
    InvalidInputError,
    LogicalOperator,
    Requirement,
    SimpleRequirement,
    all_of,
    any_of,
)

__all__ = [
    "NO_REQUIREMENTS",
    "Company",
    "CompositeRequirement",
    "EligibilityResult",
    "EligibilityService",
    "InvalidInputError",
    "LogicalOperator",
    "Requirement",
    "SimpleRequirement",
    "all_of",
    "any_of",
]
