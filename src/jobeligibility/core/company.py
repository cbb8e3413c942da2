"""Company entity holding an optional requirement tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .requirements import (
    InvalidInputError,
    Requirement,
    is_requirement,
    normalize_possessions,
)

NO_REQUIREMENTS = "No requirements"


@dataclass(frozen=True, slots=True)
class Company:
    """A company and the requirement a candidate must satisfy to work there.

    A company without a requirement accepts every candidate. The name is
    stored trimmed.
    """

    name: str
    requirement: Requirement | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError("Company name cannot be None or empty")
        if self.requirement is not None and not is_requirement(self.requirement):
            raise InvalidInputError(
                f"Company requirement must be a requirement, got {type(self.requirement).__name__}"
            )
        object.__setattr__(self, "name", self.name.strip())

    def can_work(self, possessions: Iterable[str]) -> bool:
        normalized = normalize_possessions(possessions)
        if self.requirement is None:
            return True
        return self.requirement._evaluate(normalized)

    def requirement_description(self) -> str:
        if self.requirement is None:
            return NO_REQUIREMENTS
        return self.requirement.describe()

    def __str__(self) -> str:
        return f"{self.name}: {self.requirement_description()}"
