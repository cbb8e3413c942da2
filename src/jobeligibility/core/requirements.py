"""Requirement trees and their evaluation against a possession set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class InvalidInputError(ValueError):
    """Raised when a requirement, company or possession set is malformed."""


class LogicalOperator(str, Enum):
    """Operator combining the children of a composite requirement."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def coerce(cls, value: "LogicalOperator | str | None") -> "LogicalOperator":
        if value is None:
            raise InvalidInputError("Operator cannot be None")
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidInputError(f"Unknown logical operator: {value!r}")


def normalize_item(value: str) -> str:
    """Trim and lowercase an item for comparison."""
    return value.strip().lower()


def normalize_possessions(possessions: Iterable[str] | None) -> frozenset[str]:
    """Validate a possession collection and return its normalized items."""
    if possessions is None:
        raise InvalidInputError("Possessions cannot be None")
    if isinstance(possessions, (str, bytes)):
        raise InvalidInputError("Possessions must be a collection of strings, not a single string")
    normalized: set[str] = set()
    for possession in possessions:
        if not isinstance(possession, str):
            raise InvalidInputError(f"Possession must be a string, got {type(possession).__name__}")
        normalized.add(normalize_item(possession))
    return frozenset(normalized)


@dataclass(frozen=True, slots=True)
class SimpleRequirement:
    """Leaf requirement for a single item."""

    item: str

    def __post_init__(self) -> None:
        if not isinstance(self.item, str) or not self.item.strip():
            raise InvalidInputError("Required item cannot be None or empty")
        object.__setattr__(self, "item", normalize_item(self.item))

    def is_satisfied_by(self, possessions: Iterable[str]) -> bool:
        return self._evaluate(normalize_possessions(possessions))

    def describe(self) -> str:
        return self.item

    def items(self) -> frozenset[str]:
        return frozenset((self.item,))

    def _evaluate(self, normalized: frozenset[str]) -> bool:
        return self.item in normalized

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class CompositeRequirement:
    """Requirement combining child requirements with AND or OR.

    ``children`` is stored as a tuple in construction order. The order only
    matters for :meth:`describe`; evaluation is order-independent apart from
    short-circuiting.
    """

    operator: LogicalOperator
    children: tuple["Requirement", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", LogicalOperator.coerce(self.operator))
        children = self.children
        if children is None or isinstance(children, (str, bytes)):
            raise InvalidInputError("Sub-requirements cannot be None or empty")
        try:
            children = tuple(children)
        except TypeError as exc:
            raise InvalidInputError("Sub-requirements must be a sequence of requirements") from exc
        if not children:
            raise InvalidInputError("Sub-requirements cannot be None or empty")
        for child in children:
            if child is None:
                raise InvalidInputError("Sub-requirements cannot contain None elements")
            if not is_requirement(child):
                raise InvalidInputError(
                    f"Sub-requirement must be a requirement, got {type(child).__name__}"
                )
        object.__setattr__(self, "children", children)

    def is_satisfied_by(self, possessions: Iterable[str]) -> bool:
        return self._evaluate(normalize_possessions(possessions))

    def describe(self) -> str:
        separator = f" {self.operator.value} "
        return "(" + separator.join(child.describe() for child in self.children) + ")"

    def items(self) -> frozenset[str]:
        collected: set[str] = set()
        for child in self.children:
            collected.update(child.items())
        return frozenset(collected)

    def _evaluate(self, normalized: frozenset[str]) -> bool:
        if self.operator is LogicalOperator.AND:
            return all(child._evaluate(normalized) for child in self.children)
        return any(child._evaluate(normalized) for child in self.children)

    def __str__(self) -> str:
        return self.describe()


Requirement = SimpleRequirement | CompositeRequirement


def all_of(*children: Requirement) -> CompositeRequirement:
    """Build an AND composite over ``children``."""
    return CompositeRequirement(LogicalOperator.AND, children)


def any_of(*children: Requirement) -> CompositeRequirement:
    """Build an OR composite over ``children``."""
    return CompositeRequirement(LogicalOperator.OR, children)


def is_requirement(value: object) -> bool:
    """Return True for either requirement variant."""
    return isinstance(value, (SimpleRequirement, CompositeRequirement))
