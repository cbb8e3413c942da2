"""Bulk eligibility evaluation over a list of companies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import structlog

from .company import Company
from .requirements import InvalidInputError, normalize_possessions


@dataclass(frozen=True, slots=True)
class EligibilityResult:
    """Eligibility outcome for one company."""

    eligible: bool
    requirement_description: str


class EligibilityService:
    """Evaluate which companies a candidate can work for.

    Map-returning methods key results by company name. Names are expected to
    be unique; a later company with the same name replaces the earlier entry
    and a warning is logged.
    """

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def evaluate_eligibility(
        self,
        companies: Sequence[Company] | None,
        possessions: Iterable[str] | None,
    ) -> dict[str, bool]:
        checked, normalized = self._validate_input(companies, possessions)
        results: dict[str, bool] = {}
        for company in checked:
            self._warn_on_duplicate(results, company)
            results[company.name] = company.can_work(normalized)
        return results

    def eligible_companies(
        self,
        companies: Sequence[Company] | None,
        possessions: Iterable[str] | None,
    ) -> list[Company]:
        checked, normalized = self._validate_input(companies, possessions)
        return [company for company in checked if company.can_work(normalized)]

    def ineligible_companies(
        self,
        companies: Sequence[Company] | None,
        possessions: Iterable[str] | None,
    ) -> list[Company]:
        checked, normalized = self._validate_input(companies, possessions)
        return [company for company in checked if not company.can_work(normalized)]

    def detailed_eligibility(
        self,
        companies: Sequence[Company] | None,
        possessions: Iterable[str] | None,
    ) -> dict[str, EligibilityResult]:
        checked, normalized = self._validate_input(companies, possessions)
        results: dict[str, EligibilityResult] = {}
        for company in checked:
            self._warn_on_duplicate(results, company)
            results[company.name] = EligibilityResult(
                eligible=company.can_work(normalized),
                requirement_description=company.requirement_description(),
            )
        return results

    @staticmethod
    def _validate_input(
        companies: Sequence[Company] | None,
        possessions: Iterable[str] | None,
    ) -> tuple[list[Company], frozenset[str]]:
        if companies is None:
            raise InvalidInputError("Companies list cannot be None")
        checked = list(companies)
        for company in checked:
            if not isinstance(company, Company):
                raise InvalidInputError(
                    f"Expected Company instances, got {type(company).__name__}"
                )
        return checked, normalize_possessions(possessions)

    def _warn_on_duplicate(self, results: dict, company: Company) -> None:
        if company.name in results:
            self._logger.warning("eligibility.duplicate_company", company=company.name)
