"""Eligibility pipeline assembly and execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import pendulum
import structlog

from . import __version__
from .core import Company, EligibilityService, InvalidInputError
from .core.requirements import normalize_possessions
from .repository import CompanyRepository


@dataclass(slots=True)
class CompanyOutcome:
    """Per-company entry of an eligibility report."""

    company: str
    eligible: bool
    requirement_description: str
    required_items: list[str]
    missing_items: list[str] = field(default_factory=list)


@dataclass(slots=True)
class EligibilityReport:
    """Complete evaluation payload for downstream consumers."""

    possessions: list[str]
    outcomes: list[CompanyOutcome]
    eligible_count: int
    ineligible_count: int
    success_rate: float
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def eligible(self) -> list[CompanyOutcome]:
        return [outcome for outcome in self.outcomes if outcome.eligible]

    @property
    def ineligible(self) -> list[CompanyOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.eligible]


class EligibilityPipeline:
    """End-to-end eligibility orchestrator."""

    def __init__(
        self,
        *,
        service: EligibilityService,
        repository: CompanyRepository,
        companies: list[Company] | None = None,
    ) -> None:
        self._service = service
        self._repository = repository
        self._companies = companies
        self._logger = structlog.get_logger(__name__)

    def companies(self) -> list[Company]:
        if self._companies is not None:
            return list(self._companies)
        return self._repository.sample_companies()

    def run(self, possessions: Iterable[str]) -> EligibilityReport:
        if possessions is None or isinstance(possessions, (str, bytes)):
            raise InvalidInputError("Possessions must be a collection of strings")
        given = list(possessions)
        companies = self.companies()
        detailed = self._service.detailed_eligibility(companies, given)
        held = normalize_possessions(given)

        outcomes: list[CompanyOutcome] = []
        for company in companies:
            result = detailed[company.name]
            required_items = sorted(company.requirement.items()) if company.requirement else []
            missing_items = [] if result.eligible else [item for item in required_items if item not in held]
            outcomes.append(
                CompanyOutcome(
                    company=company.name,
                    eligible=result.eligible,
                    requirement_description=result.requirement_description,
                    required_items=required_items,
                    missing_items=missing_items,
                )
            )
            self._logger.info(
                "eligibility.result",
                company=company.name,
                eligible=result.eligible,
                requirement=result.requirement_description,
            )

        # duplicate names collapse to the last entry, matching the service maps
        unique = list({outcome.company: outcome for outcome in outcomes}.values())
        eligible_count = sum(1 for outcome in unique if outcome.eligible)
        ineligible_count = len(unique) - eligible_count

        report = EligibilityReport(
            possessions=sorted(given),
            outcomes=unique,
            eligible_count=eligible_count,
            ineligible_count=ineligible_count,
            success_rate=_success_rate(eligible_count, len(unique)),
            metadata={
                "company_count": len(unique),
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
        )
        self._logger.info(
            "eligibility.summary",
            eligible=eligible_count,
            ineligible=ineligible_count,
            success_rate=report.success_rate,
        )
        return report


def _success_rate(eligible: int, total: int) -> float:
    if total == 0:
        return 0.0
    return round(eligible * 100.0 / total, 1)
