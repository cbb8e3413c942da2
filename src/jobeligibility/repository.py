"""In-process company data source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .core import Company, Requirement, SimpleRequirement, all_of, any_of


@dataclass(frozen=True, slots=True)
class CompanyData:
    """Raw record used to build a company."""

    name: str
    requirement: Requirement | None = None


class CompanyRepository:
    """Build the companies a candidate is evaluated against."""

    def sample_companies(self) -> list[Company]:
        """Return the demo companies A through K."""
        item = SimpleRequirement
        return [
            # apartment or house, and property insurance
            Company(
                "Company A",
                all_of(any_of(item("apartment"), item("house")), item("property insurance")),
            ),
            Company(
                "Company B",
                all_of(
                    any_of(item("5 door car"), item("4 door car")),
                    item("driving license"),
                    item("car insurance"),
                ),
            ),
            Company("Company C", all_of(item("social security number"), item("work permit"))),
            Company("Company D", any_of(item("apartment"), item("flat"), item("house"))),
            Company(
                "Company E",
                all_of(
                    item("driving license"),
                    any_of(
                        item("2 door car"),
                        item("3 door car"),
                        item("4 door car"),
                        item("5 door car"),
                    ),
                ),
            ),
            Company(
                "Company F",
                all_of(
                    any_of(item("scooter"), item("bike"), item("motorcycle")),
                    item("driving license"),
                    item("motorcycle insurance"),
                ),
            ),
            Company(
                "Company G",
                all_of(item("massage qualification certificate"), item("liability insurance")),
            ),
            Company("Company H", any_of(item("storage place"), item("garage"))),
            # no requirements at all
            Company("Company J"),
            Company("Company K", item("PayPal account")),
        ]

    def companies_from_data(self, records: Iterable[CompanyData]) -> list[Company]:
        """Build companies from caller-supplied records."""
        return [Company(record.name, record.requirement) for record in records]
