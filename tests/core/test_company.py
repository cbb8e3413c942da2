from __future__ import annotations

import pytest

from jobeligibility.core import (
    NO_REQUIREMENTS,
    Company,
    InvalidInputError,
    SimpleRequirement,
    all_of,
    any_of,
)


@pytest.fixture
def courier() -> Company:
    return Company(
        "Company F",
        all_of(
            any_of(
                SimpleRequirement("scooter"),
                SimpleRequirement("bike"),
                SimpleRequirement("motorcycle"),
            ),
            SimpleRequirement("driving license"),
            SimpleRequirement("motorcycle insurance"),
        ),
    )


def test_company_without_requirement_accepts_anyone():
    company = Company("Company J")

    assert company.can_work(set()) is True
    assert company.can_work({"anything"}) is True
    assert company.requirement_description() == NO_REQUIREMENTS


def test_company_name_is_trimmed():
    assert Company("  Company A  ").name == "Company A"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_company_rejects_blank_name(name):
    with pytest.raises(InvalidInputError):
        Company(name)  # type: ignore[arg-type]


def test_company_rejects_non_requirement():
    with pytest.raises(InvalidInputError):
        Company("Company X", "bike")  # type: ignore[arg-type]


def test_can_work_rejects_none_possessions(courier: Company):
    with pytest.raises(InvalidInputError):
        courier.can_work(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        Company("Company J").can_work(None)  # type: ignore[arg-type]


def test_courier_needs_motorcycle_insurance(courier: Company):
    possessions = {"bike", "driving license"}

    assert courier.can_work(possessions) is False
    assert courier.can_work(possessions | {"motorcycle insurance"}) is True


def test_property_requirement():
    company = Company(
        "Company A",
        all_of(
            any_of(SimpleRequirement("apartment"), SimpleRequirement("house")),
            SimpleRequirement("property insurance"),
        ),
    )

    assert company.can_work({"house"}) is False
    assert company.can_work({"house", "property insurance"}) is True
    assert company.requirement_description() == "((apartment OR house) AND property insurance)"


def test_companies_share_requirement_tree():
    shared = SimpleRequirement("work permit")
    first = Company("First", shared)
    second = Company("Second", shared)

    assert first.requirement is second.requirement
    assert first.can_work({"Work Permit"}) and second.can_work({"work permit "})
