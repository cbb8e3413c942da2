from __future__ import annotations

from jobeligibility.container import DEFAULT_POSSESSIONS, create_container
from jobeligibility.core import EligibilityService
from jobeligibility.pipeline import EligibilityPipeline


def test_create_container_defaults():
    container = create_container()

    assert container.default_possessions() == list(DEFAULT_POSSESSIONS)
    assert isinstance(container.service(), EligibilityService)
    assert container.service() is container.service()
    assert isinstance(container.pipeline(), EligibilityPipeline)


def test_create_container_with_possession_override():
    container = create_container(
        settings={"candidate": {"possessions": ["house", "property insurance"]}}
    )

    assert container.default_possessions() == ["house", "property insurance"]

    report = container.pipeline().run(container.default_possessions())
    eligible = {outcome.company for outcome in report.eligible}
    assert {"Company A", "Company D", "Company J"} <= eligible
