"""Dependency injection container for the eligibility system."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import EligibilityService
from .pipeline import EligibilityPipeline
from .repository import CompanyRepository

DEFAULT_POSSESSIONS: tuple[str, ...] = ("bike", "driving license")


def _resolve_possessions(configured: list[str] | None) -> list[str]:
    return list(configured) if configured else list(DEFAULT_POSSESSIONS)


class EligibilityContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    repository = providers.Singleton(CompanyRepository)

    service = providers.Singleton(EligibilityService)

    default_possessions = providers.Callable(
        _resolve_possessions,
        config.candidate.possessions,
    )

    pipeline = providers.Factory(
        EligibilityPipeline,
        service=service,
        repository=repository,
    )


def create_container(*, settings: dict | None = None) -> EligibilityContainer:
    """Instantiate container with optional overrides."""

    container = EligibilityContainer()

    if not settings:
        return container

    container.config.from_dict(settings)
    return container
