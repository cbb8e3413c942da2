"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CandidateConfig(BaseModel):
    """Default candidate used when no possessions are given on the command line."""

    possessions: list[str] | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("possessions")
    @classmethod
    def _strip_blank(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [item for item in value if item.strip()]


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_logs: bool = True

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    candidate: CandidateConfig = Field(default_factory=CandidateConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        candidate = self.candidate.model_dump(exclude_none=True)
        if candidate:
            settings["candidate"] = candidate
        settings["logging"] = self.logging.model_dump()
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise TypeError("Config must be a mapping")
    return AppConfig.model_validate(raw)
