"""Pydantic schema definitions for configuration input."""

from __future__ import annotations

from .config import AppConfig, CandidateConfig, LoggingConfig, load_config

__all__ = [
    "AppConfig",
    "CandidateConfig",
    "LoggingConfig",
    "load_config",
]
