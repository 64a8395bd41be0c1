"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the comparator.

Usage:
    from structeq.config import ComparatorSettings

    # Load from environment variables (STRUCTEQ_*)
    settings = ComparatorSettings()

    # Or override with explicit values
    settings = ComparatorSettings(diagnostics="ignore")
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class DiagnosticMode(StrEnum):
    """What equals() does with advisory diagnostics."""

    WARN = "warn"  # Emit a ComparisonWarning
    IGNORE = "ignore"  # Return False silently


class ComparatorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for structural comparison.

    Attributes:
        diagnostics: Whether misuse (non-structured operands, unregistered
            field types) is reported as a warning or silently ignored.
        check_field_names: If True, instances whose reflected field names
            differ position by position compare unequal.

    Environment Variables:
        STRUCTEQ_DIAGNOSTICS
        STRUCTEQ_CHECK_FIELD_NAMES
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTEQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    diagnostics: DiagnosticMode = DiagnosticMode.WARN
    check_field_names: bool = True


@lru_cache(maxsize=1)
def get_settings() -> ComparatorSettings:
    """Return the process-wide settings, loaded once from the environment.

    Call ``get_settings.cache_clear()`` to reload after changing the environment.
    """
    return ComparatorSettings()
