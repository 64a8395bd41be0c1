"""Configuration module using Pydantic Settings.

Usage:
    from structeq.config import ComparatorSettings, get_settings

    settings = ComparatorSettings(diagnostics="ignore")
    defaults = get_settings()
"""

from structeq.config.settings import ComparatorSettings, DiagnosticMode, get_settings

__all__ = [
    "ComparatorSettings",
    "DiagnosticMode",
    "get_settings",
]
