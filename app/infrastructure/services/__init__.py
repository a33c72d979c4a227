"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_translator,
)

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "get_settings",
    "get_translator",
]
