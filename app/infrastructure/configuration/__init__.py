"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the translator
using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Module-level Settings instance (used to bootstrap logging)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation loading settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_language = settings.i18n.default_language
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "settings", "I18nSettings"]
