"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.i18n import Translator
from infrastructure.services.providers import get_settings, get_translator

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Shared, read-only translator loaded at first use
TranslatorDep = Annotated[Translator, Depends(get_translator)]

__all__ = [
    "SettingsDep",
    "TranslatorDep",
]
