"""Internationalization infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation loading configuration.

    Environment Variables:
        I18N_LOCALES_DIR: Root directory holding one sub-directory of Fluent
            files per language (default: auto-discover app/locales)
        I18N_DEFAULT_LANGUAGE: Language used when a language or message is
            missing (default: en-US)
        I18N_USE_ISOLATING: Wrap placeables in Unicode isolation marks
            (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default_language = settings.i18n.default_language
        ```
    """

    locales_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Root directory of per-language Fluent resources",
    )
    default_language: str = Field(
        default="en-US",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Fallback language identifier",
    )
    use_isolating: bool = Field(
        default=True,
        alias="I18N_USE_ISOLATING",
        description="Wrap placeables in FSI/PDI isolation marks",
    )

    @field_validator("locales_dir", mode="before")
    @classmethod
    def validate_locales_dir(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty I18N_LOCALES_DIR as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """Strip surrounding whitespace and reject empty values."""
        v = v.strip()
        if not v:
            raise ValueError("I18N_DEFAULT_LANGUAGE must not be empty")
        return v
