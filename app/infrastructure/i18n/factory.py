"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Optional

import structlog
from infrastructure.configuration import I18nSettings
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Return the locales directory shipped with the application."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    default_language: Optional[str] = None,
    use_isolating: Optional[bool] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None are read from i18n_settings (loaded from the
    environment when not given). If no directory is configured either, the
    app/locales directory is used.

    Args:
        translations_dir: Root directory with one sub-directory per language.
        default_language: Fallback language (default: I18N_DEFAULT_LANGUAGE).
        use_isolating: Wrap placeables in Unicode isolation marks.
        i18n_settings: Settings section to read defaults from.

    Returns:
        Translator: Loaded translator instance

    Raises:
        TranslatorError: If translations cannot be loaded.

    Usage:
        # Use environment settings and the bundled locales
        translator = create_translator()

        # Custom translations directory
        translator = create_translator(translations_dir=Path("/custom/locales"))
    """
    i18n_settings = i18n_settings or I18nSettings()

    if translations_dir is None:
        translations_dir = i18n_settings.locales_dir or default_translations_dir()
    if default_language is None:
        default_language = i18n_settings.default_language
    if use_isolating is None:
        use_isolating = i18n_settings.use_isolating

    translator = Translator.from_directory(
        translations_dir,
        default_language,
        use_isolating=use_isolating,
    )
    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        default_language=default_language,
        languages=translator.get_available_languages(),
    )
    return translator
