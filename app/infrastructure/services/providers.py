"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator, create_translator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    Translations are loaded once, on first use, from the directory and
    default language configured in settings.i18n. The returned instance is
    read-only and shared by every caller.

    Returns:
        Translator: Cached translator instance.

    Raises:
        TranslatorError: If translations cannot be loaded.

    Usage:
        @router.get("/welcome")
        def welcome(translator: TranslatorDep, lang: str = "en-US") -> dict:
            return {"message": translator.translate_without_args(lang, CommonKey.WELCOME)}
    """
    return create_translator(i18n_settings=get_settings().i18n)
