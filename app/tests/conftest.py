"""Shared fixtures for the test suite."""

import pytest

from infrastructure.services.providers import get_settings, get_translator


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset application-scoped singletons so each test sees its own environment."""
    get_settings.cache_clear()
    get_translator.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator.cache_clear()


@pytest.fixture(autouse=True)
def isolated_i18n_env(monkeypatch):
    """Remove I18N_* variables inherited from the developer environment."""
    for name in ("I18N_LOCALES_DIR", "I18N_DEFAULT_LANGUAGE", "I18N_USE_ISOLATING"):
        monkeypatch.delenv(name, raising=False)
