"""Shared fixtures for infrastructure tests.

Provides locale trees on disk and translators loaded from them.
"""

import pytest

from infrastructure.i18n import Translator
from tests.factories.i18n import make_locales_tree


@pytest.fixture
def locales_dir(tmp_path):
    """Create a temporary locales tree.

    Returns a directory structure like:
    - README.md              (ignored: not a directory)
    - not_a_language/        (ignored: invalid language identifier)
    - en-US/common.ftl
    - en-US/incident.ftl
    - fr-FR/common.ftl       (subset of en-US keys)
    - es-ES/broken.ftl       (skipped: corrupt)
    - es-ES/valid.ftl
    """
    root = make_locales_tree(tmp_path / "locales")
    (root / "README.md").write_text("Translations live here.", encoding="utf-8")
    ignored = root / "not_a_language"
    ignored.mkdir()
    (ignored / "common.ftl").write_text("hello = Ignored", encoding="utf-8")
    return root


@pytest.fixture
def translator(locales_dir):
    """Translator without Unicode isolation marks, defaulting to en-US."""
    return Translator.from_directory(locales_dir, "en-US", use_isolating=False)
