"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    SampleKey,
    make_language_bundle,
    make_locales_tree,
    make_translation_key,
)

__all__ = [
    "SampleKey",
    "make_language_bundle",
    "make_locales_tree",
    "make_translation_key",
]
