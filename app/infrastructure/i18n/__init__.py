"""i18n system - Fluent-based localization.

Loads one bundle per language from a directory of Fluent resource files and
renders messages with default-language fallback.

Main components:
- models: MessageKey, MessageKeyEnum, TranslationKey, LanguageIdentifier
- bundle: LanguageBundle wrapping a FluentBundle
- loader: TranslationLoader and FluentTranslationLoader
- translator: Translator registry and MessageTranslator builder
- errors: TranslatorError hierarchy raised while loading
- factory: create_translator() wired to I18nSettings
"""

from infrastructure.i18n.bundle import LanguageBundle
from infrastructure.i18n.errors import (
    BundleMergeError,
    DefaultLanguageMissingError,
    DirectoryReadError,
    FileTypeError,
    TranslatorError,
)
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.keys import CommonKey
from infrastructure.i18n.loader import FluentTranslationLoader, TranslationLoader
from infrastructure.i18n.models import (
    TRANSLATION_FAILED,
    LanguageIdentifier,
    MessageKey,
    MessageKeyEnum,
    TranslationKey,
)
from infrastructure.i18n.translator import MessageTranslator, Translator

__all__ = [
    "TRANSLATION_FAILED",
    "LanguageIdentifier",
    "MessageKey",
    "MessageKeyEnum",
    "TranslationKey",
    "CommonKey",
    "LanguageBundle",
    "TranslationLoader",
    "FluentTranslationLoader",
    "Translator",
    "create_translator",
    "MessageTranslator",
    "TranslatorError",
    "DirectoryReadError",
    "FileTypeError",
    "BundleMergeError",
    "DefaultLanguageMissingError",
]
