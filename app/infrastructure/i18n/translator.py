"""Translation service for resolving and formatting localized messages.

Resolution falls back to the default language twice: when the requested
language was never loaded, and when the requested language lacks the key.
Formatting never raises; failures are logged and replaced by
TRANSLATION_FAILED.
"""

from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from infrastructure.i18n.bundle import LanguageBundle
from infrastructure.i18n.errors import DefaultLanguageMissingError
from infrastructure.i18n.loader import FluentTranslationLoader, TranslationLoader
from infrastructure.i18n.models import TRANSLATION_FAILED, MessageKey
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from fluent.runtime.resolver import Message

logger = get_module_logger()

K = TypeVar("K", bound=MessageKey)


def _render(
    bundle: LanguageBundle,
    key: MessageKey,
    message: "Message",
    args: Optional[Dict[str, Any]] = None,
) -> str:
    if message.value is None:
        logger.error("translation_has_no_value", key=key.as_str(), language=bundle.language)
        return TRANSLATION_FAILED

    translated, errors = bundle.format_pattern(message.value, args)
    if errors:
        logger.error(
            "translation_failed",
            key=key.as_str(),
            language=bundle.language,
            arguments=args,
            errors=[str(error) for error in errors],
        )
        return TRANSLATION_FAILED

    return translated


class MessageTranslator(Generic[K]):
    """Single-use builder that collects arguments and renders one message.

    Created by Translator.translate(). Arguments are set with add_argument()
    (chainable, last value wins) and build() renders the message. The builder
    cannot be used again after build().

    Attributes:
        key: Key of the message being translated.
        bundle: Bundle used for formatting (owned by the Translator).
        message: Resolved message, or None if no loaded language defines it.
        args: Arguments collected so far.
    """

    def __init__(
        self,
        key: K,
        bundle: LanguageBundle,
        message: Optional["Message"],
    ):
        self.key = key
        self.bundle = bundle
        self.message = message
        self.args: Dict[str, Any] = {}
        self._built = False

    def _ensure_not_built(self) -> None:
        if self._built:
            raise RuntimeError(
                f"Translation of {self.key.as_str()} has already been built"
            )

    def add_argument(self, name: str, value: Any) -> "MessageTranslator[K]":
        """Set a named argument, replacing any previous value.

        Args:
            name: Argument name as referenced in the pattern (``{ $name }``).
            value: str, number, date/datetime or Fluent value.

        Returns:
            The same builder, for chaining.
        """
        self._ensure_not_built()
        self.args[name] = value
        return self

    def add_arguments(self, **arguments: Any) -> "MessageTranslator[K]":
        """Set several named arguments at once."""
        self._ensure_not_built()
        self.args.update(arguments)
        return self

    def build(self) -> str:
        """Render the message with the collected arguments.

        Returns:
            The translated text, or TRANSLATION_FAILED if the message is
            missing or formatting reported errors.
        """
        self._ensure_not_built()
        self._built = True

        if self.message is None:
            logger.error("translation_key_not_found", key=self.key.as_str())
            return TRANSLATION_FAILED

        return _render(self.bundle, self.key, self.message, self.args or None)


class Translator:
    """Registry of language bundles with default-language fallback.

    Immutable after construction; lookups and rendering only read the
    bundles, so one instance can be shared by concurrent callers.

    Usage:
        translator = Translator.from_directory(Path("locales"), "en-US")

        translator.translate_without_args("fr-FR", CommonKey.WELCOME)

        translator.translate("fr-FR", CommonKey.GREETING).add_argument(
            "name", "Alice"
        ).build()
    """

    def __init__(
        self,
        translations: Mapping[str, LanguageBundle],
        default_language: str,
    ):
        """Initialize Translator.

        Args:
            translations: Mapping of language identifier to bundle.
            default_language: Language used for fallback; must be loaded.

        Raises:
            DefaultLanguageMissingError: If default_language has no bundle.
        """
        if default_language not in translations:
            logger.error(
                "default_language_missing",
                default_language=default_language,
                available_languages=sorted(translations),
            )
            raise DefaultLanguageMissingError(
                f"{default_language} was designated as default language, "
                "but no translations were provided for this language"
            )

        self._translations: Mapping[str, LanguageBundle] = MappingProxyType(
            dict(translations)
        )
        self._default_language = default_language
        logger.info(
            "initialized_translator",
            default_language=default_language,
            language_count=len(self._translations),
        )

    @classmethod
    def from_loader(
        cls, loader: TranslationLoader, default_language: str
    ) -> "Translator":
        """Build a Translator from every language the loader provides."""
        return cls(loader.load_all(), default_language)

    @classmethod
    def from_directory(
        cls,
        language_directory: Path,
        default_language: str,
        use_isolating: bool = True,
    ) -> "Translator":
        """Load a directory of per-language Fluent files.

        Args:
            language_directory: Root with one sub-directory per language.
            default_language: Language used for fallback.
            use_isolating: Wrap placeables in Unicode isolation marks.

        Returns:
            Translator instance.

        Raises:
            TranslatorError: If the directory tree cannot be loaded or the
                default language is missing.
        """
        loader = FluentTranslationLoader(language_directory, use_isolating=use_isolating)
        return cls.from_loader(loader, default_language)

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def translations(self) -> Mapping[str, LanguageBundle]:
        """Read-only view of the loaded bundles."""
        return self._translations

    def get_available_languages(self) -> List[str]:
        return sorted(self._translations)

    def has_language(self, language: str) -> bool:
        return language in self._translations

    def get_bundle(self, language: str) -> Optional[LanguageBundle]:
        return self._translations.get(language)

    def has_message(self, language: str, key: MessageKey) -> bool:
        """Check if the language itself defines the key (no fallback)."""
        bundle = self._translations.get(language)
        return bundle.has_message(key.as_str()) if bundle else False

    def get_message(
        self, language: str, key: MessageKey
    ) -> Tuple[Optional["Message"], LanguageBundle]:
        """Resolve a message with default-language fallback.

        Args:
            language: Requested language identifier.
            key: Key of the message.

        Returns:
            Tuple of the message (None if no loaded language defines it) and
            the bundle of the selected language. The bundle is the requested
            language's one even when the message came from the default
            language.
        """
        message_id = key.as_str()

        bundle = self._translations.get(language)
        if bundle is None:
            logger.debug(
                "unknown_language_fallback",
                language=language,
                default_language=self._default_language,
            )
            bundle = self._translations[self._default_language]
            language = self._default_language

        message = bundle.get_message(message_id)

        if message is None and language != self._default_language:
            logger.debug(
                "missing_key_fallback",
                key=message_id,
                language=language,
                default_language=self._default_language,
            )
            message = self._translations[self._default_language].get_message(
                message_id
            )

        return message, bundle

    def translate(self, language: str, key: K) -> MessageTranslator[K]:
        """Start a translation that accepts arguments before build()."""
        message, bundle = self.get_message(language, key)
        return MessageTranslator(key, bundle, message)

    def translate_without_args(self, language: str, key: MessageKey) -> str:
        """Translate a message that takes no arguments.

        Returns:
            The translated text, or TRANSLATION_FAILED if the message is
            missing or formatting reported errors.
        """
        message, bundle = self.get_message(language, key)
        if message is None:
            logger.error("translation_key_not_found", key=key.as_str())
            return TRANSLATION_FAILED

        return _render(bundle, key, message)
