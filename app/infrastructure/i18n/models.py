"""Translation models for i18n system.

Defines language identifiers and the message key contract shared by every
caller of the translator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from babel.core import parse_locale

TRANSLATION_FAILED = "An error has occurred while trying to translate the message"


@runtime_checkable
class MessageKey(Protocol):
    """Anything that names a message inside a language bundle."""

    def as_str(self) -> str:
        """Return the Fluent message identifier."""
        ...


class MessageKeyEnum(str, Enum):
    """Base class for per-feature message key enumerations.

    Members hold the Fluent message identifier as their value:

        class IncidentKey(MessageKeyEnum):
            CREATED = "incident-created"
    """

    def as_str(self) -> str:
        return self.value


@dataclass(frozen=True)
class TranslationKey:
    """Represents a namespaced translation key.

    Fluent identifiers cannot contain dots, so the key maps to
    "<namespace>-<message_key>" inside the bundle.

    Attributes:
        namespace: Top-level namespace (e.g., "incident", "role").
        message_key: Specific message identifier (e.g., "created").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        """Return full dot-separated key path.

        Returns:
            Full key (e.g., "incident.created").
        """
        return f"{self.namespace}.{self.message_key}"

    def as_str(self) -> str:
        """Return the Fluent message identifier (e.g., "incident-created")."""
        return f"{self.namespace}-{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "incident.created").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass(frozen=True)
class LanguageIdentifier:
    """A validated language tag such as "en-US" or "zh-Hant-TW".

    Attributes:
        language: Primary language subtag, lower case.
        script: Optional script subtag (e.g., "Hant").
        territory: Optional region subtag (e.g., "US").
        variant: Optional variant subtag.
    """

    language: str
    script: Optional[str] = None
    territory: Optional[str] = None
    variant: Optional[str] = None

    def __str__(self) -> str:
        return "-".join(
            part
            for part in (self.language, self.script, self.territory, self.variant)
            if part
        )

    @classmethod
    def parse(cls, tag: str) -> "LanguageIdentifier":
        """Parse a language tag.

        Subtags may be separated by "-" or "_", so POSIX-style names such as
        "en_US" are accepted. Callers keep the tag as written.

        Args:
            tag: Language tag (e.g., "en-US", "fr", "sr-Latn-RS").

        Returns:
            LanguageIdentifier instance.

        Raises:
            ValueError: If the tag is not a valid language identifier.
        """
        # babel silently drops ".charset" and "@modifier" suffixes
        if not tag or not tag.isascii() or any(char in tag for char in ".@ "):
            raise ValueError(f"Invalid language identifier: {tag}")

        try:
            parts = parse_locale(tag.replace("_", "-"), sep="-")
        except ValueError as e:
            raise ValueError(f"Invalid language identifier: {tag}") from e

        language, territory, script, variant = parts[:4]
        if len(language) not in (2, 3, 5, 6, 7, 8):
            raise ValueError(f"Invalid language identifier: {tag}")

        return cls(
            language=language,
            script=script,
            territory=territory,
            variant=variant,
        )
