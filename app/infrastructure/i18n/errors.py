"""Errors raised while building the translator."""


class TranslatorError(Exception):
    """Base class for translator construction failures.

    Attributes:
        name: Machine-readable error kind (e.g., "READ_DIR_ERROR").
        description: Human-readable explanation.
    """

    name = "TRANSLATOR_ERROR"

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"


class DirectoryReadError(TranslatorError):
    """The translations root or a language directory could not be listed."""

    name = "READ_DIR_ERROR"


class FileTypeError(TranslatorError):
    """Could not tell whether an entry of the translations root is a directory."""

    name = "READ_FILE_ERROR"


class BundleMergeError(TranslatorError):
    """A parsed resource could not be added to its language bundle."""

    name = "BUNDLE_ERROR"


class DefaultLanguageMissingError(TranslatorError):
    """No translations were loaded for the default language."""

    name = "DEFAULT_LANGUAGE_ERROR"
