"""Translation loading interface and implementations.

Defines the contract for loading translations and provides the Fluent
directory loader. Expected layout:

    <translations_dir>/
        en-US/
            common.ftl
            incident.ftl
        fr-FR/
            common.ftl
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from fluent.runtime import FluentResource
from fluent.syntax import ast as FTL

from infrastructure.i18n.bundle import LanguageBundle
from infrastructure.i18n.errors import (
    BundleMergeError,
    DirectoryReadError,
    FileTypeError,
)
from infrastructure.i18n.models import LanguageIdentifier
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to discover languages and build one
    bundle per language.
    """

    @abstractmethod
    def load_all(self) -> Dict[str, LanguageBundle]:
        """Load bundles for every available language.

        Returns:
            Dict mapping language identifier to its frozen LanguageBundle.

        Raises:
            TranslatorError: If loading hits a structural problem.
        """
        pass


class FluentTranslationLoader(TranslationLoader):
    """Loader for directories of Fluent (.ftl) resource files.

    Every immediate sub-directory named by a valid language identifier becomes
    one bundle made of all the files it contains. Unreadable or corrupt files
    are logged and skipped; unreadable directories and conflicting
    definitions abort loading.

    Attributes:
        translations_dir: Root directory with one sub-directory per language.
        use_isolating: Passed to every FluentBundle.
    """

    def __init__(self, translations_dir: Path, use_isolating: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_isolating = use_isolating

    def load_all(self) -> Dict[str, LanguageBundle]:
        log = logger.bind(translations_dir=str(self.translations_dir))
        log.info("loading_translations")

        translations: Dict[str, LanguageBundle] = {}
        for entry in self._list_directory(self.translations_dir):
            if not self._is_directory(entry):
                log.warning("ignoring_non_directory", name=entry.name)
                continue

            try:
                LanguageIdentifier.parse(entry.name)
            except ValueError:
                log.warning("invalid_language_directory", name=entry.name)
                continue

            translations[entry.name] = self.load_language(entry)

        log.info("loaded_languages", language_count=len(translations))
        return translations

    def load_language(self, directory: Path) -> LanguageBundle:
        """Build the bundle for a single language directory.

        Args:
            directory: Directory named by a language identifier.

        Returns:
            Frozen LanguageBundle with the messages of every well-formed file.

        Raises:
            DirectoryReadError: If the directory cannot be listed.
            BundleMergeError: If a file redefines an existing message or term.
        """
        language = directory.name
        log = logger.bind(language=language)
        log.debug("loading_language")

        bundle = LanguageBundle(language, use_isolating=self.use_isolating)
        for file_path in self._list_directory(directory):
            file_data = self._read_file(file_path)
            if file_data is None:
                continue

            content, file_name = file_data
            resource = FluentResource(content)

            junk = [entry for entry in resource.body if isinstance(entry, FTL.Junk)]
            if junk:
                log.error(
                    "corrupt_entry",
                    file=file_name,
                    errors=_junk_errors(junk),
                )
                continue

            try:
                bundle.add_resource(resource)
            except ValueError as e:
                log.error("bundle_merge_failed", file=file_name, error=str(e))
                raise BundleMergeError(
                    f"Could not add data from file {file_name} to bundle {language}: {e}"
                ) from e

        bundle.freeze()
        log.debug("loaded_language", message_count=len(bundle.message_ids))
        return bundle

    def _list_directory(self, directory: Path) -> List[Path]:
        try:
            return sorted(directory.iterdir())
        except OSError as e:
            logger.error("read_dir_failed", directory=str(directory), error=str(e))
            raise DirectoryReadError(
                f"An error has occurred while reading directory {directory}"
            ) from e

    def _is_directory(self, entry: Path) -> bool:
        try:
            return entry.is_dir()
        except OSError as e:
            logger.error("file_type_failed", name=entry.name, error=str(e))
            raise FileTypeError(f"Could not get file type from {entry.name}") from e

    def _read_file(self, file_path: Path) -> Optional[Tuple[str, str]]:
        logger.debug("loading_file", file=file_path.name)
        try:
            return file_path.read_text(encoding="utf-8"), file_path.name
        except (OSError, UnicodeDecodeError) as e:
            logger.error("file_read_failed", file=file_path.name, error=str(e))
            return None


def _junk_errors(junk: List[FTL.Junk]) -> List[str]:
    errors = []
    for entry in junk:
        for annotation in entry.annotations:
            errors.append(f"{annotation.code}: {annotation.message}")
    return errors
