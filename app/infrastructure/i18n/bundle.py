"""Per-language message bundle built on top of Fluent."""

from typing import TYPE_CHECKING, Any, Dict, FrozenSet, List, Optional, Tuple

from fluent.runtime import FluentBundle
from fluent.syntax import ast as FTL

if TYPE_CHECKING:
    from fluent.runtime.resolver import Message, Pattern


class LanguageBundle:
    """Compiled set of messages for one language.

    Wraps a FluentBundle and refuses resources that would redefine an entry
    already present, since Fluent itself silently keeps the first definition.
    Messages and terms share one namespace: a message "brand" and a term
    "-brand" collide. Once frozen, every message is compiled and no resource
    can be added, so lookups and formatting only read shared state.

    Attributes:
        language: Language identifier the bundle was loaded for (e.g., "en-US").
    """

    def __init__(self, language: str, use_isolating: bool = True):
        self.language = language
        # babel has no data for tags such as "xx-XX"; "en" keeps plural and
        # number formatting available for them
        self._bundle = FluentBundle([language, "en"], use_isolating=use_isolating)
        self._entry_ids: set[str] = set()
        self._message_ids: set[str] = set()
        self._frozen = False

    def __repr__(self) -> str:
        return f"LanguageBundle(language={self.language!r}, messages={len(self.message_ids)})"

    @property
    def message_ids(self) -> FrozenSet[str]:
        """Identifiers of all messages (terms excluded)."""
        return frozenset(self._message_ids)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_resource(self, resource: FTL.Resource) -> None:
        """Merge a parsed resource into the bundle.

        Args:
            resource: Parsed Fluent resource without junk entries.

        Raises:
            ValueError: If the resource defines a message or term that already
                exists in the bundle or is defined twice in the resource.
            RuntimeError: If the bundle is frozen.
        """
        if self._frozen:
            raise RuntimeError(f"Bundle for {self.language} is frozen")

        entry_ids: List[str] = []
        message_ids: List[str] = []
        duplicates = set()
        for entry in resource.body:
            if not isinstance(entry, (FTL.Message, FTL.Term)):
                continue
            entry_id = entry.id.name
            if isinstance(entry, FTL.Message):
                message_ids.append(entry_id)
            if entry_id in self._entry_ids or entry_id in entry_ids:
                duplicates.add(entry_id)
            entry_ids.append(entry_id)

        if duplicates:
            raise ValueError(f"Duplicate entries: {', '.join(sorted(duplicates))}")

        self._bundle.add_resource(resource)
        self._entry_ids.update(entry_ids)
        self._message_ids.update(message_ids)

    def freeze(self) -> None:
        """Compile every message and reject further resources."""
        for message_id in self.message_ids:
            self._bundle.get_message(message_id)
        self._frozen = True

    def has_message(self, message_id: str) -> bool:
        return self._bundle.has_message(message_id)

    def get_message(self, message_id: str) -> Optional["Message"]:
        """Return the compiled message, or None if the bundle does not define it."""
        if not self._bundle.has_message(message_id):
            return None
        return self._bundle.get_message(message_id)

    def format_pattern(
        self,
        pattern: "Pattern",
        args: Optional[Dict[str, Any]] = None,
    ) -> Tuple[str, List[Exception]]:
        """Render a message pattern.

        Args:
            pattern: Compiled pattern, usually ``message.value``.
            args: Named arguments referenced as ``{ $name }`` in the pattern.

        Returns:
            Tuple of the rendered text and the formatting errors Fluent reported.
        """
        value, errors = self._bundle.format_pattern(pattern, args)
        return str(value), errors
