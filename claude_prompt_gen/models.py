"""Data models shared by the parser and the prompt builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class LanguagePromptSet:
    """Canned guidance for one language."""

    framework: str
    test: str
    doc: str


@dataclass(frozen=True)
class PromptOptions:
    """Options collected from the command line.

    ``language`` is kept verbatim and only used as a lookup key; an unknown
    identifier falls back to the generic testing/documentation text. Tests and
    docs sections are included unless explicitly disabled.
    """

    language: Optional[str] = None
    framework: Optional[str] = None
    include_tests: bool = True
    include_docs: bool = True

    def resolve_language(
        self, table: Mapping[str, LanguagePromptSet]
    ) -> Optional[LanguagePromptSet]:
        """Return the prompt set for ``language`` in ``table`` or ``None`` when unknown."""
        if not self.language:
            return None
        return table.get(self.language)


__all__ = ["LanguagePromptSet", "PromptOptions"]
