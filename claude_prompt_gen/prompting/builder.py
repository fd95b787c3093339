"""Builds CLAUDE.md documents from the static prompt tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

from ..logging import get_logger
from ..models import LanguagePromptSet, PromptOptions
from .constants import (
    DEFAULT_PROMPT,
    FALLBACK_DOC_PROMPT,
    FALLBACK_TEST_PROMPT,
    FRAMEWORK_PROMPT_FMT,
    LANGUAGES,
    SECTION_TITLES,
)


@dataclass(frozen=True)
class Section:
    """Rendered CLAUDE.md section details."""

    name: str
    title: str
    body: str


class PromptBuilder:
    """Assembles the header, default guidelines and optional sections.

    The builder has no side effects: the same name and options always render
    the same string.
    """

    def __init__(
        self,
        languages: Mapping[str, LanguagePromptSet] | None = None,
        *,
        default_prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self.languages = languages if languages is not None else LANGUAGES
        self.default_prompt = default_prompt
        self.logger = get_logger("prompting")

    def build(self, name: str, options: PromptOptions | None = None) -> str:
        options = options or PromptOptions()
        sections = self.render_sections(options)
        self.logger.debug(
            "Rendering %d section(s) for %s: %s",
            len(sections),
            name,
            ", ".join(section.name for section in sections) or "(none)",
        )
        parts = [f"# Project: {name}\n\n{self.default_prompt}\n"]
        parts.extend(self._render_section(section) for section in sections)
        return "".join(parts)

    def render_sections(self, options: PromptOptions) -> List[Section]:
        """Return the optional sections in document order."""
        prompts = options.resolve_language(self.languages)
        if options.language and prompts is None:
            self.logger.debug(
                "Unknown language %r; using generic testing and documentation text",
                options.language,
            )

        sections: List[Section] = []
        if prompts is not None:
            sections.append(self._section("language", prompts.framework))
        if options.include_tests:
            body = prompts.test if prompts is not None else FALLBACK_TEST_PROMPT
            sections.append(self._section("testing", body))
        if options.include_docs:
            body = prompts.doc if prompts is not None else FALLBACK_DOC_PROMPT
            sections.append(self._section("documentation", body))
        if options.framework:
            body = FRAMEWORK_PROMPT_FMT.format(framework=options.framework)
            sections.append(self._section("framework", body))
        return sections

    @staticmethod
    def _section(name: str, body: str) -> Section:
        return Section(name=name, title=SECTION_TITLES[name], body=body)

    @staticmethod
    def _render_section(section: Section) -> str:
        return f"\n## {section.title}\n\n{section.body}\n"


def generate_prompt(name: str, options: PromptOptions | None = None) -> str:
    """Render a CLAUDE.md document with the built-in language table."""
    return PromptBuilder().build(name, options)


__all__ = ["PromptBuilder", "Section", "generate_prompt"]
