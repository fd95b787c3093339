"""Shared constants for CLAUDE.md prompting and fallbacks."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..models import LanguagePromptSet

OUTPUT_FILENAME = "CLAUDE.md"

PYTHON_PROMPTS = LanguagePromptSet(
    framework="You are an expert Python developer. Follow PEP 8 style guidelines.",
    test="Write tests using pytest. Ensure 80% code coverage.",
    doc="Include docstrings for all functions and classes.",
)

JS_PROMPTS = LanguagePromptSet(
    framework=(
        "You are an expert JavaScript/TypeScript developer. Follow modern ES6+ patterns."
    ),
    test="Write tests using Jest. Follow TDD principles.",
    doc="Include JSDoc comments for all functions.",
)

# javascript and typescript share one prompt set.
LANGUAGES: Mapping[str, LanguagePromptSet] = MappingProxyType(
    {
        "python": PYTHON_PROMPTS,
        "javascript": JS_PROMPTS,
        "typescript": JS_PROMPTS,
    }
)

DEFAULT_PROMPT = (
    "# Claude Instructions\n"
    "\n"
    "You are an expert software developer. Follow these guidelines:\n"
    "- Write clean, maintainable code\n"
    "- Include appropriate comments\n"
    "- Consider security best practices\n"
    "- Write tests for your code\n"
)

FALLBACK_TEST_PROMPT = "Write comprehensive tests for all features."
FALLBACK_DOC_PROMPT = "Document all public APIs and complex logic."
FRAMEWORK_PROMPT_FMT = "Using {framework}. Follow framework-specific best practices."

SECTION_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "language": "Language",
        "testing": "Testing",
        "documentation": "Documentation",
        "framework": "Framework",
    }
)


__all__ = [
    "DEFAULT_PROMPT",
    "FALLBACK_DOC_PROMPT",
    "FALLBACK_TEST_PROMPT",
    "FRAMEWORK_PROMPT_FMT",
    "JS_PROMPTS",
    "LANGUAGES",
    "OUTPUT_FILENAME",
    "PYTHON_PROMPTS",
    "SECTION_TITLES",
]
