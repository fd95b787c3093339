"""Generate CLAUDE.md instruction files from a handful of CLI flags."""

from .models import LanguagePromptSet, PromptOptions
from .prompting.builder import PromptBuilder, generate_prompt

__version__ = "0.1.0"

__all__ = ["LanguagePromptSet", "PromptBuilder", "PromptOptions", "generate_prompt"]
