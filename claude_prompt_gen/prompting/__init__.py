"""Prompt tables and the CLAUDE.md builder."""

from .builder import PromptBuilder, Section, generate_prompt
from .constants import LANGUAGES

__all__ = ["LANGUAGES", "PromptBuilder", "Section", "generate_prompt"]
