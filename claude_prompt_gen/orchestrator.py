"""Pipeline orchestration for a single CLAUDE.md generation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .logging import get_logger
from .models import PromptOptions
from .prompting.builder import PromptBuilder
from .prompting.constants import OUTPUT_FILENAME
from .writer import write_document


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    name: str
    options: PromptOptions
    path: Path
    content: str


class Orchestrator:
    """Builds the document for a project and writes it to ``CLAUDE.md``."""

    def __init__(self, prompt_builder: PromptBuilder | None = None) -> None:
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.logger = get_logger("orchestrator")

    def run(
        self,
        name: str,
        options: PromptOptions,
        *,
        output_dir: Path | None = None,
    ) -> GenerationResult:
        """Render and write the document; write errors propagate."""
        directory = output_dir if output_dir is not None else Path.cwd()
        output_path = directory / OUTPUT_FILENAME
        self.logger.debug("Generating %s for %r", OUTPUT_FILENAME, name)
        content = self.prompt_builder.build(name, options)
        write_document(output_path, content)
        self.logger.debug("%s written to %s", OUTPUT_FILENAME, output_path)
        return GenerationResult(name=name, options=options, path=output_path, content=content)


__all__ = ["GenerationResult", "Orchestrator"]
