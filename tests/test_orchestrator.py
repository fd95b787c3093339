"""Tests for the generation orchestrator."""

from __future__ import annotations

from pathlib import Path

from claude_prompt_gen.models import PromptOptions
from claude_prompt_gen.orchestrator import Orchestrator
from claude_prompt_gen.prompting.builder import PromptBuilder


class _RecordingBuilder(PromptBuilder):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, PromptOptions]] = []

    def build(self, name: str, options: PromptOptions | None = None) -> str:
        self.calls.append((name, options))
        return "stub\n"


def test_orchestrator_writes_claude_md(tmp_path: Path) -> None:
    options = PromptOptions(language="typescript", framework="react")

    result = Orchestrator().run("WebApp", options, output_dir=tmp_path)

    assert result.path == tmp_path / "CLAUDE.md"
    assert result.path.read_text(encoding="utf-8") == result.content
    assert "## Framework" in result.content
    assert result.options is options


def test_orchestrator_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "CLAUDE.md"
    target.write_text("old contents\n", encoding="utf-8")
    builder = _RecordingBuilder()

    Orchestrator(prompt_builder=builder).run("Demo", PromptOptions(), output_dir=tmp_path)

    assert target.read_text(encoding="utf-8") == "stub\n"
    assert builder.calls == [("Demo", PromptOptions())]
