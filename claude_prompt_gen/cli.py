"""CLI entrypoint for claude-prompt-gen."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from .arguments import EmptyArgumentsError, MissingNameError, parse_arguments
from .logging import configure_logging
from .orchestrator import GenerationResult, Orchestrator

USAGE = """\
Usage: claude-prompt-gen --name <project> [options]

Options:
  --name <project>     Project name (required)
  --lang <python|javascript|typescript>  Language
  --framework <name>   Framework name
  --no-tests           Skip test instructions
  --no-docs            Skip documentation instructions
  -v, --verbose        Increase log verbosity for troubleshooting

Examples:
  claude-prompt-gen --name "API" --lang python --framework fastapi
  claude-prompt-gen --name "WebApp" --lang typescript --framework react"""


def main(argv: Sequence[str] | None = None, *, output_dir: Path | None = None) -> int:
    """Run the generator and return the process exit status."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    try:
        parsed = parse_arguments(tokens)
    except EmptyArgumentsError:
        print(USAGE)
        return 1
    except MissingNameError as exc:
        print(f"Error: {exc}")
        return 1

    configure_logging(verbose=parsed.verbose)

    result = Orchestrator().run(parsed.name, parsed.options, output_dir=output_dir)
    _report(result)
    return 0


def _report(result: GenerationResult) -> None:
    # Consoles that cannot encode the check mark get a replacement character.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="replace")
    options = result.options
    print(f"✓ Created {result.path.name} for '{result.name}'")
    if options.language:
        print(f"  Language: {options.language}")
    if options.framework:
        print(f"  Framework: {options.framework}")
    print(f"  Tests: {_format_bool(options.include_tests)}")
    print(f"  Docs: {_format_bool(options.include_docs)}")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def run() -> None:
    """Console-script wrapper that exits with :func:`main`'s status."""
    sys.exit(main())


if __name__ == "__main__":
    run()
