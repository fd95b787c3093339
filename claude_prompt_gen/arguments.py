"""Lenient left-to-right parsing of claude-prompt-gen command-line tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .models import PromptOptions

_VALUE_FLAGS = {
    "--name": "name",
    "--lang": "language",
    "--framework": "framework",
}


class UsageError(ValueError):
    """Raised when the command line cannot produce a document."""


class EmptyArgumentsError(UsageError):
    """Raised when no arguments were supplied at all."""


class MissingNameError(UsageError):
    """Raised when ``--name`` was not supplied."""

    def __init__(self) -> None:
        super().__init__("--name is required")


@dataclass(frozen=True)
class ParsedArguments:
    """Project name and options produced by :func:`parse_arguments`."""

    name: str
    options: PromptOptions = field(default_factory=PromptOptions)
    verbose: bool = False


def parse_arguments(tokens: Sequence[str]) -> ParsedArguments:
    """Parse ``tokens`` (program name excluded) into a name and options.

    Unknown tokens are ignored. A value flag is ignored when no non-empty
    token follows it; otherwise the next token is consumed verbatim, even if
    it looks like a flag.
    """
    if not tokens:
        raise EmptyArgumentsError("no arguments supplied")

    values: dict[str, Optional[str]] = {"name": None, "language": None, "framework": None}
    include_tests = True
    include_docs = True
    verbose = False

    index = 0
    while index < len(tokens):
        token = tokens[index]
        target = _VALUE_FLAGS.get(token)
        if target is not None:
            if index + 1 < len(tokens) and tokens[index + 1]:
                values[target] = tokens[index + 1]
                index += 1
        elif token == "--no-tests":
            include_tests = False
        elif token == "--no-docs":
            include_docs = False
        elif token in {"-v", "--verbose"}:
            verbose = True
        index += 1

    name = values["name"]
    if not name:
        raise MissingNameError()

    options = PromptOptions(
        language=values["language"],
        framework=values["framework"],
        include_tests=include_tests,
        include_docs=include_docs,
    )
    return ParsedArguments(name=name, options=options, verbose=verbose)


__all__ = [
    "EmptyArgumentsError",
    "MissingNameError",
    "ParsedArguments",
    "UsageError",
    "parse_arguments",
]
