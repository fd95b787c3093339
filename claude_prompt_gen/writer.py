"""Persists generated documents to disk."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger

logger = get_logger("writer")


def write_document(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, replacing any existing file."""
    existed = path.exists()
    try:
        path.write_text(content, encoding="utf-8")
    except OSError:
        logger.debug("Unable to write %s", path, exc_info=True)
        raise
    logger.debug(
        "%s %s (%d bytes)", "Overwrote" if existed else "Wrote", path, len(content.encode("utf-8"))
    )
    return path


__all__ = ["write_document"]
