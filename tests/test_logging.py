"""Tests for logging configuration."""

from __future__ import annotations

import logging

from claude_prompt_gen.logging import configure_logging, get_logger


def test_get_logger_is_namespaced() -> None:
    assert get_logger("writer").name == "claude_prompt_gen.writer"
    assert get_logger().name == "claude_prompt_gen"


def test_configure_logging_resets_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False

    assert configure_logging().level == logging.INFO
