# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
"""
Shared logging utilities for bottlereg.

Provides common logging helpers to avoid duplication across modules.
"""
from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Any, Generator

from .exceptions import BottleRegError


def emoji_for_level(level: int) -> str:
    """
    Return emoji symbol for log level.

    Args:
        level: logging level (ERROR, WARNING, INFO, DEBUG)

    Returns:
        Emoji string for the level
    """
    if level >= logging.ERROR:
        return "❌"
    if level >= logging.WARNING:
        return "⚠️"
    if level >= logging.INFO:
        return "✅"
    return "🔍"


def log_with_emoji(logger: logging.Logger, level: int, msg: str, *args: Any) -> None:
    """
    Log a message with an emoji prefix based on log level.

    Args:
        logger: Logger instance to use
        level: logging level (ERROR, WARNING, INFO, DEBUG)
        msg: Message format string
        *args: Arguments for message formatting
    """
    logger.log(level, f"{emoji_for_level(level)} {msg}", *args)


@contextmanager
def log_step(logger: logging.Logger, description: str, *, level: int = logging.DEBUG) -> Generator[None, None, None]:
    """
    Context manager for logging and timing operation steps.

    Logs the start of an operation, executes the block, then logs
    completion with elapsed time. Logs error and re-raises on exception;
    a BottleRegError is logged with its context (path, prefix, ...).

    Args:
        logger: Logger instance to use
        description: Description of the operation
        level: level used for the start/done lines

    Example:
        with log_step(logger, "Reading bottle"):
            snapshot = read_bottle(prefix)
    """
    t0 = time.monotonic()
    log_with_emoji(logger, level, "%s ...", description)
    try:
        yield
        log_with_emoji(logger, level, "%s done (%.3fs)", description, time.monotonic() - t0)
    except Exception as e:
        detail = e.user_message(include_context=True) if isinstance(e, BottleRegError) else e
        log_with_emoji(logger, logging.ERROR, "%s failed (%.3fs): %s", description, time.monotonic() - t0, detail)
        raise
