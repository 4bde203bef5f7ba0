# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/core/logger.py
"""
Logging setup for applications embedding bottlereg.

Reader modules only call logging.getLogger("bottlereg.<area>"). Log.setup()
attaches a BottleFormatter to the package logger; a line looks like

    12:01:07 🔍 DEBUG    [MainThread] Key [Software\\Wine] not found in steam/user.reg
    12:01:07 💥 ERROR    [worker-1] Reading bottle failed  path=steam/system.reg

Pairs after the message come from extra={"ctx": {...}} on the record and from
the context of a BottleRegError passed as exc_info.
"""
from __future__ import annotations

import datetime as _dt
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from termcolor import colored

from .exceptions import BottleRegError

TRACE = 5
if logging.getLevelName(TRACE) != "TRACE":
    logging.addLevelName(TRACE, "TRACE")

# levelname -> (emoji, termcolor colour)
_LEVEL_STYLE = {
    "TRACE": ("🧬", "cyan"),
    "DEBUG": ("🔍", "blue"),
    "INFO": ("✅", "green"),
    "WARNING": ("⚠️", "yellow"),
    "ERROR": ("💥", "red"),
    "CRITICAL": ("🧨", "red"),
}


def _pairs(ctx: Dict[str, Any]) -> str:
    out = []
    for k in sorted(ctx):
        v = str(ctx[k]).replace("\r", "\\r").replace("\n", "\\n")
        out.append(f"{k}={v}")
    return " ".join(out)


class BottleFormatter(logging.Formatter):
    """Single-line records with emoji level marks and bottle context."""

    def __init__(self, *, color: bool = False, show_thread: bool = True, show_ms: bool = False):
        super().__init__()
        self.color = color
        self.show_thread = show_thread
        self.show_ms = show_ms

    @staticmethod
    def context_of(record: logging.LogRecord) -> Dict[str, Any]:
        ctx: Dict[str, Any] = dict(getattr(record, "ctx", None) or {})
        err = record.exc_info[1] if record.exc_info else None
        if isinstance(err, BottleRegError) and err.context:
            for k, v in err.context.items():
                ctx.setdefault(k, v)
        return ctx

    def format(self, record: logging.LogRecord) -> str:
        emoji, colour = _LEVEL_STYLE.get(record.levelname, ("•", None))
        when = _dt.datetime.fromtimestamp(record.created)
        ts = when.strftime("%H:%M:%S.%f")[:-3] if self.show_ms else when.strftime("%H:%M:%S")

        level = f"{record.levelname:<8}"
        msg = record.getMessage()
        if self.color and colour:
            level = colored(level, colour)
            if record.levelno >= logging.WARNING:
                msg = colored(msg, colour, attrs=["bold"])

        parts = [ts, emoji, level]
        if self.show_thread:
            parts.append(f"[{record.threadName}]")
        parts.append(msg)
        line = " ".join(parts)

        ctx = self.context_of(record)
        if ctx:
            line += "  " + _pairs(ctx)
        if record.exc_info and not isinstance(record.exc_info[1], BottleRegError):
            line += "\n" + self.formatException(record.exc_info)
        return line


class Log:
    @staticmethod
    def _level_from_flags(verbose: int, quiet: int) -> int:
        """
        -q WARNING, -qq ERROR, -v DEBUG, -vv TRACE, otherwise INFO.
        Quiet wins over verbose.
        """
        if quiet >= 2:
            return logging.ERROR
        if quiet == 1:
            return logging.WARNING
        if verbose >= 2:
            return TRACE
        if verbose == 1:
            return logging.DEBUG
        return logging.INFO

    @staticmethod
    def trace(logger: logging.Logger, msg: str, *args: Any) -> None:
        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, msg, *args)

    @staticmethod
    def setup(
        verbose: int = 0,
        log_file: Optional[str] = None,
        *,
        quiet: int = 0,
        color: Optional[bool] = None,
        logger_name: str = "bottlereg",
    ) -> logging.Logger:
        """
        Configure and return the package logger. Calling it again replaces
        the handlers of the previous call.
        """
        logger = logging.getLogger(logger_name)
        logger.propagate = False
        level = Log._level_from_flags(verbose, quiet)
        logger.setLevel(level)

        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        if color is None:
            color = bool(getattr(sys.stderr, "isatty", lambda: False)())

        sh = logging.StreamHandler(stream=sys.stderr)
        sh.setFormatter(BottleFormatter(color=color, show_ms=verbose >= 2))
        logger.addHandler(sh)

        if log_file:
            fp = Path(log_file).expanduser()
            fp.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(fp, encoding="utf-8")
            fh.setFormatter(BottleFormatter(show_ms=True))
            logger.addHandler(fh)

        logger.debug("Logger initialized (level=%s)", logging.getLevelName(level))
        return logger
