# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/core/exceptions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _safe_int(x: Any, default: int = 1) -> int:
    try:
        return int(x)
    except Exception:
        return default


def _one_line(s: str, limit: int = 600) -> str:
    s = (s or "").strip().replace("\r", " ").replace("\n", " ")
    s = " ".join(s.split())
    return s if len(s) <= limit else (s[: limit - 3] + "...")


def _format_context_compact(ctx: Dict[str, Any]) -> str:
    return ", ".join(f"{k}={ctx.get(k)!r}" for k in sorted(ctx.keys()))


@dataclass(eq=False)
class BottleRegError(Exception):
    """
    Base project error with:
      - stable fields for reporting/JSON
      - readable __str__ (what users see)
      - optional context (path, key_path, ...) attached by the raiser
    """
    code: int = 1
    msg: str = "error"
    cause: Optional[BaseException] = None
    context: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.code = _safe_int(self.code, default=1)
        self.msg = _one_line(self.msg) or self.__class__.__name__
        super().__init__(self.msg)
        self.args = (self.msg,)

    def with_context(self, **ctx: Any) -> "BottleRegError":
        if self.context is None:
            self.context = {}
        self.context.update(ctx)
        return self

    def user_message(self, *, include_context: bool = False, include_cause: bool = False) -> str:
        base = self.msg or self.__class__.__name__
        parts = [base]

        if include_context and self.context:
            parts.append(f"[{_one_line(_format_context_compact(self.context), limit=600)}]")

        if include_cause and self.cause is not None:
            parts.append(f"(cause: {type(self.cause).__name__}: {_one_line(str(self.cause))})")

        return " ".join(parts)

    def __str__(self) -> str:
        return self.user_message(include_context=False, include_cause=False)

    def to_dict(self, *, include_cause: bool = False) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "type": self.__class__.__name__,
            "code": self.code,
            "message": self.msg,
            "context": self.context or {},
        }
        if include_cause and self.cause is not None:
            d["cause"] = {"type": type(self.cause).__name__, "message": _one_line(str(self.cause))}
        return d


class RegistryFileError(BottleRegError):
    """
    A registry snapshot file (user.reg / system.reg) could not be opened or read.
    Never raised for a missing key or value; those are empty results.
    """
    pass


class WindowsVersionUndetermined(BottleRegError):
    """
    None of the version resolution tiers produced a Windows version.
    Callers usually fall back to the configured default.
    """
    pass


class MalformedValueError(BottleRegError):
    """A registry value exists but cannot be mapped onto a domain type."""
    pass


class ConfigError(BottleRegError):
    pass


def wrap_io(msg: str, exc: Optional[BaseException] = None, code: int = 2, **context: Any) -> RegistryFileError:
    return RegistryFileError(code=code, msg=msg, cause=exc, context=context or None)


def wrap_config(msg: str, exc: Optional[BaseException] = None, code: int = 3, **context: Any) -> ConfigError:
    return ConfigError(code=code, msg=msg, cause=exc, context=context or None)
