# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/wine/version.py
# -*- coding: utf-8 -*-
"""
Windows version resolution for a Wine prefix.

Priority:
  1) user.reg [Software\\Wine] "Version" (set by winecfg / winetricks), matched by token
  2) system.reg NT keys: CurrentVersion / CurrentBuildNumber / ProductType
       a) version + build (+ product type)
       b) build only (+ product type)
       c) version only (+ product type)
  3) system.reg 9x key: VersionNumber "4.10.2222" (unmatched => configured default)
  4) nothing usable => WindowsVersionUndetermined
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from ..core.config import ReaderConfig, resolve_config
from ..core.exceptions import WindowsVersionUndetermined
from ..registry import keys
from ..registry.reader import get_value
from .types import WINDOWS_VERSIONS, Windows, WindowsVersionRecord

logger = logging.getLogger("bottlereg.wine")

Matcher = Callable[[WindowsVersionRecord], bool]


def _first(records: Iterable[WindowsVersionRecord], pred: Matcher) -> Optional[WindowsVersionRecord]:
    for record in records:
        if pred(record):
            return record
    return None


def match_token(token: str) -> Optional[WindowsVersionRecord]:
    return _first(WINDOWS_VERSIONS, lambda r: r.token == token)


def match_nt(version: str, build: Optional[str], product_type: Optional[str]) -> Optional[WindowsVersionRecord]:
    """
    Three sequential tiers, each a full scan of the table (newest first).
    A non-empty product type has to match in every tier.
    """
    build = build or ""
    product_type = product_type or ""

    def _product_ok(r: WindowsVersionRecord) -> bool:
        return not product_type or r.product_type == product_type

    tiers = (
        ("version+build", lambda r: r.version_number == version and r.build_number == build and _product_ok(r)),
        ("build", lambda r: bool(build) and r.build_number == build and _product_ok(r)),
        ("version", lambda r: r.version_number == version and _product_ok(r)),
    )
    for name, pred in tiers:
        record = _first(WINDOWS_VERSIONS, pred)
        if record is not None:
            logger.debug("NT version %s build %r type %r matched %s on %s", version, build, product_type, record.token, name)
            return record
    return None


def match_9x(version_number: str) -> Optional[WindowsVersionRecord]:
    """Match "major.minor[.build]" exactly; None when it cannot be matched."""
    parts = version_number.split(".")
    if len(parts) < 2:
        return None
    version = f"{parts[0]}.{parts[1]}"
    build = parts[2] if len(parts) >= 3 else ""
    return _first(WINDOWS_VERSIONS, lambda r: r.version_number == version and r.build_number == build)


def resolve_windows_version(prefix_path: Union[str, Path], config: Optional[ReaderConfig] = None) -> Windows:
    """
    Determine the Windows version a prefix emulates.

    Raises:
        RegistryFileError: user.reg or system.reg unreadable
        WindowsVersionUndetermined: registry has no usable version information
    """
    cfg = resolve_config(config)
    user_reg = cfg.user_reg_path(prefix_path)
    system_reg = cfg.system_reg_path(prefix_path)

    token = get_value(user_reg, keys.WINE, keys.WINE_VERSION)
    if token:
        record = match_token(token)
        if record is not None:
            return record.windows
        logger.debug("Unknown Windows token %r in %s, checking system.reg", token, user_reg)

    current_version = get_value(system_reg, keys.WINDOWS_NT_CURRENT_VERSION, keys.CURRENT_VERSION)
    if current_version:
        build = get_value(system_reg, keys.WINDOWS_NT_CURRENT_VERSION, keys.CURRENT_BUILD_NUMBER)
        product_type = get_value(system_reg, keys.PRODUCT_OPTIONS, keys.PRODUCT_TYPE)
        if not product_type:
            product_type = get_value(system_reg, keys.PRODUCT_OPTIONS_CONTROLSET001, keys.PRODUCT_TYPE)
        record = match_nt(current_version, build, product_type)
        if record is not None:
            return record.windows
    else:
        version_number = get_value(system_reg, keys.WINDOWS_CURRENT_VERSION, keys.VERSION_NUMBER)
        if version_number:
            record = match_9x(version_number)
            if record is not None:
                return record.windows
            logger.debug("9x VersionNumber %r not in table, using default %s", version_number, cfg.default_windows)
            return cfg.default_windows

    raise WindowsVersionUndetermined(
        code=4,
        msg="Windows version undetermined",
        context={"prefix": str(prefix_path)},
    )


def resolve_windows_version_or_default(
    prefix_path: Union[str, Path], config: Optional[ReaderConfig] = None
) -> Windows:
    """Like resolve_windows_version, but undetermined maps onto the configured default."""
    cfg = resolve_config(config)
    try:
        return resolve_windows_version(prefix_path, cfg)
    except WindowsVersionUndetermined:
        logger.info("Windows version of %s undetermined, assuming %s", prefix_path, cfg.default_windows)
        return cfg.default_windows
