# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/wine/accessors.py
# -*- coding: utf-8 -*-
"""
Typed bottle settings read from a prefix's user.reg / system.reg.

Each accessor takes the prefix directory, reads one fixed key and maps the
raw string onto a domain type. Absent values are None (or a documented
default); unreadable files raise RegistryFileError.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from ..core.config import ReaderConfig, resolve_config
from ..core.exceptions import MalformedValueError
from ..registry import keys
from ..registry.io import format_key_path
from ..registry.reader import get_meta, get_name_data_pairs, get_value
from .types import AudioDriver, Bit, LoadOrder

logger = logging.getLogger("bottlereg.wine")

PrefixPath = Union[str, Path]


def get_system_bit(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> Bit:
    """
    Processor width from the "#arch=" meta line of system.reg.

    Anything but win32/win64, including no arch line at all, raises
    MalformedValueError.
    """
    system_reg = resolve_config(config).system_reg_path(prefix_path)
    arch = get_meta(system_reg, keys.ARCH_META)
    if arch == Bit.WIN32.value:
        return Bit.WIN32
    if arch == Bit.WIN64.value:
        return Bit.WIN64
    raise MalformedValueError(code=5, msg="unrecognized architecture").with_context(path=str(system_reg), value=arch)


def get_audio_driver(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> AudioDriver:
    """Audio driver; Wine's default (PulseAudio) when not configured."""
    cfg = resolve_config(config)
    raw = get_value(cfg.user_reg_path(prefix_path), keys.WINE_DRIVERS, keys.AUDIO)
    driver = AudioDriver.from_token(raw)
    if driver is None:
        if raw:
            logger.debug("Unknown audio driver %r, using %s", raw, cfg.default_audio_driver.value)
        return cfg.default_audio_driver
    return driver


def get_virtual_desktop(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> Optional[str]:
    """Virtual desktop resolution (e.g. "1024x768"), None when the virtual desktop is off."""
    user_reg = resolve_config(config).user_reg_path(prefix_path)
    if not get_value(user_reg, keys.WINE_EXPLORER, keys.DESKTOP):
        return None
    return get_value(user_reg, keys.WINE_EXPLORER_DESKTOPS, keys.DEFAULT_DESKTOP) or None


def get_dll_override(
    prefix_path: PrefixPath,
    dll_name: str,
    load_order: LoadOrder = LoadOrder.NATIVE,
    config: Optional[ReaderConfig] = None,
) -> bool:
    """
    True when DllOverrides has `dll_name` set to exactly `load_order`.

    dll_name is used as stored, e.g. "*d3dx9_43".
    """
    user_reg = resolve_config(config).user_reg_path(prefix_path)
    return get_value(user_reg, keys.WINE_DLL_OVERRIDES, dll_name) == load_order.value


def list_dll_overrides(
    prefix_path: PrefixPath,
    include: Optional[str] = None,
    exclude: Optional[str] = None,
    config: Optional[ReaderConfig] = None,
) -> Dict[str, str]:
    """All DLL overrides as {dll name: load order string}."""
    user_reg = resolve_config(config).user_reg_path(prefix_path)
    return dict(get_name_data_pairs(user_reg, keys.WINE_DLL_OVERRIDES, include=include, exclude=exclude))


def get_uninstaller(
    prefix_path: PrefixPath, uninstaller_key: str, config: Optional[ReaderConfig] = None
) -> Optional[str]:
    """DisplayName of an Uninstall entry (product GUID or name), None when not installed."""
    system_reg = resolve_config(config).system_reg_path(prefix_path)
    key_path = format_key_path(keys.UNINSTALL_PREFIX + "\\" + uninstaller_key)
    return get_value(system_reg, key_path, keys.DISPLAY_NAME)


def get_font_filename(
    prefix_path: PrefixPath, bit: Bit, font_name: str, config: Optional[ReaderConfig] = None
) -> Optional[str]:
    """Font file registered for `font_name`, e.g. "Comic Sans MS (TrueType)" -> "comic.ttf"."""
    system_reg = resolve_config(config).system_reg_path(prefix_path)
    key_path = keys.FONTS_64 if bit is Bit.WIN64 else keys.FONTS_32
    return get_value(system_reg, key_path, font_name)


def get_shell_folder(
    prefix_path: PrefixPath, folder_name: str, config: Optional[ReaderConfig] = None
) -> Optional[str]:
    """
    Windows path of a shell folder where shortcuts live ("Programs",
    "Start Menu", "Desktop", ...).
    """
    user_reg = resolve_config(config).user_reg_path(prefix_path)
    return get_value(user_reg, keys.SHELL_FOLDERS, folder_name)


def get_windows_product_name(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> Optional[str]:
    system_reg = resolve_config(config).system_reg_path(prefix_path)
    return get_value(system_reg, keys.WINDOWS_NT_CURRENT_VERSION, keys.PRODUCT_NAME)
