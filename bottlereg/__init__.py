# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# bottlereg/__init__.py
"""
bottlereg - Wine bottle registry snapshot reader

Reads the user.reg / system.reg files of a Wine prefix and answers typed
questions about it: Windows version, bitness, audio driver, virtual desktop,
DLL overrides, installed components.

Usage as a library:

    from bottlereg import read_bottle, resolve_windows_version, get_dll_override

    snapshot = read_bottle("~/.local/share/winegui/prefixes/steam")
    print(snapshot.windows, snapshot.bit.label)

    if get_dll_override(prefix, "*dxgi"):
        ...

Every call re-reads the files; nothing is cached, so the functions are safe
to call from any thread.
"""

__version__ = "0.1.0"

# Domain types
from .wine.types import AudioDriver, Bit, LoadOrder, Windows, WindowsVersionRecord, WINDOWS_VERSIONS

# Errors and configuration
from .core import (
    BottleRegError,
    ConfigError,
    MalformedValueError,
    ReaderConfig,
    RegistryFileError,
    WindowsVersionUndetermined,
    load_config,
)

# Version resolution and accessors
from .wine.version import resolve_windows_version, resolve_windows_version_or_default
from .wine.accessors import (
    get_audio_driver,
    get_dll_override,
    get_font_filename,
    get_shell_folder,
    get_system_bit,
    get_uninstaller,
    get_virtual_desktop,
    get_windows_product_name,
    list_dll_overrides,
)
from .wine.prefix import BottleSnapshot, read_bottle

__all__ = [
    # Version
    "__version__",

    # Types
    "AudioDriver",
    "Bit",
    "LoadOrder",
    "Windows",
    "WindowsVersionRecord",
    "WINDOWS_VERSIONS",

    # Errors / config
    "BottleRegError",
    "ConfigError",
    "MalformedValueError",
    "RegistryFileError",
    "WindowsVersionUndetermined",
    "ReaderConfig",
    "load_config",

    # Queries
    "resolve_windows_version",
    "resolve_windows_version_or_default",
    "get_audio_driver",
    "get_dll_override",
    "get_font_filename",
    "get_shell_folder",
    "get_system_bit",
    "get_uninstaller",
    "get_virtual_desktop",
    "get_windows_product_name",
    "list_dll_overrides",
    "BottleSnapshot",
    "read_bottle",
]
