# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/wine/components.py
# -*- coding: utf-8 -*-
"""
Detection of optional components installed into a bottle (by winetricks or by hand).

A component counts as installed when the traces its installer leaves in the
registry are all present: a DLL override, an Uninstall entry, a font file.
Registry I/O errors are not swallowed here.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..core.config import ReaderConfig
from .accessors import get_dll_override, get_font_filename, get_system_bit, get_uninstaller
from .types import LoadOrder

PrefixPath = Union[str, Path]

VISUAL_CPP_2013_GUIDS = (
    "{61087a79-ac85-455c-934d-1fa22cc64f36}",  # x86
    "{ef6b00ec-13e1-4c25-9064-b2f383cb8412}",  # x64
)
VISUAL_CPP_2013_NAME = "Microsoft Visual C++ 2013 Redistributable"

DOTNET_40_KEY = "Microsoft .NET Framework 4 Extended"
DOTNET_40_NAME = "Microsoft .NET Framework 4 Extended"
DOTNET_452_KEY = "{92FB6C44-E685-45AD-9B20-CADF4CABA132}"
DOTNET_452_NAME = "Microsoft .NET Framework 4.5.2"


def is_d3dx9_installed(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> bool:
    return get_dll_override(prefix_path, "*d3dx9_43", LoadOrder.NATIVE, config)


def is_dxvk_installed(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> bool:
    return get_dll_override(prefix_path, "*dxgi", LoadOrder.NATIVE, config)


def _font_is(prefix_path: PrefixPath, font_name: str, filename: str, config: Optional[ReaderConfig]) -> bool:
    bit = get_system_bit(prefix_path, config)
    return get_font_filename(prefix_path, bit, font_name, config) == filename


def is_liberation_installed(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> bool:
    # Without this entry Wine still falls back to the host's liberation fonts.
    return _font_is(prefix_path, "Liberation Mono (TrueType)", "liberationmono-regular.ttf", config)


def is_core_fonts_installed(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> bool:
    return _font_is(prefix_path, "Comic Sans MS (TrueType)", "comic.ttf", config)


def is_visual_cpp_installed(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> bool:
    """Visual C++ 2013: msvcp120 native,builtin plus the x86 or x64 redistributable."""
    if not get_dll_override(prefix_path, "*msvcp120", LoadOrder.NATIVE_BUILTIN, config):
        return False
    for guid in VISUAL_CPP_2013_GUIDS:
        name = get_uninstaller(prefix_path, guid, config) or ""
        if name.startswith(VISUAL_CPP_2013_NAME):
            return True
    return False


def is_dotnet_4_0_installed(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> bool:
    if not get_dll_override(prefix_path, "*mscoree", LoadOrder.NATIVE, config):
        return False
    return get_uninstaller(prefix_path, DOTNET_40_KEY, config) == DOTNET_40_NAME


def is_dotnet_4_5_2_installed(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> bool:
    if not get_dll_override(prefix_path, "*mscoree", LoadOrder.NATIVE, config):
        return False
    return get_uninstaller(prefix_path, DOTNET_452_KEY, config) == DOTNET_452_NAME
