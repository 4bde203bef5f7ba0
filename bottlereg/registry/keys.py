# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/registry/keys.py
"""Section headers and value names used by the bottle accessors, as written in the .reg files."""

# user.reg
WINE = r"[Software\\Wine]"
WINE_VERSION = "Version"

WINE_DRIVERS = r"[Software\\Wine\\Drivers]"
AUDIO = "Audio"

WINE_EXPLORER = r"[Software\\Wine\\Explorer]"
DESKTOP = "Desktop"
WINE_EXPLORER_DESKTOPS = r"[Software\\Wine\\Explorer\\Desktops]"
DEFAULT_DESKTOP = "Default"

WINE_DLL_OVERRIDES = r"[Software\\Wine\\DllOverrides]"

SHELL_FOLDERS = r"[Software\\Microsoft\\Windows\\CurrentVersion\\Explorer\\Shell Folders]"

ARCH_META = "arch"

# system.reg
WINDOWS_NT_CURRENT_VERSION = r"[Software\\Microsoft\\Windows NT\\CurrentVersion]"
CURRENT_VERSION = "CurrentVersion"
CURRENT_BUILD_NUMBER = "CurrentBuildNumber"
PRODUCT_NAME = "ProductName"

PRODUCT_OPTIONS = r"[System\\CurrentControlSet\\Control\\ProductOptions]"
PRODUCT_OPTIONS_CONTROLSET001 = r"[System\\ControlSet001\\Control\\ProductOptions]"
PRODUCT_TYPE = "ProductType"

WINDOWS_CURRENT_VERSION = r"[Software\\Microsoft\\Windows\\CurrentVersion]"
VERSION_NUMBER = "VersionNumber"

UNINSTALL_PREFIX = r"Software\Microsoft\Windows\CurrentVersion\Uninstall"
DISPLAY_NAME = "DisplayName"

FONTS_32 = r"[Software\\Microsoft\\Windows\\CurrentVersion\\Fonts]"
FONTS_64 = r"[Software\\Microsoft\\Windows NT\\CurrentVersion\\Fonts]"
