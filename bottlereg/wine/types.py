# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/wine/types.py
# -*- coding: utf-8 -*-
"""Bottle domain types and the Windows version reference table"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Windows(Enum):
    """
    Windows versions a Wine prefix can emulate.
    Value is the human readable name.
    """
    WINDOWS_20 = "Windows 2.0"
    WINDOWS_30 = "Windows 3.0"
    WINDOWS_31 = "Windows 3.1"
    WINDOWS_NT351 = "Windows NT 3.51"
    WINDOWS_NT40 = "Windows NT 4.0"
    WINDOWS_95 = "Windows 95"
    WINDOWS_98 = "Windows 98"
    WINDOWS_ME = "Windows ME"
    WINDOWS_2000 = "Windows 2000"
    WINDOWS_XP = "Windows XP"
    WINDOWS_2003 = "Windows 2003"
    WINDOWS_VISTA = "Windows Vista"
    WINDOWS_2008 = "Windows 2008"
    WINDOWS_7 = "Windows 7"
    WINDOWS_2008R2 = "Windows 2008 R2"
    WINDOWS_8 = "Windows 8"
    WINDOWS_81 = "Windows 8.1"
    WINDOWS_10 = "Windows 10"
    WINDOWS_11 = "Windows 11"

    def __str__(self) -> str:
        return self.value


class Bit(Enum):
    WIN32 = "win32"
    WIN64 = "win64"

    @property
    def label(self) -> str:
        return "32" if self is Bit.WIN32 else "64"


class AudioDriver(Enum):
    """Wine audio drivers, value is the token stored in user.reg."""
    PULSEAUDIO = "pulse"
    ALSA = "alsa"
    COREAUDIO = "coreaudio"
    OSS = "oss"
    DISABLED = "disabled"

    @property
    def label(self) -> str:
        return _AUDIO_LABELS[self]

    @classmethod
    def from_token(cls, token: Optional[str]) -> Optional["AudioDriver"]:
        for member in cls:
            if member.value == token:
                return member
        return None


_AUDIO_LABELS = {
    AudioDriver.PULSEAUDIO: "PulseAudio",
    AudioDriver.ALSA: "Advanced Linux Sound Architecture (ALSA)",
    AudioDriver.COREAUDIO: "Core Audio",
    AudioDriver.OSS: "Open Sound System (OSS)",
    AudioDriver.DISABLED: "Disabled",
}


class LoadOrder(Enum):
    """DLL load order, value is the string Wine keeps under DllOverrides."""
    BUILTIN = "builtin"
    NATIVE = "native"
    BUILTIN_NATIVE = "builtin,native"
    NATIVE_BUILTIN = "native,builtin"
    DISABLED = ""


@dataclass(frozen=True)
class WindowsVersionRecord:
    windows: Windows
    token: str  # winecfg / winetricks name, e.g. "win7"
    version_number: str  # "major.minor"
    build_number: str
    product_type: str = ""


# Newest first. Resolution scans this in order and the first hit wins,
# so entries sharing a version (win2008r2/win7) resolve by product type.
WINDOWS_VERSIONS: Tuple[WindowsVersionRecord, ...] = (
    WindowsVersionRecord(Windows.WINDOWS_11, "win11", "10.0", "22000", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_10, "win10", "10.0", "19043", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_81, "win81", "6.3", "9600", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_8, "win8", "6.2", "9200", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_2008R2, "win2008r2", "6.1", "7601", "ServerNT"),
    WindowsVersionRecord(Windows.WINDOWS_7, "win7", "6.1", "7601", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_2008, "win2008", "6.0", "6002", "ServerNT"),
    WindowsVersionRecord(Windows.WINDOWS_VISTA, "vista", "6.0", "6002", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_2003, "win2003", "5.2", "3790", "ServerNT"),
    WindowsVersionRecord(Windows.WINDOWS_XP, "winxp64", "5.2", "3790", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_XP, "winxp", "5.1", "2600", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_2000, "win2k", "5.0", "2195", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_ME, "winme", "4.90", "3000"),
    WindowsVersionRecord(Windows.WINDOWS_98, "win98", "4.10", "2222"),
    WindowsVersionRecord(Windows.WINDOWS_95, "win95", "4.0", "950"),
    WindowsVersionRecord(Windows.WINDOWS_NT40, "nt40", "4.0", "1381", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_NT351, "nt351", "3.51", "1057", "WinNT"),
    WindowsVersionRecord(Windows.WINDOWS_31, "win31", "3.10", "0"),
    WindowsVersionRecord(Windows.WINDOWS_30, "win30", "3.0", "0"),
    WindowsVersionRecord(Windows.WINDOWS_20, "win20", "2.0", "0"),
)


def windows_from_token(token: Optional[str]) -> Optional[Windows]:
    """Map a winecfg token ("win7", "winxp64", ...) onto its Windows version."""
    for record in WINDOWS_VERSIONS:
        if record.token == token:
            return record.windows
    return None


def token_for_windows(windows: Windows, bit: Bit = Bit.WIN32) -> str:
    """
    Inverse of windows_from_token. XP is the only version with a separate
    64-bit token.
    """
    if windows is Windows.WINDOWS_XP and bit is Bit.WIN64:
        return "winxp64"
    for record in WINDOWS_VERSIONS:
        if record.windows is windows and record.token != "winxp64":
            return record.token
    raise KeyError(windows)


DEFAULT_WINDOWS = Windows.WINDOWS_7
DEFAULT_AUDIO_DRIVER = AudioDriver.PULSEAUDIO
