# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/wine/prefix.py
# -*- coding: utf-8 -*-
"""Prefix-level facts and the one-shot bottle snapshot"""

from __future__ import annotations

import datetime as _dt
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.config import ReaderConfig, resolve_config
from ..core.logging_utils import log_step
from .accessors import get_audio_driver, get_system_bit, get_virtual_desktop
from .types import AudioDriver, Bit, Windows, token_for_windows
from .version import resolve_windows_version_or_default

logger = logging.getLogger("bottlereg.wine")

PrefixPath = Union[str, Path]


def get_folder_name(prefix_path: PrefixPath) -> str:
    """Last directory name of the prefix, a leading dot (hidden dir) removed."""
    name = Path(prefix_path).name
    return name[1:] if name.startswith(".") else name


def get_c_drive_location(prefix_path: PrefixPath) -> Path:
    return Path(prefix_path) / "drive_c"


def get_last_wine_updated(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> Optional[_dt.datetime]:
    """
    Time wineboot last refreshed the prefix, from the epoch seconds in
    .update-timestamp. None when the file is missing or holds "disable".
    """
    fp = Path(prefix_path) / resolve_config(config).update_timestamp
    try:
        first = fp.read_text(encoding="utf-8", errors="replace").splitlines()[0].strip()
    except (OSError, IndexError):
        return None
    try:
        return _dt.datetime.fromtimestamp(int(first))
    except (ValueError, OverflowError, OSError):
        logger.debug("Unparsable update timestamp %r in %s", first, fp)
        return None


@dataclass(frozen=True)
class BottleSnapshot:
    prefix: Path
    name: str
    windows: Windows
    bit: Bit
    audio_driver: AudioDriver
    virtual_desktop: Optional[str]
    c_drive: Path
    last_wine_updated: Optional[_dt.datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prefix": str(self.prefix),
            "name": self.name,
            "windows": self.windows.value,
            "windows_token": token_for_windows(self.windows, self.bit),
            "bit": self.bit.label,
            "audio_driver": self.audio_driver.label,
            "virtual_desktop": self.virtual_desktop,
            "c_drive": str(self.c_drive),
            "last_wine_updated": self.last_wine_updated.isoformat() if self.last_wine_updated else None,
        }


def read_bottle(prefix_path: PrefixPath, config: Optional[ReaderConfig] = None) -> BottleSnapshot:
    """
    Read every fact about one bottle.

    Each field is a separate query that re-reads the snapshot files.
    RegistryFileError and MalformedValueError propagate; an undetermined
    Windows version becomes the configured default.
    """
    cfg = resolve_config(config)
    prefix = Path(prefix_path)
    with log_step(logger, f"Reading bottle {prefix}"):
        return BottleSnapshot(
            prefix=prefix,
            name=get_folder_name(prefix),
            windows=resolve_windows_version_or_default(prefix, cfg),
            bit=get_system_bit(prefix, cfg),
            audio_driver=get_audio_driver(prefix, cfg),
            virtual_desktop=get_virtual_desktop(prefix, cfg),
            c_drive=get_c_drive_location(prefix),
            last_wine_updated=get_last_wine_updated(prefix, cfg),
        )
