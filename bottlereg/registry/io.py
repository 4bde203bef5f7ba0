# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# bottlereg/registry/io.py
"""
Registry snapshot file access and section location.

A snapshot (user.reg, system.reg, userdef.reg) looks like:

    WINE REGISTRY Version 2
    #arch=win64

    [Software\\\\Wine\\\\Explorer] 1602839237
    #time=1d6a3f1c2b4e5f0
    "Desktop"="Default"

Every function here opens the file, scans it and closes it again. Nothing is
cached, so a file rewritten by wineserver between two calls is simply read
again.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Union

from ..core.exceptions import RegistryFileError, wrap_io
from ..core.logger import Log

logger = logging.getLogger("bottlereg.registry")

PathLike = Union[str, Path]


@contextmanager
def open_snapshot(file_path: PathLike) -> Iterator[Iterator[str]]:
    """
    Open a snapshot file and yield an iterator over its lines (terminators removed).

    Any OSError while opening or reading becomes RegistryFileError, so callers
    can tell "file unreadable" apart from "key not present".
    """
    fp = Path(file_path)
    try:
        with fp.open("r", encoding="utf-8", errors="surrogateescape") as fh:
            yield (line.rstrip("\n") for line in fh)
    except OSError as e:
        raise wrap_io(f"cannot read registry file: {fp}", e, path=str(fp)) from e


def locate_section(file_path: PathLike, key_path: str) -> List[str]:
    """
    Return the raw lines of the first section whose header starts with `key_path`.

    The header line itself and '#' lines are left out; collection stops at the
    first blank line. An absent key gives an empty list.
    """
    lines: List[str] = []
    try:
        with open_snapshot(file_path) as it:
            for line in it:
                if line.startswith(key_path):
                    break
            else:
                logger.debug("Key %s not found in %s", key_path, file_path)
                return lines

            # text mode reads CRLF as "\n", so a blank line is empty here
            for line in it:
                if not line:
                    break
                if line.startswith("#"):
                    continue
                lines.append(line)
    except RegistryFileError as e:
        e.with_context(key_path=key_path)
        raise

    Log.trace(logger, "Section %s in %s: %d line(s)", key_path, file_path, len(lines))
    return lines


def format_key_path(path: str) -> str:
    """
    Build a section header the way Wine writes it.

    >>> format_key_path("Software\\\\Wine\\\\Explorer")
    '[Software\\\\\\\\Wine\\\\\\\\Explorer]'
    """
    return "[" + path.strip("\\").replace("\\", "\\\\") + "]"
