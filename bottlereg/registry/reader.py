# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# bottlereg/registry/reader.py
"""
Key/value queries on registry snapshot files.

All functions:
  - take the snapshot file path explicitly (no reader object, no cache)
  - raise RegistryFileError when the file cannot be read
  - return None / [] when the key, value or meta attribute is absent
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .encoding import unescape
from .io import PathLike, locate_section, open_snapshot

logger = logging.getLogger("bottlereg.registry")


def _strip_quotes(s: str) -> str:
    """Remove one pair of surrounding double quotes, if present."""
    if len(s) >= 2 and s.startswith('"') and s.endswith('"'):
        return s[1:-1]
    return s


def get_value(file_path: PathLike, key_path: str, value_name: str) -> Optional[str]:
    """
    Value of `"value_name"=` inside section `key_path`, unescaped.

    Non-string data (dword:..., hex:...) is returned as written.
    """
    pattern = f'"{value_name}"='
    for line in locate_section(file_path, key_path):
        idx = line.find(pattern)
        if idx != -1:
            return unescape(_strip_quotes(line[idx + len(pattern):]))
    return None


def get_subkey_lines(file_path: PathLike, key_path: str) -> List[str]:
    """All lines of section `key_path`, each unescaped as a whole."""
    return [unescape(line) for line in locate_section(file_path, key_path)]


def get_name_data_pairs(
    file_path: PathLike,
    key_path: str,
    include: Optional[str] = None,
    exclude: Optional[str] = None,
) -> List[Tuple[str, str]]:
    """
    ("name", "data") pairs of section `key_path`.

    `include` / `exclude` are substring filters applied to the whole
    unescaped line, not to the split name or data. Lines that are not of the
    `"name"="data"` form are skipped.
    """
    pairs: List[Tuple[str, str]] = []
    for line in get_subkey_lines(file_path, key_path):
        if include and include not in line:
            continue
        if exclude and exclude in line:
            continue
        fields = line.split('"')
        if len(fields) < 5:
            continue
        pairs.append((fields[1].strip('"'), fields[3].strip('"')))
    return pairs


def get_meta(file_path: PathLike, meta_name: str) -> Optional[str]:
    """
    Value of a `#meta_name=value` line anywhere in the file (e.g. #arch=win64).

    Meta values are not unescaped.
    """
    pattern = f"#{meta_name}="
    with open_snapshot(file_path) as it:
        for line in it:
            idx = line.find(pattern)
            if idx != -1:
                return _strip_quotes(line[idx + len(pattern):])
    logger.debug("Meta attribute %r not found in %s", meta_name, file_path)
    return None
