# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/registry/__init__.py
"""
Wine registry snapshot (.reg text file) reading.

This package provides the low-level, stateless readers:
- encoding: string unescaping (hex/octal escapes, extended UTF-8)
- io: file access and section location
- reader: value / subkey lines / name-data pairs / meta attribute queries
- keys: section headers and value names used by the bottle accessors
"""
from .encoding import encode_code_point, unescape, unescape_bytes
from .io import format_key_path, locate_section
from .reader import get_meta, get_name_data_pairs, get_subkey_lines, get_value

__all__ = [
    "encode_code_point",
    "unescape",
    "unescape_bytes",
    "format_key_path",
    "locate_section",
    "get_meta",
    "get_name_data_pairs",
    "get_subkey_lines",
    "get_value",
]
