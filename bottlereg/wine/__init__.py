# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/wine/__init__.py
"""
Bottle (Wine prefix) facts built on the registry readers.

- types: Windows / Bit / AudioDriver / LoadOrder and the version table
- version: Windows version resolution
- accessors: bit, audio driver, virtual desktop, DLL overrides, fonts, ...
- components: optional component detection
- prefix: non-registry prefix facts and read_bottle()
"""

__all__ = []
