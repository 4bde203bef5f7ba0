# SPDX-License-Identifier: LGPL-3.0-or-later
"""Synthetic Wine prefixes (user.reg / system.reg) for tests."""
from pathlib import Path

HEADER = "WINE REGISTRY Version 2\n;; All keys relative to \\\\User\\\\S-1-5-21-0-0-0-1000\n\n"


def section(header, *lines, ts="1602839237"):
    """One section block, Wine style, terminated by a blank line."""
    body = "".join(line + "\n" for line in lines)
    return f"{header} {ts}\n#time=1d6a3f1c2b4e5f0\n{body}\n"


USER_REG_WIN64 = (
    HEADER
    + "#arch=win64\n\n"
    + section(r"[Software\\Wine]", '"Version"="win10"')
    + section(r"[Software\\Wine\\DllOverrides]",
              '"*d3dx9_43"="native"',
              '"*dxgi"="native"',
              '"*msvcp120"="native,builtin"',
              '"*mscoree"="native"',
              '"winemenubuilder.exe"=""')
    + section(r"[Software\\Wine\\Drivers]", '"Audio"="alsa"')
    + section(r"[Software\\Wine\\Explorer]", '"Desktop"="Default"')
    + section(r"[Software\\Wine\\Explorer\\Desktops]", '"Default"="1024x768"')
    + section(r"[Software\\Microsoft\\Windows\\CurrentVersion\\Explorer\\Shell Folders]",
              '"Desktop"="C:\\\\users\\\\steamuser\\\\Desktop"',
              '"Programs"="C:\\\\users\\\\steamuser\\\\AppData\\\\Roaming\\\\Microsoft\\\\Windows\\\\Start Menu\\\\Programs"')
)

SYSTEM_REG_WIN64 = (
    "WINE REGISTRY Version 2\n;; All keys relative to \\\\Machine\n\n#arch=win64\n\n"
    + section(r"[Software\\Microsoft\\Windows NT\\CurrentVersion]",
              '"CurrentBuildNumber"="19043"',
              '"CurrentVersion"="10.0"',
              '"ProductName"="Microsoft Windows 10"')
    + section(r"[Software\\Microsoft\\Windows NT\\CurrentVersion\\Fonts]",
              '"Comic Sans MS (TrueType)"="comic.ttf"',
              '"Liberation Mono (TrueType)"="liberationmono-regular.ttf"')
    + section(r"[Software\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\{ef6b00ec-13e1-4c25-9064-b2f383cb8412}]",
              '"DisplayName"="Microsoft Visual C++ 2013 Redistributable (x64) - 12.0.30501"')
    + section(r"[Software\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\{92FB6C44-E685-45AD-9B20-CADF4CABA132}]",
              '"DisplayName"="Microsoft .NET Framework 4.5.2"')
    + section(r"[System\\ControlSet001\\Control\\ProductOptions]", '"ProductType"="WinNT"')
)


class FakePrefix:
    """Builds a prefix directory; missing files are simply not written."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def write_user(self, text: str) -> "FakePrefix":
        (self.root / "user.reg").write_text(text, encoding="utf-8")
        return self

    def write_system(self, text: str) -> "FakePrefix":
        (self.root / "system.reg").write_text(text, encoding="utf-8")
        return self

    def write_timestamp(self, text: str) -> "FakePrefix":
        (self.root / ".update-timestamp").write_text(text, encoding="utf-8")
        return self

    @property
    def user_reg(self) -> Path:
        return self.root / "user.reg"

    @property
    def system_reg(self) -> Path:
        return self.root / "system.reg"


def nt_system_reg(version=None, build=None, product_type=None, product_key=r"[System\\CurrentControlSet\\Control\\ProductOptions]"):
    """system.reg with only the NT version keys that are given."""
    lines = []
    if build is not None:
        lines.append(f'"CurrentBuildNumber"="{build}"')
    if version is not None:
        lines.append(f'"CurrentVersion"="{version}"')
    text = HEADER + section(r"[Software\\Microsoft\\Windows NT\\CurrentVersion]", *lines)
    if product_type is not None:
        text += section(product_key, f'"ProductType"="{product_type}"')
    return text


def win9x_system_reg(version_number):
    return HEADER + section(r"[Software\\Microsoft\\Windows\\CurrentVersion]", f'"VersionNumber"="{version_number}"')
