# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for the typed bottle setting accessors."""
from __future__ import annotations

import pytest

from fakes.fake_prefix import HEADER, section

from bottlereg.core.config import load_config
from bottlereg.core.exceptions import MalformedValueError, RegistryFileError
from bottlereg.wine.accessors import (
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
from bottlereg.wine.types import AudioDriver, Bit, LoadOrder


@pytest.mark.unit
class TestSystemBit:
    def test_win64(self, win64_prefix):
        assert get_system_bit(win64_prefix.root) is Bit.WIN64

    def test_win32(self, fake_prefix):
        fake_prefix.write_system(HEADER + "#arch=win32\n")
        assert get_system_bit(fake_prefix.root) is Bit.WIN32

    def test_unknown_arch(self, fake_prefix):
        fake_prefix.write_system(HEADER + "#arch=arm64\n")
        with pytest.raises(MalformedValueError) as ei:
            get_system_bit(fake_prefix.root)
        assert ei.value.context["value"] == "arm64"
        assert ei.value.context["path"] == str(fake_prefix.system_reg)

    def test_missing_arch(self, fake_prefix):
        fake_prefix.write_system(HEADER)
        with pytest.raises(MalformedValueError):
            get_system_bit(fake_prefix.root)

    def test_read_from_system_reg(self, fake_prefix):
        fake_prefix.write_user(HEADER + "#arch=win32\n").write_system(HEADER + "#arch=win64\n")
        assert get_system_bit(fake_prefix.root) is Bit.WIN64

    def test_missing_system_reg(self, fake_prefix):
        fake_prefix.write_user(HEADER + "#arch=win64\n")
        with pytest.raises(RegistryFileError) as ei:
            get_system_bit(fake_prefix.root)
        assert ei.value.context["path"] == str(fake_prefix.system_reg)


@pytest.mark.unit
class TestAudioDriver:
    def test_configured(self, win64_prefix):
        assert get_audio_driver(win64_prefix.root) is AudioDriver.ALSA

    def test_absent_is_default(self, fake_prefix):
        fake_prefix.write_user(HEADER + "#arch=win64\n")
        assert get_audio_driver(fake_prefix.root) is AudioDriver.PULSEAUDIO

    def test_unknown_is_configured_default(self, fake_prefix):
        fake_prefix.write_user(HEADER + section(r"[Software\\Wine\\Drivers]", '"Audio"="jack"'))
        cfg = load_config(overrides={"defaults": {"audio_driver": "oss"}})

        assert get_audio_driver(fake_prefix.root, cfg) is AudioDriver.OSS

    def test_disabled(self, fake_prefix):
        fake_prefix.write_user(HEADER + section(r"[Software\\Wine\\Drivers]", '"Audio"="disabled"'))
        assert get_audio_driver(fake_prefix.root) is AudioDriver.DISABLED


@pytest.mark.unit
class TestVirtualDesktop:
    def test_enabled(self, win64_prefix):
        assert get_virtual_desktop(win64_prefix.root) == "1024x768"

    def test_disabled(self, fake_prefix):
        fake_prefix.write_user(HEADER + section(r"[Software\\Wine\\Explorer\\Desktops]", '"Default"="800x600"'))
        assert get_virtual_desktop(fake_prefix.root) is None

    def test_enabled_without_resolution(self, fake_prefix):
        fake_prefix.write_user(HEADER + section(r"[Software\\Wine\\Explorer]", '"Desktop"="Default"'))
        assert get_virtual_desktop(fake_prefix.root) is None


@pytest.mark.unit
class TestDllOverrides:
    def test_exact_load_order(self, win64_prefix):
        assert get_dll_override(win64_prefix.root, "*d3dx9_43") is True
        assert get_dll_override(win64_prefix.root, "*d3dx9_43", LoadOrder.BUILTIN) is False
        assert get_dll_override(win64_prefix.root, "*msvcp120", LoadOrder.NATIVE_BUILTIN) is True
        assert get_dll_override(win64_prefix.root, "*msvcp120", LoadOrder.NATIVE) is False

    def test_disabled_override(self, win64_prefix):
        assert get_dll_override(win64_prefix.root, "winemenubuilder.exe", LoadOrder.DISABLED) is True

    def test_absent_dll(self, win64_prefix):
        assert get_dll_override(win64_prefix.root, "*d3d11") is False

    def test_list(self, win64_prefix):
        overrides = list_dll_overrides(win64_prefix.root)
        assert overrides == {
            "*d3dx9_43": "native",
            "*dxgi": "native",
            "*msvcp120": "native,builtin",
            "*mscoree": "native",
            "winemenubuilder.exe": "",
        }

    def test_list_filtered(self, win64_prefix):
        assert list(list_dll_overrides(win64_prefix.root, include="*d3d")) == ["*d3dx9_43"]
        assert "winemenubuilder.exe" not in list_dll_overrides(win64_prefix.root, exclude=".exe")


@pytest.mark.unit
class TestSystemRegistryValues:
    def test_uninstaller(self, win64_prefix):
        name = get_uninstaller(win64_prefix.root, "{92FB6C44-E685-45AD-9B20-CADF4CABA132}")
        assert name == "Microsoft .NET Framework 4.5.2"

    def test_uninstaller_absent(self, win64_prefix):
        assert get_uninstaller(win64_prefix.root, "Microsoft .NET Framework 4 Extended") is None

    def test_font_filename_uses_bitness_key(self, win64_prefix):
        assert get_font_filename(win64_prefix.root, Bit.WIN64, "Comic Sans MS (TrueType)") == "comic.ttf"
        assert get_font_filename(win64_prefix.root, Bit.WIN32, "Comic Sans MS (TrueType)") is None

    def test_product_name(self, win64_prefix):
        assert get_windows_product_name(win64_prefix.root) == "Microsoft Windows 10"

    def test_missing_system_reg(self, fake_prefix):
        fake_prefix.write_user(HEADER)
        with pytest.raises(RegistryFileError):
            get_uninstaller(fake_prefix.root, "anything")


@pytest.mark.unit
class TestShellFolder:
    def test_escaped_path_is_decoded(self, win64_prefix):
        assert get_shell_folder(win64_prefix.root, "Desktop") == "C:\\users\\steamuser\\Desktop"
        programs = get_shell_folder(win64_prefix.root, "Programs")
        assert programs.endswith("\\Start Menu\\Programs")

    def test_absent(self, win64_prefix):
        assert get_shell_folder(win64_prefix.root, "Favorites") is None
