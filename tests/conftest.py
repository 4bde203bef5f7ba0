# SPDX-License-Identifier: LGPL-3.0-or-later
import os
import sys
from pathlib import Path

import pytest

_THIS_DIR = Path(__file__).resolve().parent
_REPO_ROOT = _THIS_DIR.parent

if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

os.environ.setdefault("PYTHONPATH", str(_REPO_ROOT))

from fakes.fake_prefix import SYSTEM_REG_WIN64, USER_REG_WIN64, FakePrefix  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external requirements")


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    monkeypatch.delenv("BOTTLEREG_CONFIG", raising=False)


@pytest.fixture
def fake_prefix(tmp_path):
    """Empty prefix directory; tests write the .reg files they need."""
    return FakePrefix(tmp_path / "prefixes" / "steam")


@pytest.fixture
def win64_prefix(fake_prefix):
    """A 64-bit Windows 10 prefix with a few components installed."""
    return fake_prefix.write_user(USER_REG_WIN64).write_system(SYSTEM_REG_WIN64)
