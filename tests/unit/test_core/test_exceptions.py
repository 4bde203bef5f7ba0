# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for the error types."""
from __future__ import annotations

import pytest

from bottlereg.core.exceptions import (
    BottleRegError,
    ConfigError,
    MalformedValueError,
    RegistryFileError,
    WindowsVersionUndetermined,
    wrap_config,
    wrap_io,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    def test_base_exception_creation(self):
        err = BottleRegError(code=1, msg="Test error")

        assert err.code == 1
        assert err.msg == "Test error"
        assert err.cause is None
        assert err.context is None
        assert str(err) == "Test error"

    @pytest.mark.parametrize("cls", [RegistryFileError, WindowsVersionUndetermined, MalformedValueError, ConfigError])
    def test_subclasses(self, cls):
        err = cls(msg="boom")
        assert isinstance(err, BottleRegError)
        assert isinstance(err, Exception)

    def test_message_is_one_line(self):
        err = BottleRegError(msg="line one\n  line two\r\n")
        assert err.msg == "line one line two"

    def test_empty_message_falls_back_to_class_name(self):
        assert MalformedValueError(msg="").msg == "MalformedValueError"

    def test_bad_code(self):
        assert BottleRegError(code="x", msg="m").code == 1

    def test_with_context(self):
        err = BottleRegError(code=1, msg="Error").with_context(path="/p/user.reg", key="[Software\\\\Wine]")

        assert err.context["path"] == "/p/user.reg"
        assert err.user_message(include_context=True) == "Error [key='[Software\\\\\\\\Wine]', path='/p/user.reg']"

    def test_user_message_with_cause(self):
        err = RegistryFileError(msg="cannot read", cause=PermissionError("denied"))
        assert err.user_message(include_cause=True) == "cannot read (cause: PermissionError: denied)"

    def test_can_be_raised_and_caught(self):
        with pytest.raises(BottleRegError, match="undetermined"):
            raise WindowsVersionUndetermined(code=4, msg="Windows version undetermined")


@pytest.mark.unit
class TestWrappers:
    def test_wrap_io(self):
        cause = FileNotFoundError("no such file")
        err = wrap_io("cannot read registry file", cause, path="/p/system.reg")

        assert isinstance(err, RegistryFileError)
        assert err.code == 2
        assert err.cause is cause
        assert err.context == {"path": "/p/system.reg"}

    def test_wrap_without_context(self):
        err = wrap_config("bad config")
        assert isinstance(err, ConfigError)
        assert err.code == 3
        assert err.context is None

    def test_to_dict(self):
        err = wrap_io("cannot read", OSError("eio"), path="/p/user.reg")

        d = err.to_dict()
        assert d == {
            "type": "RegistryFileError",
            "code": 2,
            "message": "cannot read",
            "context": {"path": "/p/user.reg"},
        }
        assert err.to_dict(include_cause=True)["cause"] == {"type": "OSError", "message": "eio"}
