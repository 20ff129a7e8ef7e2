"""Tests for the nconfig error hierarchy."""

from __future__ import annotations

import pytest

from nconfig.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ErrorCodes,
    NConfigError,
    UnsupportedTypeError,
    ValueParseError,
)


class TestNConfigError:
    """Tests for the base error."""

    def test_str_includes_code(self) -> None:
        err = NConfigError(code="X", message="boom")
        assert str(err) == "[X] boom"
        assert err.details == {}
        assert err.cause is None

    def test_cause_kept(self) -> None:
        cause = ValueError("inner")
        err = ConfigError("outer", cause=cause)
        assert err.cause is cause


class TestSubclasses:
    """Tests for error codes and details of each subclass."""

    @pytest.mark.parametrize(
        "err, code",
        [
            (ConfigError("bad"), ErrorCodes.CONFIG_INVALID),
            (ConfigNotFoundError(config_path="/x.yaml"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigParseError(config_path="/x.yaml", reason="r"), ErrorCodes.CONFIG_PARSE_ERROR),
            (ValueParseError(text="t", kind="int"), ErrorCodes.VALUE_PARSE_ERROR),
            (UnsupportedTypeError(type_name="dict"), ErrorCodes.UNSUPPORTED_TYPE),
        ],
    )
    def test_codes(self, err: NConfigError, code: str) -> None:
        assert isinstance(err, NConfigError)
        assert err.code == code

    def test_not_found_details(self) -> None:
        err = ConfigNotFoundError(config_path="/etc/app.yaml")
        assert err.config_path == "/etc/app.yaml"
        assert "/etc/app.yaml" in err.message

    def test_parse_error_details(self) -> None:
        err = ConfigParseError(config_path="a.yaml", reason="empty")
        assert err.details == {"config_path": "a.yaml", "reason": "empty"}


class TestErrorCodes:
    """Tests for the ErrorCodes constants."""

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().CONFIG_INVALID = "OTHER"
