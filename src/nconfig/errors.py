"""Error hierarchy for the nconfig store."""

from __future__ import annotations

from typing import Any

__all__ = [
    "NConfigError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ValueParseError",
    "UnsupportedTypeError",
    "ErrorCodes",
]


class NConfigError(Exception):
    """Base error for all nconfig errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigError(NConfigError):
    """Raised when configuration data or options are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ConfigNotFoundError(NConfigError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that could not be found."""
        return self.details["config_path"]


class ConfigParseError(NConfigError):
    """Raised when a configuration file has invalid syntax or structure."""

    def __init__(self, config_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f"Invalid configuration file '{config_path}': {reason}",
            details={"config_path": config_path, "reason": reason},
            **kwargs,
        )


class ValueParseError(NConfigError):
    """Raised by the codecs when stored text cannot be read as the requested kind.

    The store catches this and substitutes the caller's fallback; it never
    reaches callers of ``ConfigStore.get``.
    """

    def __init__(self, text: str, kind: str, **kwargs: Any) -> None:
        super().__init__(
            code="VALUE_PARSE_ERROR",
            message=f"Cannot parse {text!r} as {kind}",
            details={"text": text, "kind": kind},
            **kwargs,
        )

    @property
    def text(self) -> str:
        """The text that failed to parse."""
        return self.details["text"]

    @property
    def kind(self) -> str:
        """The value kind that was requested."""
        return self.details["kind"]


class UnsupportedTypeError(NConfigError):
    """Raised when a type outside str, bool, int, float and lists of them is requested."""

    def __init__(self, type_name: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_TYPE",
            message=f"Unsupported value type: {type_name}. Expected str, bool, int, float or a list of them.",
            details={"type_name": type_name},
            **kwargs,
        )


class ErrorCodes:
    """All nconfig error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            use_defaults()
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    VALUE_PARSE_ERROR = "VALUE_PARSE_ERROR"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
