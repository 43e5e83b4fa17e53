"""
Custom exception hierarchy for shelfctl.

Provides structured, typed exceptions for the failures shelfctl itself
detects. Failures raised by the process launcher (missing executable,
access denied) are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations


class ShelfException(Exception):
    """
    Base exception for all shelfctl errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, keys, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ShelfConfigError(ShelfException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ShelfConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(ShelfConfigError, ValueError):
    """
    Invalid or unknown configuration key or value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class ShelfValidationError(ShelfException, ValueError):
    """
    Invalid argument passed to a shelfctl operation.

    Raised before any process is launched, e.g. for a missing executable
    path, a non-positive timeout or a missing constructor dependency.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        self.argument = argument
        super().__init__(message, context=ctx, cause=cause)


def require_argument(value: object, name: str) -> None:
    """Raise ShelfValidationError if a required argument is absent.

    Strings are treated as absent when empty or whitespace-only.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ShelfValidationError(f"Value cannot be null or empty: {name}", argument=name)
