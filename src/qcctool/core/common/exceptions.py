"""
Common exception classes for qcctool.

This module defines the exception hierarchy used throughout the tool. User
mistakes on the command line are not exceptions: ``validate()`` reports them
as a boolean. Exceptions here cover run failures, configuration problems and
programming errors in command definitions.
"""

from __future__ import annotations


class QccToolError(Exception):
    """Base exception class for all qcctool errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class UsageError(QccToolError):
    """Raised when a command line could not be validated."""

    def __init__(
        self,
        message: str = "Invalid command line",
        usage: str = "",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
        self.usage = usage


class ToolRunError(QccToolError):
    """Raised when a validated command fails while running.

    ``domain`` and ``code`` identify the failure the way the diagnostic line
    ``<program>: error: <domain> / <code>`` reports it.
    """

    def __init__(
        self,
        domain: str,
        code: int,
        message: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message or f"{domain} / {code}", details, **kwargs)
        self.domain = domain
        self.code = code


class OperationError(ToolRunError):
    """Failure recorded by a cryptographic operation."""


class CommandDefinitionError(QccToolError):
    """Raised when a command class is missing required class attributes."""

    def __init__(
        self,
        message: str = "Invalid command definition",
        command_class: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
        self.command_class = command_class


class CommandStateError(QccToolError):
    """Raised when a command is run without a successful validation."""

    def __init__(
        self,
        message: str = "Command has not been validated",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class ConfigurationError(QccToolError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
