#!/usr/bin/env python3
"""
Error Types for the XRPL.Sale CLI

Every failure the CLI reports to the user derives from XrplSaleError so the
root command group can print one uniform message for all of them.
"""


class XrplSaleError(Exception):
    """Base class for all expected CLI failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(XrplSaleError):
    """Invalid settings value or unreadable configuration file."""


class NotAuthenticatedError(XrplSaleError):
    """Command needs credentials but none are stored or supplied."""

    def __init__(self, message: str = 'Not authenticated. Use "xrplsale auth login" first.'):
        super().__init__(message)


class ValidationError(XrplSaleError, ValueError):
    """User input rejected before any request is sent."""


class ApiError(XrplSaleError):
    """Request to the remote service failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, payload: object = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class AuthenticationError(ApiError):
    """Credentials were rejected (invalid API key, bad wallet signature)."""

    def __str__(self) -> str:
        return self.message
