"""
Core Utilities Package

Shared building blocks used by the API facade, the login flows and the CLI.

This package provides:
- Configuration resolution for the production and testnet environments
- Local credential storage
- Typed models for API payloads
- Pure value formatting for human-readable output
- The error hierarchy reported by the CLI
"""

from .config import (
    DEFAULT_API_URLS,
    SETTING_KEYS,
    ApiConfig,
    Config,
    Environment,
    load_settings,
    validate_setting,
)
from .credentials import CREDENTIAL_KEYS, CredentialStore
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    NotAuthenticatedError,
    ValidationError,
    XrplSaleError,
)
from .models import (
    ApiKeyRecord,
    AuthChallenge,
    AuthMethod,
    AuthResult,
    CredentialRecord,
    Investment,
    Pagination,
    Project,
    ProjectStats,
    ProjectStatus,
    Tier,
    Webhook,
)

__all__ = [
    # Configuration
    "ApiConfig",
    "Config",
    "DEFAULT_API_URLS",
    "Environment",
    "SETTING_KEYS",
    "load_settings",
    "validate_setting",
    # Credentials
    "CREDENTIAL_KEYS",
    "CredentialStore",
    # Errors
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "NotAuthenticatedError",
    "ValidationError",
    "XrplSaleError",
    # Models
    "ApiKeyRecord",
    "AuthChallenge",
    "AuthMethod",
    "AuthResult",
    "CredentialRecord",
    "Investment",
    "Pagination",
    "Project",
    "ProjectStats",
    "ProjectStatus",
    "Tier",
    "Webhook",
]
