"""
XRPL.Sale CLI - Command-line client for the XRPL.Sale launchpad

Authenticate with an API key or an XRPL wallet signature, then manage token
sale projects, investments, analytics and webhooks from the terminal.

Packages:
- core: Configuration, credential storage, data models, formatting
- api: HTTP facade over the XRPL.Sale REST API
- auth: Login flows (API key validation, wallet challenge signing)
- projects: Project payload construction and validation
- cli: Click command groups and output rendering

Example Usage:
    from xrplsale.core.credentials import CredentialStore
    from xrplsale.api.client import ApiClient

    store = CredentialStore(Path("~/.config/xrplsale/config.json").expanduser())
    client = ApiClient("https://api.xrpl.sale/v1", api_key=store.get("apiKey"))
    client.projects.list(status="active")
"""

__version__ = "1.0.0"
__author__ = "XRPL.Sale"

from .core.config import Config, Environment
from .core.credentials import CredentialStore
from .core.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    NotAuthenticatedError,
    ValidationError,
    XrplSaleError,
)

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "CredentialStore",

    # Errors
    "XrplSaleError",
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "NotAuthenticatedError",
    "ValidationError",
]
