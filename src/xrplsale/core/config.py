#!/usr/bin/env python3
"""
Configuration Management for the XRPL.Sale CLI

Resolves settings from (highest precedence first) command-line flags,
environment variables, the stored settings file and built-in defaults.
Supports the production and testnet API environments.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import click
from dotenv import load_dotenv

from .errors import ConfigurationError
from .json_utils import read_json

# Load environment variables from .env file
load_dotenv()

APP_NAME = "xrplsale"
CONFIG_FILENAME = "config.json"
DEFAULT_TIMEOUT = 30


class Environment(Enum):
    """API environment types."""

    PRODUCTION = "production"
    TESTNET = "testnet"


DEFAULT_API_URLS = {
    Environment.PRODUCTION: "https://api.xrpl.sale/v1",
    Environment.TESTNET: "https://api-testnet.xrpl.sale/v1",
}

# Keys that `xrplsale config set` may write to the settings file
SETTING_KEYS = ("environment", "apiUrl", "timeout")


@dataclass
class ApiConfig:
    """Remote API configuration."""

    base_url: str
    timeout: int = DEFAULT_TIMEOUT
    api_key: str | None = None  # Supplied by --api-key or XRPLSALE_API_KEY, never stored


@dataclass
class Config:
    """
    Main configuration class for the CLI.

    Built once per invocation; the command context carries it to every
    command handler instead of a module-level singleton.
    """

    environment: Environment
    config_file: Path
    api: ApiConfig

    # Application settings
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_environment(
        cls,
        config_file: str | Path | None = None,
        environment: str | None = None,
        api_key: str | None = None,
        debug: bool | None = None,
    ) -> "Config":
        """Create configuration from flags, environment variables and the settings file."""
        config_dir = Path(os.getenv("XRPLSALE_CONFIG_DIR") or click.get_app_dir(APP_NAME))
        config_path = Path(config_file or os.getenv("XRPLSALE_CONFIG") or config_dir / CONFIG_FILENAME)
        config_path = config_path.expanduser()

        stored = load_settings(config_path)

        env_name = environment or os.getenv("XRPLSALE_ENV") or stored.get("environment") or "production"
        try:
            env = Environment(str(env_name).lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown environment '{env_name}'. Use one of: "
                + ", ".join(e.value for e in Environment)
            ) from None

        # An explicit --environment flag ignores the stored apiUrl
        stored_url = stored.get("apiUrl") if environment is None else None
        base_url = os.getenv("XRPLSALE_API_URL") or stored_url or DEFAULT_API_URLS[env]
        timeout_value = os.getenv("XRPLSALE_TIMEOUT") or stored.get("timeout") or DEFAULT_TIMEOUT
        try:
            timeout = int(timeout_value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid timeout: {timeout_value!r}") from None

        api = ApiConfig(
            base_url=str(base_url).rstrip("/"),
            timeout=timeout,
            api_key=api_key or os.getenv("XRPLSALE_API_KEY") or None,
        )

        if debug is None:
            debug = os.getenv("DEBUG", "false").lower() == "true"

        log_level = "DEBUG" if debug else os.getenv("LOG_LEVEL", "WARNING").upper()

        return cls(
            environment=env,
            config_file=config_path,
            api=api,
            debug=debug,
            log_level=log_level,
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.api.base_url.startswith(("http://", "https://")):
            errors.append(f"API URL must start with http:// or https://: {self.api.base_url}")

        if self.api.timeout <= 0:
            errors.append("API timeout must be positive")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.WARNING)

        if self.debug:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(levelname)s: %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")
        logging.getLogger("xrplsale").setLevel(level)

        # Reduce noise from HTTP libraries unless debugging
        if not self.debug:
            logging.getLogger("urllib3").setLevel(logging.WARNING)
            logging.getLogger("requests").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return ["api.api_key"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, ApiConfig):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if nested_value and not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


def load_settings(config_path: Path) -> dict[str, Any]:
    """Read the stored settings file; a missing file means no stored settings."""
    if not config_path.exists():
        return {}

    try:
        data = read_json(config_path)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a JSON object")

    return data


def validate_setting(key: str, value: str) -> Any:
    """
    Check a value for `xrplsale config set` and convert it to its stored type.

    Raises:
        ConfigurationError: If the key is unknown or the value is invalid
    """
    if key not in SETTING_KEYS:
        raise ConfigurationError(f"Unknown setting '{key}'. Valid settings: {', '.join(SETTING_KEYS)}")

    if key == "environment":
        try:
            return Environment(value.lower()).value
        except ValueError:
            raise ConfigurationError(
                f"Unknown environment '{value}'. Use one of: " + ", ".join(e.value for e in Environment)
            ) from None

    if key == "apiUrl":
        if not value.startswith(("http://", "https://")):
            raise ConfigurationError("apiUrl must start with http:// or https://")
        return value.rstrip("/")

    try:
        timeout = int(value)
    except ValueError:
        raise ConfigurationError(f"timeout must be a whole number of seconds, got '{value}'") from None
    if timeout <= 0:
        raise ConfigurationError("timeout must be positive")
    return timeout
