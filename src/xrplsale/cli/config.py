#!/usr/bin/env python3
"""
Config CLI - Stored Settings

Shows the effective configuration and edits the settings stored next to
the credentials (environment, apiUrl, timeout). Credentials themselves are
managed through `xrplsale auth`.
"""

import click

from ..core.config import SETTING_KEYS, validate_setting
from ..core.errors import ConfigurationError
from ..core.formatters import mask_secret
from .context import CliContext, pass_session
from .groups import AliasedGroup
from .output import echo_field, echo_heading, echo_success, output_result


def _check_key(key: str) -> None:
    if key not in SETTING_KEYS:
        raise ConfigurationError(f"Unknown setting '{key}'. Valid settings: {', '.join(SETTING_KEYS)}")


@click.group(cls=AliasedGroup)
def config() -> None:
    """⚙️  View and change CLI settings."""
    pass


@config.command("show", aliases=["list"])
@pass_session
def show(session: CliContext) -> None:
    """Show the effective configuration (secrets redacted)."""
    data = session.config.to_dict()
    record = session.store.record()
    data["credentials"] = {
        "apiKey": mask_secret(record.api_key) if record.api_key else None,
        "walletAddress": record.wallet_address,
        "tokenExpiresAt": record.token_expires_at,
    }

    def render(_: object) -> None:
        echo_heading("⚙️  Current Configuration", width=40)
        echo_field("Environment", data["environment"])
        echo_field("Config File", data["config_file"])
        echo_field("API URL", data["api"]["base_url"])
        echo_field("Timeout", f"{data['api']['timeout']}s")
        echo_field("Debug Mode", data["debug"])
        echo_field("Log Level", data["log_level"])
        echo_field("API Key", data["credentials"]["apiKey"] or "-")
        echo_field("Wallet", data["credentials"]["walletAddress"] or "-")

    output_result(data, session.json_output, render)


@config.command("path")
@pass_session
def path(session: CliContext) -> None:
    """Print the settings file location."""
    click.echo(str(session.config.config_file))


@config.command("get")
@click.argument("key")
@pass_session
def get(session: CliContext, key: str) -> None:
    """Print one stored setting."""
    _check_key(key)
    value = session.store.get(key)
    output_result({key: value}, session.json_output, lambda _: click.echo("" if value is None else str(value)))


@config.command("set")
@click.argument("key")
@click.argument("value")
@pass_session
def set_value(session: CliContext, key: str, value: str) -> None:
    """
    Store a setting.

    Examples:
      xrplsale config set environment testnet
      xrplsale config set timeout 60
    """
    stored = validate_setting(key, value)
    session.store.set(key, stored)
    output_result({key: stored}, session.json_output, lambda _: echo_success(f"{key} set to {stored}"))


@config.command("unset")
@click.argument("key")
@pass_session
def unset(session: CliContext, key: str) -> None:
    """Remove a stored setting so the default applies again."""
    _check_key(key)
    session.store.delete(key)
    output_result({key: None}, session.json_output, lambda _: echo_success(f"{key} reset to default"))
