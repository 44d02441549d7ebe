#!/usr/bin/env python3
"""
Auth CLI - Login, Session Status and API Key Management

Supports API key login and XRPL wallet challenge signing. Running
`xrplsale auth login` without flags offers a menu that leads into the same
two flows.
"""

from datetime import datetime, timezone

import click

from ..auth.flow import AuthFlow, is_valid_wallet_address
from ..core.errors import ApiError, NotAuthenticatedError, ValidationError
from ..core.formatters import format_datetime, mask_secret
from ..core.models import AuthMethod
from .context import CliContext, pass_session
from .groups import AliasedGroup
from .output import (
    echo_field,
    echo_heading,
    echo_hint,
    echo_progress,
    echo_success,
    echo_warning,
    output_result,
    render_api_key_created,
    render_api_keys,
)
from .prompts import ask, choose, show_qr_code


def _wallet_address(value: str) -> str:
    value = value.strip()
    if not is_valid_wallet_address(value):
        raise ValidationError("Please enter a valid XRPL wallet address")
    return value


def _required(label: str):
    def validate(value: str) -> str:
        if not value.strip():
            raise ValidationError(f"{label} is required")
        return value.strip()

    return validate


def login_with_api_key(session: CliContext, flow: AuthFlow, api_key: str) -> None:
    """Validate an API key and report who it belongs to."""
    echo_progress("Validating API key...")
    user = flow.login_with_api_key(api_key)

    def render(_: object) -> None:
        echo_success("Successfully authenticated with API key")
        identity = None
        if isinstance(user, dict):
            identity = user.get("email") or user.get("walletAddress")
        if identity:
            echo_field("Logged in as", identity)

    output_result({"authenticated": True, "authMethod": AuthMethod.API_KEY.value, "user": user}, session.json_output, render)


def login_with_wallet(session: CliContext, flow: AuthFlow, wallet_address: str | None) -> None:
    """Run the challenge/sign/authenticate exchange for an XRPL wallet."""
    if not wallet_address:
        wallet_address = ask("Enter your XRPL wallet address", _wallet_address)

    echo_progress("Generating authentication challenge...")
    challenge = flow.request_challenge(wallet_address)

    echo_heading("🔐 Wallet Authentication", width=40)
    echo_field("Wallet Address", wallet_address)
    echo_field("Challenge", challenge.challenge)
    echo_field("Timestamp", challenge.timestamp)

    click.echo(click.style("\n📱 QR Code for mobile wallets:", fg="cyan"))
    show_qr_code(challenge.challenge)

    click.echo(click.style("\n⚡ Please sign this challenge with your XRPL wallet", fg="yellow"))
    echo_hint("   • Use your preferred XRPL wallet (Xaman, Crossmark, etc.)")
    echo_hint("   • Sign the challenge message")
    echo_hint("   • Enter the signature below")

    signature = ask("Enter the signature", _required("Signature"))

    echo_progress("Authenticating with signature...")
    result = flow.complete_wallet_login(wallet_address, challenge, signature)

    def render(_: object) -> None:
        echo_success("Successfully authenticated with wallet!")
        echo_field("Wallet", wallet_address)
        if result.expires_at:
            echo_field("Token expires", format_datetime(result.expires_at))

    output_result(
        {
            "authenticated": True,
            "authMethod": AuthMethod.WALLET.value,
            "walletAddress": wallet_address,
            "expiresAt": result.expires_at,
        },
        session.json_output,
        render,
    )


def _require_wallet_session(session: CliContext, action: str) -> None:
    if not session.store.record().auth_token:
        raise NotAuthenticatedError(
            f"You must be authenticated with a wallet to {action}. "
            'Use "xrplsale auth login --interactive" first.'
        )


@click.group(cls=AliasedGroup)
def auth() -> None:
    """🔐 Authentication and API key management."""
    pass


@auth.command("login")
@click.option("--api-key", "api_key", help="API key for authentication")
@click.option("--wallet", "wallet_address", help="XRPL wallet address for wallet authentication")
@click.option("--interactive", is_flag=True, help="Use interactive wallet authentication")
@pass_session
def login(session: CliContext, api_key: str | None, wallet_address: str | None, interactive: bool) -> None:
    """
    🔑 Authenticate with XRPL.Sale.

    Examples:
      xrplsale auth login --api-key xs_live_...
      xrplsale auth login --wallet rN7n7otQDd6FczFgLdSqtcsAUxDkw6fzRH
      xrplsale auth login
    """
    flow = session.auth_flow()

    if api_key:
        login_with_api_key(session, flow, api_key)
    elif wallet_address or interactive:
        login_with_wallet(session, flow, wallet_address)
    else:
        method = choose(
            "Choose authentication method:",
            [(AuthMethod.API_KEY.value, "🔑 API Key"), (AuthMethod.WALLET.value, "👛 XRPL Wallet")],
        )
        if method == AuthMethod.API_KEY.value:
            key = ask("Enter your API key", _required("API key"), hide_input=True)
            login_with_api_key(session, flow, key)
        else:
            login_with_wallet(session, flow, None)


@auth.command("logout")
@pass_session
def logout(session: CliContext) -> None:
    """🚪 Logout and clear stored credentials."""
    session.auth_flow().logout()

    def render(_: object) -> None:
        echo_success("Successfully logged out")
        echo_hint('💡 Use "xrplsale auth login" to authenticate again')

    output_result({"authenticated": False}, session.json_output, render)


@auth.command("status", aliases=["whoami"])
@pass_session
def status(session: CliContext) -> None:
    """👤 Show current authentication status."""
    flow = session.auth_flow()
    record = flow.status()

    def render(_: object) -> None:
        if not record.is_authenticated:
            click.echo(click.style("❌ Not authenticated", fg="red"))
            echo_hint('💡 Use "xrplsale auth login" to authenticate')
            return

        echo_success("Authenticated")

        if record.auth_method == AuthMethod.API_KEY:
            echo_field("Method", "API Key")
            echo_field("API Key", mask_secret(record.api_key))
            return

        echo_field("Method", "XRPL Wallet")
        echo_field("Wallet", record.wallet_address or "-")
        if record.token_expires_at:
            echo_field("Token expires", format_datetime(record.token_expires_at))

        try:
            user = flow.fetch_user()
        except ApiError:
            echo_warning("Could not fetch user details")
            return

        if isinstance(user, dict):
            if user.get("tier"):
                echo_field("Tier", user["tier"])
            if user.get("tokenBalance"):
                echo_field("XSALE Balance", user["tokenBalance"])

    output_result(record.to_status_dict(), session.json_output, render)


@auth.command("generate-key", aliases=["gen-key"])
@click.option("--name", help="API key name/description")
@pass_session
def generate_key(session: CliContext, name: str | None) -> None:
    """🔑 Generate a new API key."""
    _require_wallet_session(session, "generate API keys")

    key_name = name or f"CLI Key - {datetime.now(timezone.utc).isoformat()}"

    echo_progress("Generating API key...")
    api_key = session.client(use_override=False).auth.generate_api_key(key_name)

    output_result(api_key, session.json_output, render_api_key_created)


@auth.command("list-keys", aliases=["keys"])
@pass_session
def list_keys(session: CliContext) -> None:
    """📋 List your API keys."""
    _require_wallet_session(session, "list API keys")

    api_keys = session.client(use_override=False).auth.list_api_keys()

    output_result(api_keys, session.json_output, render_api_keys)


@auth.command("revoke-key")
@click.argument("key_id")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt")
@pass_session
def revoke_key(session: CliContext, key_id: str, yes: bool) -> None:
    """🗑️  Revoke an API key."""
    _require_wallet_session(session, "revoke API keys")

    if not yes and not click.confirm(f"Revoke API key {key_id}? Requests using it will start failing", default=False):
        click.echo(click.style("❌ Revoke cancelled", fg="yellow"))
        return

    response = session.client(use_override=False).auth.revoke_api_key(key_id)

    output_result(
        response if response is not None else {"revoked": True, "id": key_id},
        session.json_output,
        lambda _: echo_success(f"API key {key_id} revoked"),
    )
