#!/usr/bin/env python3
"""
Webhooks CLI - Event Notification Endpoints

Register HTTPS endpoints that XRPL.Sale calls when project or investment
events occur.
"""

from urllib.parse import urlparse

import click

from ..core.errors import ValidationError
from .context import CliContext, pass_session
from .groups import AliasedGroup
from .output import echo_success, output_result, render_webhook_created, render_webhooks

WEBHOOK_EVENTS = (
    "project.created",
    "project.launched",
    "project.completed",
    "project.cancelled",
    "investment.created",
    "investment.confirmed",
    "tier.completed",
)


def validate_webhook_url(url: str) -> str:
    """Require an absolute http(s) URL."""
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Webhook URL must be an absolute http(s) URL, got '{url}'")
    return url.strip()


@click.group(cls=AliasedGroup)
def webhooks() -> None:
    """🔔 Manage webhook endpoints."""
    pass


@webhooks.command("list", aliases=["ls"])
@pass_session
def list_webhooks(session: CliContext) -> None:
    """📋 List registered webhooks."""
    client = session.authed_client()
    response = client.webhooks.list()

    output_result(response, session.json_output, render_webhooks)


@webhooks.command("create", aliases=["add"])
@click.option("--url", required=True, help="Endpoint that receives event POSTs")
@click.option(
    "--event",
    "events",
    multiple=True,
    required=True,
    type=click.Choice(WEBHOOK_EVENTS),
    help="Event to subscribe to (repeatable)",
)
@click.option("--secret", help="Signing secret (generated by the server if omitted)")
@pass_session
def create_webhook(session: CliContext, url: str, events: tuple[str, ...], secret: str | None) -> None:
    """
    ➕ Register a webhook.

    Example:
      xrplsale webhooks create --url https://example.com/hooks --event investment.created
    """
    client = session.authed_client()
    url = validate_webhook_url(url)

    # Keep the order given, drop repeats
    unique_events = list(dict.fromkeys(events))
    webhook = client.webhooks.create(url, unique_events, secret=secret)

    output_result(webhook, session.json_output, render_webhook_created)


@webhooks.command("delete", aliases=["rm"])
@click.argument("webhook_id")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt")
@pass_session
def delete_webhook(session: CliContext, webhook_id: str, yes: bool) -> None:
    """🗑️  Delete a webhook."""
    client = session.authed_client()

    if not yes and not click.confirm(f"Delete webhook {webhook_id}?", default=False):
        click.echo(click.style("❌ Delete cancelled", fg="yellow"))
        return

    response = client.webhooks.delete(webhook_id)

    output_result(
        response if response is not None else {"deleted": True, "id": webhook_id},
        session.json_output,
        lambda _: echo_success(f"Webhook {webhook_id} deleted"),
    )


@webhooks.command("test")
@click.argument("webhook_id")
@pass_session
def test_webhook(session: CliContext, webhook_id: str) -> None:
    """🧪 Send a test event to a webhook."""
    client = session.authed_client()
    response = client.webhooks.test(webhook_id)

    output_result(
        response if response is not None else {"sent": True, "id": webhook_id},
        session.json_output,
        lambda _: echo_success(f"Test event sent to webhook {webhook_id}"),
    )
