#!/usr/bin/env python3
"""
Investments CLI - Token Purchases

List and inspect the authenticated account's investments and invest XRP
into an active project.
"""

import click

from ..core.formatters import format_currency
from ..projects.payload import parse_positive_number
from .context import CliContext, pass_session
from .groups import AliasedGroup
from .output import output_result, render_investment, render_investments


@click.group(cls=AliasedGroup)
def investments() -> None:
    """💰 Manage your investments."""
    pass


@investments.command("list", aliases=["ls"])
@click.option("--project", "project_id", help="Only investments in this project")
@click.option("-s", "--status", help="Filter by status (e.g. pending, confirmed)")
@click.option("-p", "--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page number")
@click.option("-l", "--limit", type=click.IntRange(min=1), default=10, show_default=True, help="Items per page")
@pass_session
def list_investments(
    session: CliContext,
    project_id: str | None,
    status: str | None,
    page: int,
    limit: int,
) -> None:
    """📋 List your investments."""
    client = session.authed_client()
    response = client.investments.list(project_id=project_id, status=status, page=page, limit=limit)

    output_result(response, session.json_output, render_investments)


@investments.command("get", aliases=["show"])
@click.argument("investment_id")
@pass_session
def get_investment(session: CliContext, investment_id: str) -> None:
    """🔍 Get investment details."""
    client = session.authed_client()
    investment = client.investments.get(investment_id)

    output_result(investment, session.json_output, render_investment)


@investments.command("create", aliases=["new"])
@click.option("--project", "project_id", required=True, help="Project to invest in")
@click.option("--amount", required=True, help="Amount of XRP to invest")
@click.option("--tier", type=click.IntRange(min=1), help="Pricing tier to buy from")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt")
@pass_session
def create_investment(
    session: CliContext,
    project_id: str,
    amount: str,
    tier: int | None,
    yes: bool,
) -> None:
    """
    ➕ Invest XRP in a project.

    Example:
      xrplsale investments create --project prj_123 --amount 250 --tier 1
    """
    client = session.authed_client()

    amount_xrp = parse_positive_number(amount, "Amount")
    payload = {"projectId": project_id, "amountXrp": amount_xrp}
    if tier is not None:
        payload["tier"] = tier

    if not yes and not click.confirm(f"Invest {format_currency(amount_xrp)} in project {project_id}?", default=False):
        click.echo(click.style("❌ Investment cancelled", fg="yellow"))
        return

    investment = client.investments.create(payload)

    def render(data: object) -> None:
        click.echo(click.style("✅ Investment submitted!", fg="green", bold=True))
        render_investment(data)

    output_result(investment, session.json_output, render)
