#!/usr/bin/env python3
"""
Projects CLI - Token Sale Project Management

List, inspect, create, launch and monitor token sale projects. Filtering,
sorting and paging options are passed to the API unchanged; the CLI never
sorts or filters locally.
"""

from typing import Any

import click

from ..core.models import ProjectStatus
from ..projects.payload import (
    build_project_payload,
    load_project_file,
    parse_positive_number,
    parse_tier_spec,
    resolve_interactive,
    validate_required,
    validate_token_symbol,
)
from .context import CliContext, pass_session
from .groups import AliasedGroup
from .output import (
    echo_heading,
    output_result,
    render_project,
    render_project_created,
    render_project_launched,
    render_project_stats,
    render_projects,
)
from .prompts import ask

SORT_FIELDS = ("name", "created_at", "total_raised")


@click.group(cls=AliasedGroup)
def projects() -> None:
    """🚀 Manage token sale projects."""
    pass


@projects.command("list", aliases=["ls"])
@click.option(
    "-s",
    "--status",
    type=click.Choice([s.value for s in ProjectStatus]),
    help="Filter by status",
)
@click.option("-p", "--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page number")
@click.option("-l", "--limit", type=click.IntRange(min=1), default=10, show_default=True, help="Items per page")
@click.option("--sort-by", type=click.Choice(SORT_FIELDS), help="Sort by field")
@click.option(
    "--sort-order",
    type=click.Choice(["asc", "desc"]),
    default="desc",
    show_default=True,
    help="Sort order",
)
@pass_session
def list_projects(
    session: CliContext,
    status: str | None,
    page: int,
    limit: int,
    sort_by: str | None,
    sort_order: str,
) -> None:
    """
    📋 List projects.

    Examples:
      xrplsale projects list --status active
      xrplsale projects ls --page 2 --limit 5 --sort-by total_raised
    """
    client = session.authed_client()
    response = client.projects.list(
        page=page,
        limit=limit,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order,
    )

    output_result(response, session.json_output, render_projects)


@projects.command("get", aliases=["show"])
@click.argument("project_id")
@pass_session
def get_project(session: CliContext, project_id: str) -> None:
    """🔍 Get project details."""
    client = session.authed_client()
    project = client.projects.get(project_id)

    output_result(project, session.json_output, render_project)


def prompt_project_payload() -> dict[str, Any]:
    """Guided project definition; returns a validated creation payload."""
    echo_heading("🚀 Create New Project", width=30)

    name = ask("Project name", lambda v: validate_required(v, "Project name"))
    description = ask("Project description", lambda v: validate_required(v, "Description"))
    token_symbol = ask("Token symbol", validate_token_symbol)
    total_supply = ask("Total token supply", lambda v: parse_positive_number(v, "Total supply"))

    tiers: list[dict[str, Any]] = []
    if click.confirm("Add pricing tiers now?", default=True):
        tier_number = 1
        while True:
            click.echo(click.style(f"\n📊 Tier {tier_number}", fg="cyan"))
            price = ask("Price per token (in XRP)", lambda v: parse_positive_number(v, "Price per token"))
            tokens = ask("Total tokens for this tier", lambda v: parse_positive_number(v, "Total tokens"))
            tiers.append({"pricePerToken": price, "totalTokens": tokens})

            if not click.confirm("Add another tier?", default=False):
                break
            tier_number += 1

    return build_project_payload(
        name=name,
        token_symbol=token_symbol,
        total_supply=total_supply,
        description=description,
        tiers=tiers,
    )


@projects.command("create", aliases=["new"])
@click.option("--name", help="Project name")
@click.option("--description", help="Project description")
@click.option("--token-symbol", help="Token symbol (max 10 characters)")
@click.option("--total-supply", help="Total token supply")
@click.option("--tier", "tier_specs", multiple=True, metavar="PRICE:TOKENS", help="Pricing tier (repeatable)")
@click.option(
    "--file",
    "project_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML project definition (see `xrplsale init`)",
)
@click.option(
    "--interactive/--no-interactive",
    default=None,
    help="Prompt for project details (default: only when --name and --file are absent)",
)
@pass_session
def create_project(
    session: CliContext,
    name: str | None,
    description: str | None,
    token_symbol: str | None,
    total_supply: str | None,
    tier_specs: tuple[str, ...],
    project_file: str | None,
    interactive: bool | None,
) -> None:
    """
    ➕ Create a new project.

    Examples:
      xrplsale projects create
      xrplsale projects create --name "My Sale" --token-symbol MYT --total-supply 1000000 --tier 0.1:500000
      xrplsale projects create --file xrplsale.yaml
    """
    session.require_auth()

    if project_file and (name or description or token_symbol or total_supply or tier_specs):
        raise click.UsageError("--file cannot be combined with individual project options")
    if project_file and interactive:
        raise click.UsageError("--file cannot be combined with --interactive")

    if resolve_interactive(interactive, name, project_file):
        payload = prompt_project_payload()
    elif project_file:
        payload = load_project_file(project_file)
    else:
        payload = build_project_payload(
            name=name,
            token_symbol=token_symbol,
            total_supply=total_supply,
            description=description,
            tiers=[parse_tier_spec(spec, index) for index, spec in enumerate(tier_specs, start=1)],
        )

    project = session.client().projects.create(payload)

    output_result(project, session.json_output, render_project_created)


@projects.command("launch")
@click.argument("project_id")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt")
@pass_session
def launch_project(session: CliContext, project_id: str, yes: bool) -> None:
    """🚀 Launch a project."""
    client = session.authed_client()

    if not yes and not click.confirm(f"Are you sure you want to launch project {project_id}?", default=False):
        click.echo(click.style("❌ Launch cancelled", fg="yellow"))
        return

    project = client.projects.launch(project_id)

    output_result(
        project if project is not None else {"id": project_id, "launched": True},
        session.json_output,
        render_project_launched,
    )


@projects.command("stats", aliases=["statistics"])
@click.argument("project_id")
@pass_session
def project_stats(session: CliContext, project_id: str) -> None:
    """📊 Get project statistics."""
    client = session.authed_client()
    stats = client.projects.stats(project_id)

    output_result(stats, session.json_output, render_project_stats)
