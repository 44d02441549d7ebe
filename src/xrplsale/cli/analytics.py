#!/usr/bin/env python3
"""
Analytics CLI - Platform and Project Metrics
"""

import click

from .context import CliContext, pass_session
from .groups import AliasedGroup
from .output import output_result, render_platform_analytics, render_project_analytics

PERIODS = ("24h", "7d", "30d", "all")


@click.group(cls=AliasedGroup)
def analytics() -> None:
    """📈 Platform and project analytics."""
    pass


@analytics.command("overview", aliases=["platform"])
@pass_session
def overview(session: CliContext) -> None:
    """🌐 Platform-wide statistics."""
    client = session.authed_client()
    data = client.analytics.platform()

    output_result(data, session.json_output, render_platform_analytics)


@analytics.command("project")
@click.argument("project_id")
@click.option("--period", type=click.Choice(PERIODS), default="30d", show_default=True, help="Reporting window")
@pass_session
def project(session: CliContext, project_id: str, period: str) -> None:
    """📊 Analytics for one project."""
    client = session.authed_client()
    data = client.analytics.project(project_id, period=period)

    output_result(data, session.json_output, render_project_analytics)
