#!/usr/bin/env python3
"""
Output Rendering

Every command hands its API response to output_result(), which prints it
verbatim as JSON under the global --json flag or passes it to one of the
resource renderers below. Renderers only read the response; the same
object is what --json would have printed.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

import click
from tabulate import tabulate

from ..core.formatters import (
    format_currency,
    format_date,
    format_datetime,
    format_number,
    format_percent,
    short_id,
    status_badge,
    truncate,
)
from ..core.json_utils import format_json
from ..core.models import (
    ApiKeyRecord,
    Investment,
    Pagination,
    Project,
    ProjectStats,
    ProjectStatus,
    Webhook,
    list_payload,
)

TABLE_FORMAT = "simple_grid"


def output_result(data: Any, json_mode: bool, render: Callable[[Any], None]) -> None:
    """Print `data` as JSON or through `render`."""
    if json_mode:
        click.echo(format_json(data))
    else:
        render(data)


def render_table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    return tabulate(list(rows), headers=list(headers), tablefmt=TABLE_FORMAT)


def echo_heading(title: str, width: int = 50, color: str = "cyan") -> None:
    click.echo(click.style(f"\n{title}", fg=color, bold=True))
    click.echo(click.style("─" * width, dim=True))


def echo_field(label: str, value: Any) -> None:
    click.echo(f"{click.style(label + ':', bold=True)} {value}")


def echo_hint(text: str) -> None:
    click.echo(click.style(text, dim=True))


def echo_progress(text: str) -> None:
    """Progress note on stderr so --json output stays parseable."""
    click.echo(click.style(text, dim=True), err=True)


def echo_success(text: str) -> None:
    click.echo(click.style(f"✅ {text}", fg="green"))


def echo_warning(text: str) -> None:
    click.echo(click.style(f"⚠️  {text}", fg="yellow"))


def echo_pagination(response: Any, noun: str) -> None:
    pagination = Pagination.from_dict(response.get("pagination") if isinstance(response, dict) else None)
    if pagination:
        echo_hint(f"\nPage {pagination.page} of {pagination.total_pages} ({pagination.total} total {noun})")


# Projects


def render_projects(response: Any) -> None:
    projects = [Project.from_dict(p) for p in list_payload(response)]
    if not projects:
        click.echo(click.style("📭 No projects found", fg="yellow"))
        return

    rows = [
        (
            short_id(project.id),
            truncate(project.name, 25),
            status_badge(project.status),
            project.token_symbol,
            format_currency(project.total_raised_xrp),
            format_date(project.created_at),
        )
        for project in projects
    ]
    click.echo(render_table(["ID", "Name", "Status", "Token", "Raised", "Created"], rows))
    echo_pagination(response, "projects")


def render_project(data: Any) -> None:
    project = Project.from_dict(data)

    echo_heading(f"🚀 {project.name}")
    echo_field("ID", project.id)
    echo_field("Status", status_badge(project.status))
    echo_field("Token Symbol", project.token_symbol)
    echo_field("Total Supply", format_number(project.total_supply))
    echo_field("Total Raised", format_currency(project.total_raised_xrp))
    echo_field("Created", format_datetime(project.created_at))

    if project.description:
        click.echo(f"\n{click.style('Description:', bold=True)}")
        click.echo(project.description)

    if project.tiers:
        click.echo(f"\n{click.style('Tiers:', bold=True)}")
        for index, tier in enumerate(project.tiers, start=1):
            click.echo(
                f"  {index}. Tier {tier.tier}: {format_number(tier.total_tokens)} tokens "
                f"at {tier.price_per_token} XRP each"
            )


def render_project_created(data: Any) -> None:
    project = Project.from_dict(data)

    click.echo(click.style("\n✅ Project created successfully!", fg="green", bold=True))
    echo_field("Project ID", project.id)
    echo_field("Name", project.name)
    echo_field("Status", status_badge(project.status))

    echo_hint("\n💡 Next steps:")
    echo_hint(f"   • Review the project: xrplsale projects get {project.id}")
    if project.project_status in (None, ProjectStatus.UPCOMING):
        echo_hint(f"   • Launch project: xrplsale projects launch {project.id}")


def render_project_launched(data: Any) -> None:
    project = Project.from_dict(data)
    click.echo(click.style("🚀 Project launched successfully!", fg="green", bold=True))
    if project.status:
        echo_field("Status", status_badge(project.status))


def render_project_stats(data: Any) -> None:
    stats = ProjectStats.from_dict(data)

    echo_heading("📊 Project Statistics", width=30)
    echo_field("Total Raised", format_currency(stats.total_raised_xrp))
    echo_field("Total Investors", format_number(stats.total_investors))
    echo_field("Tokens Sold", format_number(stats.tokens_sold))
    echo_field("Current Tier", stats.current_tier or "N/A")
    if stats.progress is not None:
        echo_field("Progress", format_percent(stats.progress))


# API keys


def render_api_keys(response: Any) -> None:
    keys = [ApiKeyRecord.from_dict(k) for k in list_payload(response)]
    if not keys:
        click.echo(click.style("📭 No API keys found", fg="yellow"))
        echo_hint('💡 Use "xrplsale auth generate-key" to create one')
        return

    echo_heading(f"🔑 Your API Keys ({len(keys)})")
    for index, key in enumerate(keys, start=1):
        click.echo(f"{index}. {click.style(key.name, bold=True)}")
        if key.id:
            click.echo(f"   {click.style('ID:', dim=True)} {key.id}")
        click.echo(f"   {click.style('Key:', dim=True)} {key.key_prefix}{'*' * 32}")
        click.echo(f"   {click.style('Created:', dim=True)} {format_datetime(key.created_at)}")
        click.echo(f"   {click.style('Last Used:', dim=True)} {format_datetime(key.last_used_at, default='Never')}")
        click.echo("")


def render_api_key_created(data: Any) -> None:
    key = ApiKeyRecord.from_dict(data)

    click.echo(click.style("🔑 API Key Generated Successfully!", fg="green", bold=True))
    echo_hint("─" * 50)
    echo_field("Name", key.name)
    echo_field("Key", click.style(key.key or "", fg="cyan"))
    echo_field("Created", format_datetime(key.created_at))

    click.echo(click.style("\n⚠️  IMPORTANT:", fg="yellow", bold=True))
    click.echo(click.style("   • Save this API key securely", fg="yellow"))
    click.echo(click.style("   • This is the only time you will see the full key", fg="yellow"))
    click.echo(click.style("   • Use it with: xrplsale auth login --api-key <key>", fg="yellow"))


# Investments


def render_investments(response: Any) -> None:
    investments = [Investment.from_dict(i) for i in list_payload(response)]
    if not investments:
        click.echo(click.style("📭 No investments found", fg="yellow"))
        return

    rows = [
        (
            short_id(inv.id),
            truncate(inv.project_name or inv.project_id, 25),
            format_currency(inv.amount_xrp),
            format_number(inv.token_amount),
            inv.tier if inv.tier is not None else "-",
            inv.status or "-",
            format_date(inv.created_at),
        )
        for inv in investments
    ]
    click.echo(render_table(["ID", "Project", "Amount", "Tokens", "Tier", "Status", "Date"], rows))
    echo_pagination(response, "investments")


def render_investment(data: Any) -> None:
    inv = Investment.from_dict(data)

    echo_heading("💰 Investment")
    echo_field("ID", inv.id)
    echo_field("Project", inv.project_name or inv.project_id)
    if inv.project_name:
        echo_field("Project ID", inv.project_id)
    echo_field("Amount", format_currency(inv.amount_xrp))
    echo_field("Tokens", format_number(inv.token_amount))
    echo_field("Tier", inv.tier if inv.tier is not None else "N/A")
    echo_field("Status", inv.status or "-")
    echo_field("Created", format_datetime(inv.created_at))


# Analytics


def _metric_label(key: str) -> str:
    """camelCase metric name -> "Title Case" label."""
    words = []
    current = ""
    for char in key:
        if char.isupper() and current:
            words.append(current)
            current = char
        else:
            current += char
    if current:
        words.append(current)
    return " ".join(w[:1].upper() + w[1:] for w in words)


def _metric_value(key: str, value: Any) -> str:
    lowered = key.lower()
    if isinstance(value, bool) or value is None:
        return str(value) if value is not None else "N/A"
    if "xrp" in lowered:
        return format_currency(value)
    if "progress" in lowered or "rate" in lowered:
        try:
            return format_percent(float(value))
        except (TypeError, ValueError):
            return str(value)
    if isinstance(value, int | float) or (isinstance(value, str) and value.replace(".", "", 1).isdigit()):
        return format_number(value)
    return str(value)


def render_metrics(title: str, data: Any) -> None:
    """Labeled block of scalar metrics; nested lists render as tables."""
    echo_heading(title, width=40)
    if not isinstance(data, dict):
        click.echo(str(data))
        return

    nested = {}
    for key, value in data.items():
        if isinstance(value, dict | list):
            nested[key] = value
        else:
            echo_field(_metric_label(key), _metric_value(key, value))

    for key, value in nested.items():
        click.echo(f"\n{click.style(_metric_label(key) + ':', bold=True)}")
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            headers = list(value[0].keys())
            rows = [[_metric_value(h, row.get(h)) for h in headers] for row in value]
            click.echo(render_table([_metric_label(h) for h in headers], rows))
        elif isinstance(value, dict):
            for sub_key, sub_value in value.items():
                click.echo(f"  {_metric_label(sub_key)}: {_metric_value(sub_key, sub_value)}")
        else:
            click.echo("  " + ", ".join(str(v) for v in value) if value else "  -")


def render_platform_analytics(data: Any) -> None:
    render_metrics("📈 Platform Analytics", data)


def render_project_analytics(data: Any) -> None:
    render_metrics("📈 Project Analytics", data)


# Webhooks


def render_webhooks(response: Any) -> None:
    hooks = [Webhook.from_dict(h) for h in list_payload(response)]
    if not hooks:
        click.echo(click.style("📭 No webhooks registered", fg="yellow"))
        echo_hint('💡 Use "xrplsale webhooks create" to add one')
        return

    rows = [
        (
            short_id(hook.id),
            truncate(hook.url, 40),
            ", ".join(hook.events),
            "yes" if hook.active else "no",
            format_date(hook.created_at),
        )
        for hook in hooks
    ]
    click.echo(render_table(["ID", "URL", "Events", "Active", "Created"], rows))


def render_webhook_created(data: Any) -> None:
    hook = Webhook.from_dict(data)

    echo_success("Webhook registered")
    echo_field("ID", hook.id)
    echo_field("URL", hook.url)
    echo_field("Events", ", ".join(hook.events))
    if hook.secret:
        echo_field("Signing Secret", click.style(hook.secret, fg="cyan"))
        echo_warning("Store the signing secret now; it will not be shown again")
