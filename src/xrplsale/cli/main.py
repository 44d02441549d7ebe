#!/usr/bin/env python3
"""
Main CLI Entry Point for XRPL.Sale

Provides the `xrplsale` command: global options, subcommand registration,
and process-level handling of interrupts and termination signals.
"""

import signal
import sys

import click

from .. import __version__
from .analytics import analytics
from .auth import auth
from .config import config
from .context import CliContext
from .groups import XrplSaleGroup, say_goodbye
from .init import init
from .investments import investments
from .projects import projects
from .webhooks import webhooks


@click.group(
    cls=XrplSaleGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--api-key", "api_key", envvar="XRPLSALE_API_KEY", help="XRPL.Sale API key (not stored)")
@click.option(
    "--environment",
    type=click.Choice(["production", "testnet"]),
    help="API environment [default: production]",
)
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format")
@click.option("--color/--no-color", default=True, help="Enable or disable colored output")
@click.version_option(__version__, "-v", "--version", prog_name="xrplsale", message="%(prog)s %(version)s")
@click.pass_context
def main(
    ctx: click.Context,
    api_key: str | None,
    environment: str | None,
    config_file: str | None,
    debug: bool,
    json_output: bool,
    color: bool,
) -> None:
    """
    🚀 XRPL.Sale CLI - Native XRPL Launchpad Platform

    Authenticate, then create and launch token sales, track investments,
    read analytics and manage webhooks from the terminal.
    """
    if ctx.obj is None:
        ctx.obj = CliContext.create(
            config_file=config_file,
            environment=environment,
            api_key=api_key,
            debug=debug or None,
        )
    else:
        # Pre-built context (tests, embedding): still honor the global flags
        if api_key:
            ctx.obj.config.api.api_key = api_key
        if debug:
            ctx.obj.config.debug = True
            ctx.obj.config.log_level = "DEBUG"

    session: CliContext = ctx.obj
    session.json_output = session.json_output or json_output
    session.color = color
    if not color:
        ctx.color = False

    session.config.setup_logging()

    if session.debug:
        click.echo(f"Environment: {session.config.environment.value}", err=True)
        click.echo(f"API URL: {session.config.api.base_url}", err=True)
        click.echo(f"Config file: {session.config.config_file}", err=True)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        click.echo(click.style("\n💡 Get started with: xrplsale auth login", dim=True))
        click.echo(click.style("📚 Learn more: https://docs.xrpl.sale/cli", dim=True))


main.add_command(auth)
main.add_command(projects)
main.add_command(investments)
main.add_command(analytics)
main.add_command(webhooks)
main.add_command(config)
main.add_command(init)

main.add_alias("project", "projects")
main.add_alias("invest", "investments")
main.add_alias("webhook", "webhooks")


def _handle_sigterm(signum: int, frame: object) -> None:
    say_goodbye()
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    signal.signal(signal.SIGTERM, _handle_sigterm)
    try:
        main(prog_name="xrplsale")
    except KeyboardInterrupt:
        say_goodbye()
        sys.exit(0)


if __name__ == "__main__":
    run()
