#!/usr/bin/env python3
"""
Command Group Classes

AliasedGroup lets subcommands be reached by short aliases
(`projects ls`, `auth whoami`) and lists them in --help.
XrplSaleGroup is the root group; it is the single place where errors
raised by any command are turned into a user-facing message and exit code.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable
from typing import Any

import click

from ..core.errors import XrplSaleError

logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """click.Group whose commands may declare `aliases=[...]`."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.aliases: dict[str, str] = {}

    def add_alias(self, alias: str, command_name: str) -> None:
        self.aliases[alias] = command_name

    def command(self, *args: Any, aliases: tuple[str, ...] | list[str] = (), **kwargs: Any) -> Callable:
        if args and callable(args[0]):
            # Bare @group.command usage
            return super().command(*args, **kwargs)

        decorator = super().command(*args, **kwargs)

        def register(f: Callable) -> click.Command:
            cmd = decorator(f)
            for alias in aliases:
                self.add_alias(alias, cmd.name)
            return cmd

        return register

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the canonical name so usage lines never show the alias
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        rows = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            aliases = sorted(alias for alias, target in self.aliases.items() if target == name)
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            rows.append((label, cmd.get_short_help_str(limit=formatter.width - 6 - len(label))))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)


def report_error(error: BaseException, debug: bool) -> None:
    """Print one uniform error message on stderr, with a traceback only in debug mode."""
    if isinstance(error, XrplSaleError):
        message = str(error)
    else:
        message = f"Unexpected error: {error}"

    click.echo(click.style(f"❌ {message}", fg="red"), err=True)

    if debug:
        click.echo("\nFull traceback:", err=True)
        click.echo(traceback.format_exc(), err=True)
    elif not isinstance(error, XrplSaleError):
        click.echo(click.style("💡 Run again with --debug for details", dim=True), err=True)


def say_goodbye() -> None:
    click.echo(click.style("\n\n👋 Goodbye!", fg="yellow"), err=True)


class XrplSaleGroup(AliasedGroup):
    """Root group with centralized error handling."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.exceptions.Exit:
            raise
        except click.ClickException:
            # Usage errors keep click's own formatting and exit code
            raise
        except (KeyboardInterrupt, click.Abort):
            say_goodbye()
            ctx.exit(0)
        except Exception as e:
            debug = bool(getattr(ctx.obj, "debug", False))
            logger.debug("Command failed", exc_info=True)
            report_error(e, debug)
            ctx.exit(1)
