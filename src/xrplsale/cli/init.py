#!/usr/bin/env python3
"""
Init CLI - Project Definition Scaffolding

Writes a YAML project definition that `xrplsale projects create --file`
accepts, so a sale can be reviewed and versioned before it is created.
"""

from pathlib import Path

import click

from ..core.errors import ValidationError
from ..projects.payload import render_project_template, validate_token_symbol
from .context import CliContext, pass_session
from .output import echo_hint, echo_success, output_result

DEFAULT_PROJECT_FILE = "xrplsale.yaml"


@click.command()
@click.option(
    "--path",
    "target",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_PROJECT_FILE,
    show_default=True,
    help="Where to write the project definition",
)
@click.option("--name", default="My Token Sale", show_default=True, help="Project name")
@click.option("--token-symbol", default="TOKEN", show_default=True, help="Token symbol")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@pass_session
def init(session: CliContext, target: Path, name: str, token_symbol: str, force: bool) -> None:
    """
    🧰 Create a project definition file.

    Example:
      xrplsale init --name "My Sale" --token-symbol MYT
      xrplsale projects create --file xrplsale.yaml
    """
    if target.exists() and not force:
        raise ValidationError(f"{target} already exists. Use --force to overwrite it.")

    token_symbol = validate_token_symbol(token_symbol)

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_project_template(name=name, token_symbol=token_symbol), encoding="utf-8")

    def render(_: object) -> None:
        echo_success(f"Created {target}")
        echo_hint("\n💡 Next steps:")
        echo_hint(f"   • Edit {target} with your sale details and pricing tiers")
        if not session.store.record().is_authenticated:
            echo_hint("   • Authenticate: xrplsale auth login")
        echo_hint(f"   • Create the project: xrplsale projects create --file {target}")

    output_result({"created": str(target)}, session.json_output, render)
