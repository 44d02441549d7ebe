#!/usr/bin/env python3
"""
Interactive Prompt Helpers

Bridges the pure validators (which raise ValidationError) to click.prompt,
which re-asks the question whenever its value_proc raises BadParameter.
"""

import io
import logging
from collections.abc import Callable
from typing import Any

import click
import qrcode
from qrcode.exceptions import DataOverflowError

from ..core.errors import ValidationError

logger = logging.getLogger(__name__)


def checked(validator: Callable[[str], Any]) -> Callable[[str], Any]:
    """Wrap a validator so click.prompt shows its message and prompts again."""

    def value_proc(value: str) -> Any:
        try:
            return validator(value)
        except ValidationError as e:
            raise click.BadParameter(str(e)) from e

    return value_proc


def ask(text: str, validator: Callable[[str], Any], hide_input: bool = False) -> Any:
    """Prompt until `validator` accepts the answer; returns the validated value."""
    return click.prompt(text, value_proc=checked(validator), hide_input=hide_input)


def choose(text: str, options: list[tuple[str, str]]) -> str:
    """
    Numbered menu; returns the value of the chosen option.

    Args:
        options: (value, label) pairs in display order
    """
    click.echo(click.style(text, bold=True))
    for index, (_, label) in enumerate(options, start=1):
        click.echo(f"  {index}) {label}")
    selection = click.prompt("Select", type=click.IntRange(1, len(options)), default=1)
    return options[selection - 1][0]


def show_qr_code(data: str) -> None:
    """Render `data` as a terminal QR code; failures only produce a warning."""
    try:
        qr = qrcode.QRCode(border=1)
        qr.add_data(data)
        qr.make(fit=True)
        buffer = io.StringIO()
        qr.print_ascii(out=buffer, invert=True)
    except (DataOverflowError, ValueError) as e:
        logger.debug("QR code rendering failed: %s", e)
        click.echo(click.style("⚠️  Could not render QR code", fg="yellow"))
        return

    click.echo(buffer.getvalue())
