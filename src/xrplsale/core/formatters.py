#!/usr/bin/env python3
"""
Value Formatting Utilities

Pure helpers for rendering amounts, counts, timestamps and statuses in
human-readable output. Amounts arrive from the API as strings or numbers;
they are parsed with Decimal so large supplies and fractional XRP prices
keep their precision.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

import click

STATUS_BADGES = {
    "active": ("🟢 Active", "green"),
    "upcoming": ("🔵 Upcoming", "blue"),
    "completed": ("⚫ Completed", "bright_black"),
    "paused": ("🟡 Paused", "yellow"),
    "cancelled": ("🔴 Cancelled", "red"),
}


def to_decimal(value: Any) -> Decimal | None:
    """Parse an API amount; returns None for missing or non-numeric values."""
    if value is None or value == "":
        return None
    try:
        amount = Decimal(str(value).replace(",", "").strip())
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def format_fixed(amount: Decimal, places: int) -> str:
    """"1,234.500000"-style text; precision grows with the integer digits."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        return f"{round(amount, places):,.{places}f}"


def format_number(value: Any, max_decimals: int = 6) -> str:
    """
    Format a count or token quantity with thousands separators.

    Trailing fractional zeros are dropped: 1000000 -> "1,000,000",
    "0.500000" -> "0.5". Unparseable values are returned unchanged.
    """
    amount = to_decimal(value)
    if amount is None:
        return str(value) if value is not None else "0"

    text = format_fixed(amount, max_decimals)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_currency(value: Any, currency: str = "XRP") -> str:
    """Format an amount with two to six decimals and a currency suffix."""
    amount = to_decimal(value)
    if amount is None:
        if value is not None and str(value).strip():
            return f"{value} {currency}"
        amount = Decimal(0)

    text = format_fixed(amount, 6).rstrip("0")
    whole, _, frac = text.partition(".")
    text = f"{whole}.{frac.ljust(2, '0')}"
    return f"{text} {currency}"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse ISO-8601 strings (with or without trailing Z) and epoch milliseconds."""
    if value is None or value == "":
        return None
    if isinstance(value, int | float):
        seconds = value / 1000 if value > 1e11 else value
        return datetime.fromtimestamp(seconds)
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """Short date for tables, e.g. "Mar 05, 2025"."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value) if value else "-"
    return parsed.strftime("%b %d, %Y")


def format_datetime(value: Any, default: str = "-") -> str:
    """Long form for detail views, e.g. "March 05, 2025 at 14:30"."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value) if value else default
    return parsed.strftime("%B %d, %Y at %H:%M")


def format_percent(fraction: float | None) -> str:
    """0.4567 -> "45.7%"."""
    if fraction is None:
        return "N/A"
    return f"{fraction * 100:.1f}%"


def status_badge(status: str | None) -> str:
    """Colored emoji badge for a project status; unknown statuses pass through."""
    if not status:
        return "-"
    badge = STATUS_BADGES.get(status.lower())
    if badge is None:
        return status
    label, color = badge
    return click.style(label, fg=color)


def mask_secret(value: str, visible: int = 8) -> str:
    """Keep the first `visible` characters and star out the rest."""
    return value[:visible] + "*" * max(0, len(value) - visible)


def truncate(text: str, width: int) -> str:
    """Cut text to `width` characters, ending with "..." when shortened."""
    if len(text) <= width:
        return text
    return text[: max(0, width - 3)] + "..."


def short_id(identifier: str, length: int = 12) -> str:
    """Leading characters of an ID for table columns."""
    if len(identifier) <= length:
        return identifier
    return identifier[:length] + "..."
