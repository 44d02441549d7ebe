#!/usr/bin/env python3
"""
Project Creation Payloads

Pure validation and construction of the request body for
`POST /projects`. Input can come from command-line flags, a YAML project
file written by `xrplsale init`, or interactive prompts; all three paths
end in build_project_payload() so they are validated identically.
"""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import ValidationError

MAX_TOKEN_SYMBOL_LENGTH = 10


def validate_required(value: str | None, label: str) -> str:
    """Strip a text field and reject it if empty."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{label} is required")
    return text


def validate_token_symbol(value: str | None) -> str:
    symbol = validate_required(value, "Token symbol")
    if len(symbol) > MAX_TOKEN_SYMBOL_LENGTH:
        raise ValidationError(f"Token symbol must be {MAX_TOKEN_SYMBOL_LENGTH} characters or less")
    return symbol


def parse_positive_number(value: Any, label: str = "Value") -> int | float:
    """
    Parse a strictly positive number for the JSON payload.

    Whole numbers stay integers so large supplies are sent exactly.

    Raises:
        ValidationError: If the value is missing, not numeric, or not > 0
    """
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a valid positive number")
    try:
        amount = Decimal(str(value).replace(",", "").strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{label} must be a valid positive number") from None

    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"{label} must be a valid positive number")

    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def build_tier(tier_number: int, price_per_token: Any, total_tokens: Any) -> dict[str, Any]:
    """One pricing tier in API form."""
    return {
        "tier": tier_number,
        "pricePerToken": parse_positive_number(price_per_token, f"Tier {tier_number} price per token"),
        "totalTokens": parse_positive_number(total_tokens, f"Tier {tier_number} total tokens"),
    }


def parse_tier_spec(spec: str, tier_number: int) -> dict[str, Any]:
    """
    Parse a `--tier PRICE:TOKENS` flag value.

    Example:
        parse_tier_spec("0.5:1000000", 1)
        -> {"tier": 1, "pricePerToken": 0.5, "totalTokens": 1000000}
    """
    price, sep, tokens = spec.partition(":")
    if not sep:
        raise ValidationError(f"Invalid tier '{spec}'. Use PRICE:TOKENS, e.g. 0.5:1000000")
    return build_tier(tier_number, price, tokens)


def build_project_payload(
    name: str | None,
    token_symbol: str | None,
    total_supply: Any,
    description: str | None = None,
    tiers: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """
    Validate project fields and assemble the creation request body.

    Tiers are renumbered 1..n in the order given.

    Raises:
        ValidationError: On the first invalid field
    """
    payload: dict[str, Any] = {
        "name": validate_required(name, "Project name"),
        "tokenSymbol": validate_token_symbol(token_symbol),
        "totalSupply": parse_positive_number(total_supply, "Total supply"),
    }

    if description and description.strip():
        payload["description"] = description.strip()

    if tiers:
        payload["tiers"] = [
            build_tier(index, tier.get("pricePerToken"), tier.get("totalTokens"))
            for index, tier in enumerate(tiers, start=1)
        ]

    return payload


def load_project_file(path: str | Path) -> dict[str, Any]:
    """
    Read a YAML project definition and return a validated payload.

    Raises:
        ValidationError: If the file cannot be parsed or a field is invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValidationError(f"Could not read project file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"Project file {path} must contain a mapping of project fields")

    tiers = data.get("tiers") or []
    if not isinstance(tiers, list) or not all(isinstance(t, dict) for t in tiers):
        raise ValidationError("tiers must be a list of {pricePerToken, totalTokens} entries")

    return build_project_payload(
        name=data.get("name"),
        token_symbol=data.get("tokenSymbol"),
        total_supply=data.get("totalSupply"),
        description=data.get("description"),
        tiers=tiers,
    )


def render_project_template(name: str = "My Token Sale", token_symbol: str = "TOKEN") -> str:
    """YAML skeleton written by `xrplsale init`."""
    template = {
        "name": name,
        "description": "Describe your project here",
        "tokenSymbol": token_symbol,
        "totalSupply": 1000000,
        "tiers": [
            {"pricePerToken": 0.1, "totalTokens": 500000},
            {"pricePerToken": 0.2, "totalTokens": 500000},
        ],
    }
    header = (
        "# XRPL.Sale project definition\n"
        "# Create the project with: xrplsale projects create --file <this file>\n"
    )
    return header + yaml.safe_dump(template, default_flow_style=False, sort_keys=False)


def resolve_interactive(interactive: bool | None, name: str | None, project_file: str | None) -> bool:
    """
    Decide whether `projects create` prompts for input.

    An explicit --interactive/--no-interactive always wins. Otherwise the
    command is interactive only when neither --name nor --file was given.
    """
    if interactive is not None:
        return interactive
    return not name and not project_file
