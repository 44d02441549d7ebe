"""
Projects Package

Validation and payload construction for token sale projects.
"""

from .payload import (
    build_project_payload,
    build_tier,
    load_project_file,
    parse_positive_number,
    parse_tier_spec,
    render_project_template,
    resolve_interactive,
    validate_token_symbol,
)

__all__ = [
    "build_project_payload",
    "build_tier",
    "load_project_file",
    "parse_positive_number",
    "parse_tier_spec",
    "render_project_template",
    "resolve_interactive",
    "validate_token_symbol",
]
