"""
Authentication Package

API key and XRPL wallet login flows.
"""

from .flow import AuthFlow, is_valid_wallet_address

__all__ = ["AuthFlow", "is_valid_wallet_address"]
