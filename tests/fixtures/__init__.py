"""
Test Fixtures and Utilities

Shared test data and helpers for the CLI test suite.

This module provides:
- Canned XRPL.Sale API responses
- A fake ApiClient whose resource groups are MagicMocks

All identifiers, addresses and amounts are synthetic.
"""
