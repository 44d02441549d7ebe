"""
Test Suite for the XRPL.Sale CLI

Test Structure:
- fixtures/: Synthetic API responses and a fake API client
- unit/: Unit tests mirroring the src/ package structure
- integration/: End-to-end runs of the root command

Test Data:
All identifiers, wallet addresses and amounts are synthetic. No test talks
to the real XRPL.Sale API.
"""
