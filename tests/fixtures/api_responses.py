#!/usr/bin/env python3
"""
Synthetic XRPL.Sale API Responses

Canned response bodies shaped like the real API, plus make_client(), which
returns a MagicMock standing in for ApiClient with these responses preset.
"""

from typing import Any
from unittest.mock import MagicMock

WALLET_ADDRESS = "rN7n7otQDd6FczFgLdSqtcsAUxDkw6fzRH"


def sample_project(**overrides: Any) -> dict[str, Any]:
    project = {
        "id": "prj_0123456789abcdef",
        "name": "Test Launch",
        "description": "Synthetic project for tests",
        "status": "active",
        "tokenSymbol": "TST",
        "totalSupply": "1000000",
        "totalRaisedXrp": "1234.5",
        "createdAt": "2025-03-05T14:30:00Z",
        "tiers": [
            {"tier": 1, "pricePerToken": "0.1", "totalTokens": "500000"},
            {"tier": 2, "pricePerToken": "0.2", "totalTokens": "500000"},
        ],
    }
    project.update(overrides)
    return project


def project_list(*projects: dict[str, Any], page: int = 1, total_pages: int = 1) -> dict[str, Any]:
    items = list(projects)
    return {
        "data": items,
        "pagination": {"page": page, "totalPages": total_pages, "total": len(items)},
    }


def sample_stats() -> dict[str, Any]:
    return {
        "totalRaisedXrp": "50000",
        "totalInvestors": 42,
        "tokensSold": "250000",
        "currentTier": 2,
        "progress": 0.25,
    }


def sample_challenge() -> dict[str, Any]:
    return {"challenge": "xrplsale-login-8f3a2c", "timestamp": 1730000000123}


def sample_auth_result() -> dict[str, Any]:
    return {"token": "jwt-token-abc", "expiresAt": "2030-01-01T00:00:00Z"}


def sample_user() -> dict[str, Any]:
    return {"email": "tester@example.com", "walletAddress": WALLET_ADDRESS, "tier": "gold", "tokenBalance": "1500"}


def sample_api_key() -> dict[str, Any]:
    return {
        "id": "key_1",
        "name": "CI key",
        "key": "xs_live_abcdefghijklmnopqrstuvwxyz",
        "createdAt": "2025-03-05T14:30:00Z",
    }


def sample_api_key_list() -> dict[str, Any]:
    return {
        "data": [
            {"id": "key_1", "name": "CI key", "keyPrefix": "xs_live_", "createdAt": "2025-03-05T14:30:00Z"},
            {
                "id": "key_2",
                "name": "Laptop",
                "keyPrefix": "xs_live_",
                "createdAt": "2025-03-06T09:00:00Z",
                "lastUsedAt": "2025-03-07T10:00:00Z",
            },
        ]
    }


def sample_investment(**overrides: Any) -> dict[str, Any]:
    investment = {
        "id": "inv_0123456789abcdef",
        "projectId": "prj_0123456789abcdef",
        "projectName": "Test Launch",
        "amountXrp": "250",
        "tokenAmount": "2500",
        "tier": 1,
        "status": "confirmed",
        "createdAt": "2025-03-06T09:00:00Z",
    }
    investment.update(overrides)
    return investment


def sample_webhook(**overrides: Any) -> dict[str, Any]:
    webhook = {
        "id": "wh_0123456789abcdef",
        "url": "https://example.com/hooks",
        "events": ["investment.created"],
        "active": True,
        "createdAt": "2025-03-05T14:30:00Z",
    }
    webhook.update(overrides)
    return webhook


def sample_platform_analytics() -> dict[str, Any]:
    return {
        "totalProjects": 12,
        "activeProjects": 3,
        "totalRaisedXrp": "987654.321",
        "totalInvestors": 1500,
        "topProjects": [
            {"name": "Test Launch", "totalRaisedXrp": "50000"},
        ],
    }


def make_client() -> MagicMock:
    """Fake ApiClient; every endpoint returns a synthetic response by default."""
    client = MagicMock(name="ApiClient")

    client.auth.validate_api_key.return_value = {"valid": True}
    client.auth.get_current_user.return_value = sample_user()
    client.auth.generate_challenge.return_value = sample_challenge()
    client.auth.authenticate.return_value = sample_auth_result()
    client.auth.generate_api_key.return_value = sample_api_key()
    client.auth.list_api_keys.return_value = sample_api_key_list()
    client.auth.revoke_api_key.return_value = None

    client.projects.list.return_value = project_list(sample_project())
    client.projects.get.return_value = sample_project()
    client.projects.create.return_value = sample_project(status="upcoming")
    client.projects.launch.return_value = sample_project(status="active")
    client.projects.stats.return_value = sample_stats()

    client.investments.list.return_value = {"data": [sample_investment()]}
    client.investments.get.return_value = sample_investment()
    client.investments.create.return_value = sample_investment(status="pending")

    client.analytics.platform.return_value = sample_platform_analytics()
    client.analytics.project.return_value = {"totalRaisedXrp": "50000", "investors": 42, "period": "30d"}

    client.webhooks.list.return_value = {"data": [sample_webhook()]}
    client.webhooks.create.return_value = sample_webhook(secret="whsec_123")
    client.webhooks.delete.return_value = None
    client.webhooks.test.return_value = None

    return client
