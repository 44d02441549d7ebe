#!/usr/bin/env python3
"""
Core Data Models for the XRPL.Sale CLI

Typed views over the JSON payloads exchanged with the XRPL.Sale API.
The CLI never mutates or caches these; `--json` output always prints the
raw response, and these models are only used for human-readable rendering
and for building requests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def as_mapping(data: Any) -> dict[str, Any]:
    """Response body as a dict; empty (204) and non-JSON bodies become {}."""
    return data if isinstance(data, dict) else {}


class ProjectStatus(Enum):
    """Lifecycle states of a token sale project."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AuthMethod(Enum):
    """How the stored credentials authenticate requests."""

    API_KEY = "apiKey"
    WALLET = "wallet"


@dataclass
class CredentialRecord:
    """
    Locally persisted credentials.

    At most one of `api_key` or the wallet session (`auth_token` plus
    `wallet_address`) is populated after a successful login.
    """

    api_key: str | None = None
    auth_token: str | None = None
    wallet_address: str | None = None
    token_expires_at: str | None = None

    @property
    def auth_method(self) -> AuthMethod | None:
        """API key wins over a wallet session when both are present."""
        if self.api_key:
            return AuthMethod.API_KEY
        if self.auth_token:
            return AuthMethod.WALLET
        return None

    @property
    def is_authenticated(self) -> bool:
        return self.auth_method is not None

    def to_status_dict(self) -> dict[str, Any]:
        """Status document printed by `auth status --json`."""
        method = self.auth_method
        return {
            "authenticated": self.is_authenticated,
            "authMethod": method.value if method else None,
            "walletAddress": self.wallet_address or None,
        }


@dataclass
class AuthChallenge:
    """Server-issued nonce for wallet authentication. Never persisted."""

    challenge: str
    timestamp: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuthChallenge":
        return cls(challenge=str(data["challenge"]), timestamp=data["timestamp"])


@dataclass
class AuthResult:
    """Session issued after a successful wallet signature exchange."""

    token: str
    expires_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuthResult":
        return cls(token=str(data["token"]), expires_at=data.get("expiresAt"))


@dataclass
class Tier:
    """Pricing bracket: a fixed quantity of tokens at a fixed price."""

    tier: int
    price_per_token: str
    total_tokens: str

    @classmethod
    def from_dict(cls, data: Any) -> "Tier":
        data = as_mapping(data)
        return cls(
            tier=int(data.get("tier", 0)),
            price_per_token=str(data.get("pricePerToken", "0")),
            total_tokens=str(data.get("totalTokens", "0")),
        )


@dataclass
class Project:
    """Token sale project as returned by the projects endpoints."""

    id: str
    name: str
    status: str
    token_symbol: str = ""
    total_supply: str = "0"
    total_raised_xrp: str = "0"
    created_at: str | None = None
    description: str | None = None
    tiers: list[Tier] = field(default_factory=list)

    @property
    def project_status(self) -> ProjectStatus | None:
        """Known status, or None if the server returned something new."""
        try:
            return ProjectStatus(self.status.lower())
        except ValueError:
            return None

    @classmethod
    def from_dict(cls, data: Any) -> "Project":
        data = as_mapping(data)
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            status=str(data.get("status", "")),
            token_symbol=str(data.get("tokenSymbol", "")),
            total_supply=str(data.get("totalSupply", "0")),
            total_raised_xrp=str(data.get("totalRaisedXrp") or "0"),
            created_at=data.get("createdAt"),
            description=data.get("description"),
            tiers=[Tier.from_dict(t) for t in data.get("tiers") or []],
        )


@dataclass
class ProjectStats:
    """Aggregated sale statistics for one project."""

    total_raised_xrp: str = "0"
    total_investors: str = "0"
    tokens_sold: str = "0"
    current_tier: int | None = None
    progress: float | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ProjectStats":
        data = as_mapping(data)
        progress = data.get("progress")
        return cls(
            total_raised_xrp=str(data.get("totalRaisedXrp") or "0"),
            total_investors=str(data.get("totalInvestors") or "0"),
            tokens_sold=str(data.get("tokensSold") or "0"),
            current_tier=data.get("currentTier"),
            progress=float(progress) if progress is not None else None,
        )


@dataclass
class ApiKeyRecord:
    """
    API key metadata.

    `key` is only present in the response to key generation; listings carry
    the prefix alone.
    """

    name: str
    key_prefix: str = ""
    created_at: str | None = None
    last_used_at: str | None = None
    key: str | None = None
    id: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ApiKeyRecord":
        data = as_mapping(data)
        key = data.get("key")
        return cls(
            id=data.get("id"),
            name=str(data.get("name", "")),
            key_prefix=str(data.get("keyPrefix") or (key[:8] if key else "")),
            created_at=data.get("createdAt"),
            last_used_at=data.get("lastUsedAt"),
            key=key,
        )


@dataclass
class Pagination:
    """Paging envelope attached to list responses."""

    page: int = 1
    total_pages: int = 1
    total: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Pagination | None":
        if not isinstance(data, dict) or not data:
            return None
        return cls(
            page=int(data.get("page", 1)),
            total_pages=int(data.get("totalPages", 1)),
            total=int(data.get("total", 0)),
        )


@dataclass
class Investment:
    """A purchase of project tokens by the authenticated account."""

    id: str
    project_id: str
    amount_xrp: str = "0"
    token_amount: str = "0"
    tier: int | None = None
    status: str = ""
    created_at: str | None = None
    project_name: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Investment":
        data = as_mapping(data)
        return cls(
            id=str(data.get("id", "")),
            project_id=str(data.get("projectId", "")),
            amount_xrp=str(data.get("amountXrp") or "0"),
            token_amount=str(data.get("tokenAmount") or "0"),
            tier=data.get("tier"),
            status=str(data.get("status", "")),
            created_at=data.get("createdAt"),
            project_name=data.get("projectName"),
        )


@dataclass
class Webhook:
    """Registered webhook endpoint; `secret` is only returned on creation."""

    id: str
    url: str
    events: list[str] = field(default_factory=list)
    active: bool = True
    created_at: str | None = None
    secret: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Webhook":
        data = as_mapping(data)
        return cls(
            id=str(data.get("id", "")),
            url=str(data.get("url", "")),
            events=list(data.get("events") or []),
            active=bool(data.get("active", True)),
            created_at=data.get("createdAt"),
            secret=data.get("secret"),
        )


def list_payload(response: Any) -> list[dict[str, Any]]:
    """Items of a list response, whether wrapped in `data` or a bare array."""
    if isinstance(response, list):
        return response
    if isinstance(response, dict):
        data = response.get("data")
        if isinstance(data, list):
            return data
    return []
