#!/usr/bin/env python3
"""
Credential Store

Persists the API key, wallet session token, wallet address and token expiry
in the per-user settings file. The file is read once when the store is
created and rewritten on every change. Concurrent invocations are not
synchronized; the last writer wins.
"""

import logging
from pathlib import Path
from typing import Any

from .config import load_settings
from .json_utils import write_json
from .models import CredentialRecord

logger = logging.getLogger(__name__)

API_KEY = "apiKey"
AUTH_TOKEN = "authToken"
WALLET_ADDRESS = "walletAddress"
TOKEN_EXPIRES_AT = "tokenExpiresAt"

CREDENTIAL_KEYS = (API_KEY, AUTH_TOKEN, WALLET_ADDRESS, TOKEN_EXPIRES_AT)

# Owner read/write only
FILE_MODE = 0o600


class CredentialStore:
    """
    Key/value store backed by a single JSON file.

    Shares the file with the stored settings (`environment`, `apiUrl`,
    `timeout`), so `clear()` only removes credential keys.
    """

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: Settings file location; created on first write
        """
        self.path = Path(path)
        self._data: dict[str, Any] = load_settings(self.path)

    def get(self, name: str) -> Any:
        """Return the stored value, or None if the key is absent."""
        return self._data.get(name)

    def set(self, name: str, value: Any) -> None:
        """Store a value and persist the file."""
        self._data[name] = value
        self._save()
        logger.debug("Stored %s in %s", name, self.path)

    def delete(self, name: str) -> None:
        """Remove a key; deleting an absent key is a no-op."""
        if name in self._data:
            del self._data[name]
            self._save()
            logger.debug("Deleted %s from %s", name, self.path)

    def clear(self) -> None:
        """Remove every credential key, keeping stored settings."""
        removed = [key for key in CREDENTIAL_KEYS if key in self._data]
        for key in removed:
            del self._data[key]
        if removed:
            self._save()

    def record(self) -> CredentialRecord:
        """Typed view of the stored credentials."""
        return CredentialRecord(
            api_key=self._data.get(API_KEY),
            auth_token=self._data.get(AUTH_TOKEN),
            wallet_address=self._data.get(WALLET_ADDRESS),
            token_expires_at=self._data.get(TOKEN_EXPIRES_AT),
        )

    def _save(self) -> None:
        write_json(self.path, self._data, mode=FILE_MODE)
