#!/usr/bin/env python3
"""
Authentication Flows

Implements the two mutually exclusive login methods:

1. API key: the key is stored speculatively, validated against the server
   and removed again if the server rejects it.
2. XRPL wallet: the server issues a challenge for the wallet address, the
   user signs it with an external wallet application, and the signature is
   exchanged for a session token.

The controller performs no terminal I/O. The CLI supplies the pasted
signature and the interactive menu calls these same methods directly.
"""

import logging
import re
from collections.abc import Callable
from typing import Any

from ..api.client import ApiClient
from ..core.credentials import API_KEY, AUTH_TOKEN, TOKEN_EXPIRES_AT, WALLET_ADDRESS, CredentialStore
from ..core.errors import ApiError, AuthenticationError, ValidationError
from ..core.models import AuthChallenge, AuthResult, CredentialRecord

logger = logging.getLogger(__name__)

# XRPL classic address: "r" followed by base58 (ripple alphabet has no 0, O, I, l)
WALLET_ADDRESS_PATTERN = re.compile(r"^r[1-9A-HJ-NP-Za-km-z]{24,34}$")


def is_valid_wallet_address(address: str) -> bool:
    """Check the shape of an XRPL classic address without contacting the network."""
    return bool(WALLET_ADDRESS_PATTERN.match(address.strip()))


class AuthFlow:
    """
    Login/logout controller bound to one credential store.

    `client_factory` builds an ApiClient from whatever the store currently
    holds, so a client created right after a speculative write carries the
    new credentials.
    """

    def __init__(self, store: CredentialStore, client_factory: Callable[[], ApiClient]):
        self.store = store
        self.client_factory = client_factory

    def login_with_api_key(self, api_key: str) -> Any:
        """
        Validate and store an API key.

        Returns:
            The current user document from the server

        Raises:
            ValidationError: If the key is empty
            AuthenticationError: If the server rejects the key; nothing is
                left stored in that case
        """
        api_key = api_key.strip()
        if not api_key:
            raise ValidationError("API key is required")

        self.store.set(API_KEY, api_key)

        validated = False
        try:
            client = self.client_factory()
            client.auth.validate_api_key()
            user = client.auth.get_current_user()
            validated = True
        except ApiError as e:
            logger.debug("API key validation failed: %s", e)
            raise AuthenticationError("Invalid API key", status_code=e.status_code) from e
        finally:
            # Interrupts and malformed responses must not leave the key behind either
            if not validated:
                self.store.delete(API_KEY)

        # An API key replaces any wallet session
        for key in (AUTH_TOKEN, WALLET_ADDRESS, TOKEN_EXPIRES_AT):
            self.store.delete(key)

        logger.info("Authenticated with API key")
        return user

    def request_challenge(self, wallet_address: str) -> AuthChallenge:
        """
        Ask the server for a challenge to sign.

        Raises:
            ValidationError: If the address is not an XRPL classic address
            ApiError: If the challenge request fails
        """
        wallet_address = wallet_address.strip()
        if not is_valid_wallet_address(wallet_address):
            raise ValidationError("Please enter a valid XRPL wallet address")

        response = self.client_factory().auth.generate_challenge(wallet_address)
        challenge = AuthChallenge.from_dict(response)
        logger.debug("Received challenge for %s (timestamp %s)", wallet_address, challenge.timestamp)
        return challenge

    def complete_wallet_login(self, wallet_address: str, challenge: AuthChallenge, signature: str) -> AuthResult:
        """
        Exchange a signed challenge for a session token and store it.

        The timestamp sent back is exactly the one issued with the challenge.

        Raises:
            ValidationError: If the signature is empty (no request is sent)
            AuthenticationError: If the server rejects the signature
        """
        signature = signature.strip()
        if not signature:
            raise ValidationError("Signature is required")

        wallet_address = wallet_address.strip()

        try:
            response = self.client_factory().auth.authenticate(
                wallet_address=wallet_address,
                signature=signature,
                timestamp=challenge.timestamp,
            )
            result = AuthResult.from_dict(response)
        except (ApiError, KeyError, TypeError) as e:
            logger.debug("Wallet authentication failed: %s", e)
            status_code = e.status_code if isinstance(e, ApiError) else None
            raise AuthenticationError(
                "Authentication failed. Please check your signature.", status_code=status_code
            ) from e

        self.store.delete(API_KEY)
        self.store.set(AUTH_TOKEN, result.token)
        self.store.set(WALLET_ADDRESS, wallet_address)
        if result.expires_at:
            self.store.set(TOKEN_EXPIRES_AT, result.expires_at)
        else:
            self.store.delete(TOKEN_EXPIRES_AT)

        logger.info("Authenticated wallet %s", wallet_address)
        return result

    def logout(self) -> None:
        """Forget every stored credential."""
        self.store.clear()

    def status(self) -> CredentialRecord:
        return self.store.record()

    def fetch_user(self) -> Any:
        """Current user document for the stored credentials."""
        return self.client_factory().auth.get_current_user()
