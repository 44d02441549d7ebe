#!/usr/bin/env python3
"""
CLI Session Context

One CliContext is built per invocation by the root command and handed to
every subcommand through click's context object. It owns the resolved
configuration, the credential store and the global output flags, and
creates API clients on demand. Tests construct it directly with a fake
client factory.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import click

from ..api.client import ApiClient
from ..auth.flow import AuthFlow
from ..core.config import Config
from ..core.credentials import CredentialStore
from ..core.errors import ConfigurationError, NotAuthenticatedError


@dataclass
class CliContext:
    """Per-invocation state shared by all command handlers."""

    config: Config
    store: CredentialStore
    json_output: bool = False
    color: bool = True
    client_factory: Callable[["CliContext", bool], ApiClient] | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        config_file: str | None = None,
        environment: str | None = None,
        api_key: str | None = None,
        debug: bool | None = None,
    ) -> "CliContext":
        """Resolve configuration and open the credential store."""
        config = Config.from_environment(
            config_file=config_file,
            environment=environment,
            api_key=api_key,
            debug=debug,
        )
        errors = config.validate()
        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors))
        return cls(config=config, store=CredentialStore(config.config_file))

    @property
    def debug(self) -> bool:
        return self.config.debug

    def client(self, use_override: bool = True) -> ApiClient:
        """
        Build an API client from the current credentials.

        Args:
            use_override: Let a global --api-key take precedence over stored
                credentials. Login flows pass False so they always test the
                credentials they just stored.
        """
        if self.client_factory is not None:
            return self.client_factory(self, use_override)

        record = self.store.record()
        api_key = record.api_key
        if use_override and self.config.api.api_key:
            api_key = self.config.api.api_key

        return ApiClient(
            base_url=self.config.api.base_url,
            api_key=api_key,
            auth_token=record.auth_token,
            timeout=self.config.api.timeout,
        )

    def auth_flow(self) -> AuthFlow:
        return AuthFlow(self.store, lambda: self.client(use_override=False))

    def require_auth(self) -> None:
        """
        Fail fast when no credentials are available.

        Raises:
            NotAuthenticatedError: If neither a stored credential nor a
                global --api-key is present
        """
        if self.config.api.api_key:
            return
        if not self.store.record().is_authenticated:
            raise NotAuthenticatedError()

    def authed_client(self) -> ApiClient:
        self.require_auth()
        return self.client()


pass_session = click.make_pass_decorator(CliContext)
