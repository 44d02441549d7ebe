#!/usr/bin/env python3
"""
Unit tests for the auth command group.

Commands run through the root group with a pre-built CliContext whose
client factory returns a MagicMock API client.
"""

import json

import pytest
from click.testing import CliRunner

from tests.fixtures.api_responses import WALLET_ADDRESS
from xrplsale.cli.main import main
from xrplsale.core.errors import ApiError


@pytest.mark.unit
@pytest.mark.auth
class TestLoginCommand:
    """Test `xrplsale auth login`."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_login_with_api_key(self, session):
        result = self.runner.invoke(main, ["auth", "login", "--api-key", "xs_test_key"], obj=session)

        assert result.exit_code == 0
        assert "Successfully authenticated with API key" in result.output
        assert "tester@example.com" in result.output
        assert session.store.get("apiKey") == "xs_test_key"

    def test_login_ignores_global_api_key_override(self, session):
        """Login must validate the key it is storing, not the --api-key override."""
        self.runner.invoke(main, ["--api-key", "xs_global", "auth", "login", "--api-key", "xs_test_key"], obj=session)

        assert session.client_calls
        assert not any(session.client_calls)

    def test_invalid_api_key(self, session, api_client):
        api_client.auth.validate_api_key.side_effect = ApiError("Unauthorized", status_code=401)

        result = self.runner.invoke(main, ["auth", "login", "--api-key", "BADKEY"], obj=session)

        assert result.exit_code == 1
        assert "❌ Invalid API key" in result.stderr
        assert session.store.get("apiKey") is None

    def test_login_with_wallet(self, session, api_client):
        result = self.runner.invoke(
            main,
            ["auth", "login", "--wallet", WALLET_ADDRESS],
            obj=session,
            input="signed-hex\n",
        )

        assert result.exit_code == 0
        assert "xrplsale-login-8f3a2c" in result.output
        assert "Successfully authenticated with wallet!" in result.output
        api_client.auth.authenticate.assert_called_once_with(
            wallet_address=WALLET_ADDRESS,
            signature="signed-hex",
            timestamp=1730000000123,
        )
        assert session.store.get("authToken") == "jwt-token-abc"
        assert session.store.get("walletAddress") == WALLET_ADDRESS

    def test_wallet_login_with_invalid_address(self, session, api_client):
        result = self.runner.invoke(main, ["auth", "login", "--wallet", "bogus"], obj=session)

        assert result.exit_code == 1
        assert "valid XRPL wallet address" in result.stderr
        api_client.auth.generate_challenge.assert_not_called()

    def test_interactive_wallet_prompts_for_address(self, session):
        result = self.runner.invoke(
            main,
            ["auth", "login", "--interactive"],
            obj=session,
            input=f"not-an-address\n{WALLET_ADDRESS}\nsigned-hex\n",
        )

        assert result.exit_code == 0
        assert "Please enter a valid XRPL wallet address" in result.output
        assert session.store.get("walletAddress") == WALLET_ADDRESS

    def test_menu_api_key_choice(self, session):
        result = self.runner.invoke(main, ["auth", "login"], obj=session, input="1\nxs_menu_key\n")

        assert result.exit_code == 0
        assert "Choose authentication method" in result.output
        assert session.store.get("apiKey") == "xs_menu_key"

    def test_menu_wallet_choice(self, session):
        result = self.runner.invoke(
            main,
            ["auth", "login"],
            obj=session,
            input=f"2\n{WALLET_ADDRESS}\nsigned-hex\n",
        )

        assert result.exit_code == 0
        assert session.store.get("authToken") == "jwt-token-abc"

    def test_rejected_signature(self, session, api_client):
        api_client.auth.authenticate.side_effect = ApiError("Bad signature", status_code=401)

        result = self.runner.invoke(
            main,
            ["auth", "login", "--wallet", WALLET_ADDRESS],
            obj=session,
            input="wrong\n",
        )

        assert result.exit_code == 1
        assert "Authentication failed. Please check your signature." in result.stderr
        assert not session.store.record().is_authenticated


@pytest.mark.unit
@pytest.mark.auth
class TestStatusAndLogout:
    """Test `auth status` and `auth logout`."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_status_not_authenticated(self, session):
        result = self.runner.invoke(main, ["auth", "status"], obj=session)

        assert result.exit_code == 0
        assert "❌ Not authenticated" in result.output

    def test_status_json(self, session):
        result = self.runner.invoke(main, ["--json", "auth", "status"], obj=session)

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"authenticated": False, "authMethod": None, "walletAddress": None}

    def test_status_api_key_is_masked(self, authed_session):
        result = self.runner.invoke(main, ["auth", "whoami"], obj=authed_session)

        assert result.exit_code == 0
        assert "API Key" in result.output
        assert "xs_test_****************" in result.output
        assert "xs_test_1234567890abcdef" not in result.output

    def test_status_wallet_shows_user_details(self, wallet_session):
        result = self.runner.invoke(main, ["auth", "status"], obj=wallet_session)

        assert result.exit_code == 0
        assert WALLET_ADDRESS in result.output
        assert "gold" in result.output

    def test_status_wallet_survives_user_lookup_failure(self, wallet_session, api_client):
        api_client.auth.get_current_user.side_effect = ApiError("Expired", status_code=401)

        result = self.runner.invoke(main, ["auth", "status"], obj=wallet_session)

        assert result.exit_code == 0
        assert "Could not fetch user details" in result.output

    def test_logout_then_status(self, wallet_session):
        logout = self.runner.invoke(main, ["auth", "logout"], obj=wallet_session)
        status = self.runner.invoke(main, ["--json", "auth", "status"], obj=wallet_session)

        assert logout.exit_code == 0
        assert "Successfully logged out" in logout.output
        assert json.loads(status.stdout)["authenticated"] is False


@pytest.mark.unit
@pytest.mark.auth
class TestApiKeyManagement:
    """Test generate-key, list-keys and revoke-key."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_generate_key_requires_wallet(self, authed_session, api_client):
        result = self.runner.invoke(main, ["auth", "generate-key"], obj=authed_session)

        assert result.exit_code == 1
        assert "authenticated with a wallet" in result.stderr
        api_client.auth.generate_api_key.assert_not_called()

    def test_generate_key(self, wallet_session, api_client):
        result = self.runner.invoke(main, ["auth", "gen-key", "--name", "CI key"], obj=wallet_session)

        assert result.exit_code == 0
        assert "xs_live_abcdefghijklmnopqrstuvwxyz" in result.output
        assert "only time you will see the full key" in result.output
        api_client.auth.generate_api_key.assert_called_once_with("CI key")

    def test_generate_key_default_name(self, wallet_session, api_client):
        self.runner.invoke(main, ["auth", "generate-key"], obj=wallet_session)

        name = api_client.auth.generate_api_key.call_args.args[0]
        assert name.startswith("CLI Key - ")

    def test_list_keys(self, wallet_session):
        result = self.runner.invoke(main, ["auth", "keys"], obj=wallet_session)

        assert result.exit_code == 0
        assert "Your API Keys (2)" in result.output
        assert "Laptop" in result.output
        assert "Never" in result.output

    def test_list_keys_empty(self, wallet_session, api_client):
        api_client.auth.list_api_keys.return_value = {"data": []}

        result = self.runner.invoke(main, ["auth", "list-keys"], obj=wallet_session)

        assert "No API keys found" in result.output

    def test_revoke_key(self, wallet_session, api_client):
        result = self.runner.invoke(main, ["auth", "revoke-key", "key_1", "-y"], obj=wallet_session)

        assert result.exit_code == 0
        assert "API key key_1 revoked" in result.output
        api_client.auth.revoke_api_key.assert_called_once_with("key_1")

    def test_revoke_key_cancelled(self, wallet_session, api_client):
        result = self.runner.invoke(main, ["auth", "revoke-key", "key_1"], obj=wallet_session, input="n\n")

        assert "Revoke cancelled" in result.output
        api_client.auth.revoke_api_key.assert_not_called()
