"""Tests for the admin console CLI."""

from pathlib import Path
from unittest.mock import patch

import bcrypt
import httpx
import pytest
from click.testing import CliRunner

from newstime_console import cli
from newstime_console.client import NewsApiClient
from newstime_console.config import ConsoleConfig
from newstime_console.session import SessionGate
from newstime_console.storage import FileTokenStore


@pytest.fixture
def config(tmp_path: Path) -> ConsoleConfig:
    return ConsoleConfig(server_url="http://api.test", token_file=tmp_path / "token")


@pytest.fixture
def runner(config: ConsoleConfig):
    with patch("newstime_console.cli.get_config", return_value=config):
        yield CliRunner()


def _mock_build(handler):
    """Build the client and gate on top of a mock transport."""

    def build(config: ConsoleConfig):
        store = FileTokenStore(config.token_file)
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = NewsApiClient(config.server_url, store, http=http)
        return client, SessionGate(client, store)

    return build


def _server(request: httpx.Request) -> httpx.Response:
    """Minimal stand-in for the API."""
    path = request.url.path
    if path == "/api/auth/login":
        return httpx.Response(200, json={"success": True, "token": "tok", "expiresIn": 86400})
    if path == "/api/auth/verify":
        if request.headers.get("Authorization") == "Bearer tok":
            return httpx.Response(200, json={"valid": True})
        return httpx.Response(401, json={"valid": False})
    if path == "/api/posts/stats/overview":
        return httpx.Response(
            200,
            json={"totalPosts": 3, "totalViews": 42, "totalCategories": 2, "totalVideos": 1},
        )
    if path == "/api/live/end-live":
        return httpx.Response(200, json={"message": "Live stream ended"})
    return httpx.Response(404, json={"error": "Endpoint not found"})


class TestAuthCommands:
    """Tests for login, logout and status."""

    def test_login_stores_token(self, runner: CliRunner, config: ConsoleConfig):
        """Test a successful login writes the token file."""
        with patch.object(cli, "_build", _mock_build(_server)):
            result = runner.invoke(cli.main, ["login", "--password", "correct-horse"])

        assert result.exit_code == 0
        assert "Logged in." in result.output
        assert config.token_file.read_text() == "tok"

    def test_login_failure(self, runner: CliRunner, config: ConsoleConfig):
        """Test a rejected login exits non-zero with the server's message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "Invalid password"})

        with patch.object(cli, "_build", _mock_build(handler)):
            result = runner.invoke(cli.main, ["login", "--password", "wrong"])

        assert result.exit_code == 1
        assert "Login failed: Invalid password" in result.output
        assert not config.token_file.exists()

    def test_logout_removes_token(self, runner: CliRunner, config: ConsoleConfig):
        """Test logout deletes the token file."""
        config.token_file.write_text("tok")

        result = runner.invoke(cli.main, ["logout"])

        assert result.exit_code == 0
        assert not config.token_file.exists()

    def test_status_without_token(self, runner: CliRunner):
        """Test status reports signed out when no token is stored."""
        result = runner.invoke(cli.main, ["status"])

        assert result.exit_code == 0
        assert "Authenticated: no" in result.output

    def test_status_with_valid_token(self, runner: CliRunner, config: ConsoleConfig):
        """Test status verifies the stored token."""
        config.token_file.write_text("tok")

        with patch.object(cli, "_build", _mock_build(_server)):
            result = runner.invoke(cli.main, ["status"])

        assert result.exit_code == 0
        assert "Authenticated: yes" in result.output

    def test_status_with_rejected_token_clears_it(self, runner: CliRunner, config: ConsoleConfig):
        """Test a stale token is removed after the server rejects it."""
        config.token_file.write_text("stale")

        with patch.object(cli, "_build", _mock_build(_server)):
            result = runner.invoke(cli.main, ["status"])

        assert "Authenticated: no" in result.output
        assert not config.token_file.exists()


class TestAdminCommands:
    """Tests for commands that need a signed-in session."""

    def test_stats(self, runner: CliRunner, config: ConsoleConfig):
        """Test stats prints the dashboard counters."""
        config.token_file.write_text("tok")

        with patch.object(cli, "_build", _mock_build(_server)):
            result = runner.invoke(cli.main, ["stats"])

        assert result.exit_code == 0
        assert "Posts:      3" in result.output
        assert "Views:      42" in result.output

    def test_admin_command_requires_login(self, runner: CliRunner):
        """Test admin commands refuse to run without a session."""
        with patch.object(cli, "_build", _mock_build(_server)):
            result = runner.invoke(cli.main, ["end-live"])

        assert result.exit_code == 1
        assert "Not logged in" in result.output

    def test_end_live(self, runner: CliRunner, config: ConsoleConfig):
        """Test end-live prints the server's confirmation."""
        config.token_file.write_text("tok")

        with patch.object(cli, "_build", _mock_build(_server)):
            result = runner.invoke(cli.main, ["end-live"])

        assert result.exit_code == 0
        assert "Live stream ended" in result.output


class TestUtilityCommands:
    """Tests for configure and hash-password."""

    def test_hash_password(self, runner: CliRunner):
        """Test the printed hash verifies against the password."""
        result = runner.invoke(cli.main, ["hash-password", "--password", "s3cret"])

        assert result.exit_code == 0
        hashed = result.stdout.strip().splitlines()[0]
        assert bcrypt.checkpw(b"s3cret", hashed.encode("utf-8"))

    def test_configure(self, runner: CliRunner):
        """Test configure saves the server URL without a trailing slash."""
        with patch.object(ConsoleConfig, "save", autospec=True) as mock_save:
            result = runner.invoke(cli.main, ["configure", "--server", "https://api.example.com/"])

        assert result.exit_code == 0
        saved = mock_save.call_args.args[0]
        assert saved.server_url == "https://api.example.com"
