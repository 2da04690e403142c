"""Tests for the userhub command-line interface."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from userhub.presentation.cli.app import app

runner = CliRunner()


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite file."""
    db_path = tmp_path / "cli.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    monkeypatch.setenv("JWT_SECRET_KEY", "cli-test-secret")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    return db_path


class TestDatabaseCommands:
    def test_migrate_creates_database(self, cli_env):
        result = runner.invoke(app, ["db", "migrate"])

        assert result.exit_code == 0, result.output
        assert "up to date" in result.output
        assert cli_env.exists()

    def test_migrate_is_idempotent(self, cli_env):
        runner.invoke(app, ["db", "migrate"])

        result = runner.invoke(app, ["db", "migrate"])

        assert result.exit_code == 0, result.output

    def test_seed_then_reseed(self, cli_env):
        first = runner.invoke(app, ["db", "seed"])
        second = runner.invoke(app, ["db", "seed"])

        assert first.exit_code == 0, first.output
        assert "admin@example.com" in first.output
        assert "user@example.com" in first.output
        assert second.exit_code == 0, second.output
        assert "Nothing to seed" in second.output

    def test_drop_aborts_without_confirmation(self, cli_env):
        runner.invoke(app, ["db", "migrate"])

        result = runner.invoke(app, ["db", "drop"], input="n\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output

    def test_drop_with_yes(self, cli_env):
        runner.invoke(app, ["db", "migrate"])

        result = runner.invoke(app, ["db", "drop", "--yes"])

        assert result.exit_code == 0, result.output
        assert "dropped" in result.output


class TestServeCommand:
    def test_serve_runs_app_factory(self, cli_env):
        with patch("userhub.presentation.cli.app.uvicorn.run") as run_mock:
            result = runner.invoke(app, ["serve", "--port", "9000"])

        assert result.exit_code == 0, result.output
        args, kwargs = run_mock.call_args
        assert args == ("userhub.presentation.api.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9000
        assert kwargs["host"] == "0.0.0.0"


class TestSecretsCommand:
    def test_generate_prints_both_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY" in result.output
        assert "POSTGRES_PASSWORD" in result.output
