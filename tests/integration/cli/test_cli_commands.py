"""
Integration tests for the makemeacube CLI.

Each test drives the Typer app through CliRunner against a fresh SQLite file:
1. Schema management (db init, db reset)
2. Basic and maker registration
3. Email verification
4. Domain errors reported in red with exit code 1
"""

import pytest
from typer.testing import CliRunner

from makemeacube.infrastructure.persistence.sqlalchemy import (
    get_engine,
    get_session_maker,
)
from makemeacube.presentation.cli.app import app, configure_logging
from makemeacube_config import clear_settings_cache

PASSWORD = "P@ssw0rd1"

runner = CliRunner()


def _clear_caches():
    clear_settings_cache()
    get_engine.cache_clear()
    get_session_maker.cache_clear()
    configure_logging.cache_clear()


@pytest.fixture
def cli_database(tmp_path, monkeypatch):
    """Point the CLI at an empty SQLite file with fast hashing and no SMTP."""
    database = tmp_path / "cli.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{database}")
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    monkeypatch.setenv("SMTP_ENABLED", "false")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    _clear_caches()

    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.output

    yield database

    _clear_caches()


def _register(email="alice@example.com", pseudo="alice"):
    return runner.invoke(
        app,
        [
            "users",
            "register",
            "--email",
            email,
            "--pseudo",
            pseudo,
            "--password",
            PASSWORD,
        ],
    )


class TestDbCommands:
    def test_init_creates_database_file(self, cli_database):
        assert cli_database.exists()

    def test_init_is_repeatable(self, cli_database):
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        assert "up to date" in result.output

    def test_reset_asks_for_confirmation(self, cli_database):
        assert _register().exit_code == 0

        result = runner.invoke(app, ["db", "reset"], input="n\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output
        # Data survived the aborted reset
        assert "DUPLICATE_EMAIL" in _register().output

    def test_reset_with_force_drops_data(self, cli_database):
        assert _register().exit_code == 0

        result = runner.invoke(app, ["db", "reset", "--force"])

        assert result.exit_code == 0
        assert "recreated" in result.output
        assert _register().exit_code == 0


class TestUsersRegister:
    def test_register_basic_user(self, cli_database):
        result = _register()

        assert result.exit_code == 0, result.output
        assert "User registered." in result.output
        assert "alice@example.com" in result.output
        assert "pending" in result.output

    def test_duplicate_email_exits_with_error(self, cli_database):
        assert _register().exit_code == 0

        result = _register(email="ALICE@example.com", pseudo="other")

        assert result.exit_code == 1
        assert "DUPLICATE_EMAIL" in result.output

    def test_invalid_email_exits_with_error(self, cli_database):
        result = _register(email="not-an-email")

        assert result.exit_code == 1
        assert "INVALID_EMAIL" in result.output

    def test_register_maker_with_address(self, cli_database):
        result = runner.invoke(
            app,
            [
                "users",
                "register-maker",
                "--email",
                "maker@example.com",
                "--pseudo",
                "maker",
                "--first-name",
                "Ada",
                "--last-name",
                "Lovelace",
                "--phone",
                "0601020304",
                "--description",
                "PLA and PETG prints",
                "--address",
                "1 rue de Rivoli",
                "--city",
                "Paris",
                "--country",
                "France",
                "--postal-code",
                "75001",
                "--password",
                PASSWORD,
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Maker registered." in result.output
        assert "Paris" in result.output


class TestUsersVerify:
    def test_verify_registered_user(self, cli_database):
        assert _register().exit_code == 0

        result = runner.invoke(app, ["users", "verify", "1"])

        assert result.exit_code == 0, result.output
        assert "User 1 is verified." in result.output

    def test_verify_unknown_user_exits_with_error(self, cli_database):
        result = runner.invoke(app, ["users", "verify", "999"])

        assert result.exit_code == 1
        assert "USER_NOT_FOUND" in result.output
        assert "not found" in result.output
