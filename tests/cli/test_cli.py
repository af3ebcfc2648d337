"""Tests for the launchhub admin CLI."""

import pytest
from typer.testing import CliRunner

from launchhub_config import clear_settings_cache
from launchhub_identity.presentation.cli import app as cli_module
from launchhub_identity.presentation.cli.app import app

runner = CliRunner()

PASSWORD = "s3cure-password"


@pytest.fixture(autouse=True)
def sqlite_database(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite database."""
    monkeypatch.setenv("DATABASE_DSN", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    # Keep the root logger untouched by the CLI callback
    monkeypatch.setattr(cli_module, "configure_logging", lambda: None)
    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.output


def _create(email: str, role: str = "client"):
    return runner.invoke(
        app,
        ["users", "create", email, "--role", role],
        input=f"{PASSWORD}\n{PASSWORD}\n",
    )


class TestUsersCommands:
    def test_create_user(self):
        result = _create("alice@example.com", "freelancer")

        assert result.exit_code == 0, result.output
        assert "Created user" in result.output
        assert "alice@example.com" in result.output
        assert "freelancer" in result.output
        assert PASSWORD not in result.output

    def test_create_duplicate_fails(self):
        _create("alice@example.com")

        result = _create("ALICE@example.com")

        assert result.exit_code == 1
        assert "already registered" in result.output

    def test_create_weak_password_fails(self):
        result = runner.invoke(
            app,
            ["users", "create", "bob@example.com"],
            input="short\nshort\n",
        )

        assert result.exit_code == 1
        assert "at least 8 characters" in result.output

    def test_invalid_role_rejected(self):
        result = runner.invoke(
            app,
            ["users", "create", "bob@example.com", "--role", "owner"],
            input=f"{PASSWORD}\n{PASSWORD}\n",
        )

        assert result.exit_code != 0

    def test_list_users(self):
        _create("alice@example.com")
        _create("bob@example.com")

        result = runner.invoke(app, ["users", "list"])

        assert result.exit_code == 0, result.output
        assert "alice@example.com" in result.output
        assert "bob@example.com" in result.output

    def test_list_empty(self):
        result = runner.invoke(app, ["users", "list"])

        assert result.exit_code == 0
        assert "No users found" in result.output

    def test_set_email(self):
        _create("alice@example.com")

        result = runner.invoke(app, ["users", "set-email", "1", "Alice.New@Example.com"])

        assert result.exit_code == 0, result.output
        listed = runner.invoke(app, ["users", "list"])
        assert "alice.new@example.com" in listed.output

    def test_set_email_taken_fails(self):
        _create("alice@example.com")
        _create("bob@example.com")

        result = runner.invoke(app, ["users", "set-email", "2", "alice@example.com"])

        assert result.exit_code == 1
        assert "already registered" in result.output

    def test_deactivate_hides_from_active_list(self):
        _create("alice@example.com")

        result = runner.invoke(app, ["users", "deactivate", "1"])
        assert result.exit_code == 0, result.output
        assert "deactivated" in result.output

        listed = runner.invoke(app, ["users", "list", "--active-only"])
        assert "No users found" in listed.output

    def test_delete_user(self):
        _create("alice@example.com")

        result = runner.invoke(app, ["users", "delete", "1", "--yes"])

        assert result.exit_code == 0, result.output
        listed = runner.invoke(app, ["users", "list"])
        assert "No users found" in listed.output

    def test_delete_missing_user(self):
        result = runner.invoke(app, ["users", "delete", "42", "--yes"])

        assert result.exit_code == 1
        assert "User not found" in result.output

    def test_delete_requires_confirmation(self):
        _create("alice@example.com")

        result = runner.invoke(app, ["users", "delete", "1"], input="n\n")

        assert result.exit_code == 1
        listed = runner.invoke(app, ["users", "list"])
        assert "alice@example.com" in listed.output


class TestDbCommands:
    def test_drop_with_force(self):
        result = runner.invoke(app, ["db", "drop", "--force"])

        assert result.exit_code == 0, result.output
        assert "dropped" in result.output


class TestUnreachableDatabase:
    @pytest.fixture(autouse=True)
    def _unopenable_database(self, tmp_path, monkeypatch):
        # A directory where the database file should be cannot be opened
        target = tmp_path / "occupied"
        target.mkdir()
        monkeypatch.setenv("DATABASE_DSN", f"sqlite+aiosqlite:///{target}")
        clear_settings_cache()

    @pytest.mark.parametrize(
        "args",
        [["db", "init"], ["db", "drop", "--force"], ["users", "list"]],
    )
    def test_reports_error_without_traceback(self, args):
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Traceback" not in result.output
        assert isinstance(result.exception, SystemExit)
