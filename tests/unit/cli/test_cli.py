"""Tests for the management CLI."""

import pytest
from typer.testing import CliRunner

from src.shop_admin.cli import app
from src.shop_admin.core.services import JwtService
from src.shop_admin.runtime.context import get_config

runner = CliRunner()


@pytest.fixture
def database_url(tmp_path) -> str:
    url = f"sqlite:///{tmp_path}/cli.db"
    result = runner.invoke(app, ["init-db", "--database-url", url])
    assert result.exit_code == 0, result.output
    return url


def _create_admin(database_url: str, username: str = "root", password: str = "correct-horse"):
    return runner.invoke(
        app,
        [
            "create-admin",
            username,
            "--email",
            f"{username}@example.com",
            "-p",
            password,
            "--database-url",
            database_url,
        ],
    )


class TestCli:
    def test_init_db_is_repeatable(self, database_url):
        result = runner.invoke(app, ["init-db", "--database-url", database_url])

        assert result.exit_code == 0
        assert "0 role(s) seeded" in result.output

    def test_create_admin(self, database_url):
        result = _create_admin(database_url)

        assert result.exit_code == 0, result.output
        assert "root" in result.output
        assert "ADMIN" in result.output

    def test_create_admin_twice_fails(self, database_url):
        _create_admin(database_url)

        result = _create_admin(database_url)

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_create_admin_rejects_short_password(self, database_url):
        result = _create_admin(database_url, password="short")

        assert result.exit_code == 1
        assert "Invalid administrator details" in result.output

    def test_issue_token_for_admin(self, database_url):
        _create_admin(database_url)

        result = runner.invoke(app, ["issue-token", "root", "--database-url", database_url])

        assert result.exit_code == 0, result.output
        token = result.stdout.strip().splitlines()[-1]
        principal = JwtService(get_config().jwt).verify(token)
        assert principal.username == "root"
        assert principal.is_admin

    def test_issue_token_for_unknown_user(self, database_url):
        result = runner.invoke(app, ["issue-token", "ghost", "--database-url", database_url])

        assert result.exit_code == 1
        assert "does not exist" in result.output
