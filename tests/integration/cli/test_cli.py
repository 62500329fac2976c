"""Tests for the bluevelvet command-line interface."""

from unittest.mock import patch

import pytest
from openpyxl import load_workbook
from typer.testing import CliRunner

from bluevelvet.presentation.cli.app import app
from bluevelvet_config import clear_settings_cache

runner = CliRunner()


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the CLI at a fresh SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    clear_settings_cache()
    yield url
    clear_settings_cache()


class TestSecrets:
    def test_generate_prints_jwt_secret(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY" in result.output


class TestDatabase:
    def test_init_and_seed(self, database):
        assert runner.invoke(app, ["db", "init"]).exit_code == 0

        result = runner.invoke(app, ["db", "seed"])

        assert result.exit_code == 0
        assert "Seeded 10 categories" in result.output

    def test_seed_twice_is_a_no_op(self, database):
        runner.invoke(app, ["db", "seed"])

        result = runner.invoke(app, ["db", "seed"])

        assert result.exit_code == 0
        assert "nothing seeded" in result.output

    def test_reset_requires_confirmation(self, database):
        runner.invoke(app, ["db", "seed"])

        aborted = runner.invoke(app, ["db", "reset"], input="n\n")
        assert aborted.exit_code != 0

        forced = runner.invoke(app, ["db", "reset", "--force"])
        assert forced.exit_code == 0

        # Empty again, so seeding inserts the full set
        assert "Seeded 10" in runner.invoke(app, ["db", "seed"]).output


class TestExport:
    def test_export_csv(self, database, tmp_path):
        runner.invoke(app, ["db", "seed"])
        target = tmp_path / "out.csv"

        result = runner.invoke(app, ["categories", "export", "--output", str(target)])

        assert result.exit_code == 0
        lines = target.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "ID,Name,Status,Parent Category"
        assert [line.split(",")[1] for line in lines[1:4]] == [
            "Blues",
            "Classical",
            "Country",
        ]
        assert len(lines) == 11

    def test_export_xlsx(self, database, tmp_path):
        runner.invoke(app, ["db", "seed"])
        target = tmp_path / "out.xlsx"

        result = runner.invoke(
            app,
            ["categories", "export", "--format", "xlsx", "-o", str(target)],
        )

        assert result.exit_code == 0
        sheet = load_workbook(target)["Categories"]
        assert sheet.max_row == 11


class TestServe:
    def test_serve_runs_app_factory(self, database):
        with patch("bluevelvet.presentation.cli.app.uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        args, kwargs = run.call_args
        assert args[0] == "bluevelvet.presentation.api.app:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9000
