"""Tests for the tagbind CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from tagbind.cli import app


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("TAGBIND_DEFAULT_LOCALE", "TAGBIND_FORMATTER", "TAGBIND_OPEN_DELIMITER", "TAGBIND_CLOSE_DELIMITER"):
        monkeypatch.delenv(key, raising=False)


class TestRenderCommand:
    """Test `tagbind render`."""

    def test_datetime(self, runner):
        result = runner.invoke(app, ["render", "OrderDate", "--type", "DateTime"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "{{ moment(orderDate).format('MM/DD/YYYY H:MM A') }}"

    def test_plain_with_pipe_and_parent(self, runner):
        result = runner.invoke(app, ["render", "Total", "--pipe", "currency", "--par", "invoice"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "invoice.total|currency"

    def test_locale(self, runner):
        result = runner.invoke(app, ["render", "OrderDate", "-t", "Date", "-l", "de-DE"])
        assert result.stdout.strip() == "{{ moment(orderDate).format('DD.MM.YYYY') }}"

    def test_moment_custom(self, runner):
        result = runner.invoke(app, ["render", "OrderDate", "-t", "Date", "--moment", "custom:YYYY"])
        assert result.stdout.strip() == "{{ moment(orderDate).format('YYYY') }}"

    def test_env_config(self, runner, monkeypatch):
        monkeypatch.setenv("TAGBIND_DEFAULT_LOCALE", "ja-JP")
        monkeypatch.setenv("TAGBIND_FORMATTER", "dayjs")
        result = runner.invoke(app, ["render", "Due", "-t", "Date"])
        assert result.stdout.strip() == "{{ dayjs(due).format('YYYY/MM/DD') }}"

    def test_locales_file(self, runner, tmp_path):
        path = tmp_path / "fi-FI.json"
        path.write_text(json.dumps({"short_date_pattern": "d.M.yyyy", "short_time_pattern": "H.mm"}))
        result = runner.invoke(
            app, ["render", "Due", "-t", "Date", "-l", "fi-FI", "--locales-file", str(path)]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "{{ moment(due).format('DD.MM.YYYY') }}"

    def test_missing_locales_file(self, runner, tmp_path):
        result = runner.invoke(
            app, ["render", "Due", "--locales-file", str(tmp_path / "missing.json")]
        )
        assert result.exit_code == 11


class TestFormatsCommand:
    """Test `tagbind formats`."""

    def test_formats(self, runner):
        result = runner.invoke(app, ["formats", "--locale", "de-DE"])
        assert result.exit_code == 0
        assert "DD.MM.YYYY HH:MM" in result.stdout

    def test_strict_unknown_locale(self, runner):
        result = runner.invoke(app, ["formats", "--locale", "xx-YY", "--strict"])
        assert result.exit_code == 10

    def test_fallback_unknown_locale(self, runner):
        result = runner.invoke(app, ["formats", "--locale", "xx-YY"])
        assert result.exit_code == 0
        assert "MM/DD/YYYY H:MM A" in result.stdout


class TestLocalesCommand:
    """Test `tagbind locales`."""

    def test_lists_builtins(self, runner):
        result = runner.invoke(app, ["locales"])
        assert result.exit_code == 0
        assert "en-US" in result.stdout
        assert "dd.MM.yyyy" in result.stdout

    def test_json_format(self, runner):
        result = runner.invoke(app, ["locales", "--format", "json"])
        assert result.exit_code == 0

        entries = json.loads(result.stdout)
        assert {"name": "de-DE", "short_date_pattern": "dd.MM.yyyy", "short_time_pattern": "HH:mm"} in entries
        assert [e["name"] for e in entries] == sorted(e["name"] for e in entries)

    def test_formats_invariant(self, runner):
        result = runner.invoke(app, ["formats", "--locale", "invariant", "--strict"])
        assert result.exit_code == 0
        assert "MM/DD/YYYY HH:MM" in result.stdout
