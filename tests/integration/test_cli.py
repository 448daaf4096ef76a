"""Integration tests for the glyphpath command line."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from glyphpath import __version__
from glyphpath.cli.app import app
from glyphpath.fonts import FontResource


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCLI:
    """Tests for the Typer application."""

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_info(self, runner, ttf_path):
        result = runner.invoke(app, ["info", str(ttf_path)])
        assert result.exit_code == 0, result.output
        assert "TrueType" in result.stdout
        assert "Test Sans" in result.stdout
        assert "Ascender 800" in result.stdout

    def test_measure_table(self, runner, ttf_path):
        result = runner.invoke(app, ["measure", str(ttf_path), "AB", "--size", "16"])
        assert result.exit_code == 0, result.output
        assert "20.000" in result.stdout
        assert "emHeightAscent" in result.stdout

    def test_measure_json(self, runner, ttf_path):
        result = runner.invoke(app, ["measure", str(ttf_path), "AB", "-s", "16", "--json"])
        assert result.exit_code == 0, result.output

        data = json.loads(result.stdout)
        assert data["text"] == "AB"
        assert data["width"] == pytest.approx(20.0)
        assert data["emHeightAscent"] == pytest.approx(12.8)
        assert data["emHeightDescent"] == pytest.approx(-3.2)

    def test_render_writes_svg(self, runner, ttf_path, tmp_path):
        output = tmp_path / "out.svg"
        result = runner.invoke(app, ["-q", "render", str(ttf_path), "AO", "-o", str(output)])
        assert result.exit_code == 0, result.output

        svg = output.read_text(encoding="utf-8")
        assert svg.count("<path ") == 3

    def test_render_stroke(self, runner, ttf_path, tmp_path):
        output = tmp_path / "stroke.svg"
        result = runner.invoke(
            app, ["-q", "render", str(ttf_path), "A", "-o", str(output), "--stroke"]
        )
        assert result.exit_code == 0, result.output
        assert 'fill="none"' in output.read_text(encoding="utf-8")

    def test_render_default_output_name(self, runner, ttf_path, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["render", str(ttf_path), "O"])
        assert result.exit_code == 0, result.output
        assert "Complete" in result.stdout
        assert (tmp_path / "TestSans-Regular.svg").exists()

    def test_dry_run_writes_nothing(self, runner, ttf_path, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["-q", "render", str(ttf_path), "O", "--dry-run"])
        assert result.exit_code == 0, result.output
        assert "2 contours" in result.stdout
        assert not list(tmp_path.glob("*.svg"))

    def test_bad_alignment(self, runner, ttf_path):
        result = runner.invoke(app, ["render", str(ttf_path), "A", "--align", "justify"])
        assert result.exit_code == 1
        assert "Invalid alignment" in result.stdout

    def test_missing_font(self, runner, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.ttf")])
        assert result.exit_code == 1
        assert "Could not load font" in result.stdout

    def test_broken_font(self, runner, tmp_path):
        broken = tmp_path / "broken.ttf"
        broken.write_bytes(b"not a font")
        result = runner.invoke(app, ["measure", str(broken), "A"])
        assert result.exit_code == 1

    def test_info_when_font_stays_unloaded(self, runner, ttf_path):
        with patch.object(FontResource, "load_sync", return_value=None):
            result = runner.invoke(app, ["info", str(ttf_path)])
        assert result.exit_code == 1
        assert "Could not load font" in result.stdout
