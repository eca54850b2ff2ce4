"""Command-line interface tests."""
import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from loguru import logger

from beamsafe.cli import main


SAMPLE_INPUT = Path(__file__).parent.parent / "config" / "sample_input.yaml"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The run command enables logging; switch it back off after each test."""
    yield
    logger.remove()
    logger.disable("beamsafe")


class TestTemplateAndValidate:

    def test_template_round_trips_through_validate(self, runner, tmp_path):
        result = runner.invoke(main, ["template"])
        assert result.exit_code == 0
        path = tmp_path / "input.yaml"
        path.write_text(result.output, encoding="utf-8")

        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Input file is valid." in result.output

    def test_validate_rejects_bad_file(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("beam:\n  span: -4\n", encoding="utf-8")
        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_validate_rejects_yaml_syntax(self, runner, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("beam: [span: 4\n", encoding="utf-8")
        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1


class TestRun:

    def test_writes_results(self, runner, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, ["run", str(SAMPLE_INPUT), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "RESIDENTIAL RC DESIGN SUMMARY" in result.output

        data = json.loads((out / "results.json").read_text(encoding="utf-8"))
        assert data["project"]["name"] == "Terrace House T1"
        assert "generated_at" in data
        assert "computed_at" not in data["result"]
        assert data["code"]["fy"] == 460.0
        assert data["result"]["beam"]["section"]["status"] in ("SAFE", "UNSAFE")

        summary = (out / "summary.txt").read_text(encoding="utf-8")
        assert summary.startswith("BeamSafe Suite Report")
        assert (out / "image_prompt.txt").exists()
        assert not (out / "design_report.pdf").exists()

    def test_pdf_option(self, runner, tmp_path):
        result = runner.invoke(main, ["run", str(SAMPLE_INPUT), "-o", str(tmp_path), "--pdf"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "design_report.pdf").read_bytes().startswith(b"%PDF")

    def test_bad_code_override_exits(self, runner, tmp_path):
        path = tmp_path / "input.yaml"
        path.write_text("beam:\n  span: 4\ncode:\n  fy: 0\n", encoding="utf-8")
        result = runner.invoke(main, ["run", str(path), "-o", str(tmp_path)])
        assert result.exit_code == 1

    def test_k_limit_above_ceiling_exits(self, runner, tmp_path):
        path = tmp_path / "input.yaml"
        path.write_text("beam:\n  span: 4\ncode:\n  k_limit: 0.3\n", encoding="utf-8")
        result = runner.invoke(main, ["run", str(path), "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert not (tmp_path / "results.json").exists()

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["run", str(tmp_path / "absent.yaml")])
        assert result.exit_code != 0
