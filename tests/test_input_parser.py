"""YAML input parsing and validation tests."""
from pathlib import Path

import pytest
import yaml

from beamsafe.input_parser import (
    InputError, build_design_code, build_design_input, generate_template,
    parse_config, parse_input,
)
from beamsafe.models.inputs import ColumnCapacityMode, FootingCover


SAMPLE_INPUT = Path(__file__).parent.parent / "config" / "sample_input.yaml"


@pytest.fixture(scope="module")
def sample_config():
    return parse_input(SAMPLE_INPUT)


class TestParseInput:

    def test_sample_file(self, sample_config):
        assert sample_config["project"]["name"] == "Terrace House T1"
        assert sample_config["beam"]["span"] == 4.0
        assert isinstance(sample_config["beam"]["width"], float)
        assert sample_config["code"] == {}

    def test_defaults_filled(self):
        config = parse_config({"beam": {"span": 5}})
        assert config["beam"]["fcu"] == 25.0
        assert config["beam"]["width"] is None
        assert config["column"]["capacity_mode"] == "simplified"
        assert config["footing"]["soil_capacity"] == 150.0
        assert config["ground_beam"]["load"] == 10.0
        assert config["ground_beam"]["column_spacing"] is None

    def test_template_is_valid_input(self):
        config = parse_config(yaml.safe_load(generate_template()))
        assert config["beam"]["span"] == 5.0
        assert config["code"] == {"fy": 460.0, "cover": 25.0}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_input(tmp_path / "absent.yaml")

    def test_root_must_be_mapping(self):
        with pytest.raises(InputError, match="mapping"):
            parse_config(["beam"])


class TestValidationErrors:

    def test_missing_beam_section(self):
        with pytest.raises(InputError, match="Missing required section: beam"):
            parse_config({"footing": {"soil_capacity": 150}})

    def test_all_errors_collected(self):
        raw = {
            "beam": {"span": -4, "fcu": "C25"},
            "column": {"capacity_mode": "exact"},
            "footing": {"cover": "thick"},
            "roof": {},
        }
        with pytest.raises(InputError) as excinfo:
            parse_config(raw)
        message = str(excinfo.value)
        assert "5 error(s)" in message
        assert "beam.span: value -4.0 is out of range" in message
        assert "beam.fcu: expected float" in message
        assert "column.capacity_mode" in message
        assert "footing.cover" in message
        assert "Unknown section: roof" in message

    def test_unknown_field(self):
        with pytest.raises(InputError, match="beam.length: unknown field"):
            parse_config({"beam": {"span": 4, "length": 4}})

    def test_bool_is_not_a_number(self):
        with pytest.raises(InputError, match="beam.span"):
            parse_config({"beam": {"span": True}})

    def test_unknown_code_constant(self):
        with pytest.raises(InputError, match="code.gamma_x"):
            parse_config({"beam": {"span": 4}, "code": {"gamma_x": 1.5}})


class TestBuilders:

    def test_design_input(self, sample_config):
        inputs = build_design_input(sample_config)
        assert inputs.span == 4.0
        assert inputs.width == 150.0
        assert inputs.column_capacity_mode == ColumnCapacityMode.SIMPLIFIED
        assert inputs.footing_cover == FootingCover.FULL
        assert not inputs.is_chained_ground_beam

    def test_design_code_overrides(self):
        config = parse_config({"beam": {"span": 4}, "code": {"fy": 500, "footing_cover": 50}})
        code = build_design_code(config)
        assert code.FY == 500.0
        assert code.FOOTING_COVER == 50.0
        assert code.COVER == 25.0
