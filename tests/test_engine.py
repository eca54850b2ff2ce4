"""Pipeline engine tests: chaining, defaults and idle handling."""
import pytest

from beamsafe import DesignInput, DesignStatus, run_design
from beamsafe.codes.bs8110 import BS8110
from beamsafe.core.beam import design_beam
from beamsafe.core.column import design_column
from beamsafe.core.engine import DesignEngine
from beamsafe.core.footing import design_footing
from beamsafe.core.ground_beam import design_ground_beam
from beamsafe.models.inputs import ColumnCapacityMode, FootingCover, LoadSet, to_number


class TestInputCoercion:

    @pytest.mark.parametrize("raw,expected", [
        ("4.0", 4.0),
        (" 150 ", 150.0),
        (25, 25.0),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
        ("nan", None),
        ("inf", None),
    ])
    def test_to_number(self, raw, expected):
        assert to_number(raw) == expected

    def test_non_numeric_fields_become_absent(self):
        inputs = DesignInput(span="4", fcu="C25", live_load="")
        assert inputs.span == 4.0
        assert inputs.fcu is None
        assert inputs.live_load is None


class TestChainedPipeline:
    """Default form values of the interactive app."""

    def test_overall_status(self, default_form_result):
        assert default_form_result.overall_status == DesignStatus.SAFE
        assert not default_form_result.is_idle

    def test_beam(self, default_form_result):
        beam = default_form_result.beam
        assert beam.section.main_bar == "3T16 Bottom"
        assert beam.reaction == pytest.approx(74.376)

    def test_column_carries_reaction(self, default_form_result):
        column = default_form_result.column
        assert column.axial_load == pytest.approx(default_form_result.beam.reaction + 4.032)
        assert column.status == DesignStatus.SAFE

    def test_footing_carries_column_load(self, default_form_result):
        footing = default_form_result.footing
        assert footing.axial_load == default_form_result.column.axial_load
        assert footing.side == pytest.approx(0.8)
        assert footing.mesh == "T12@250"

    def test_ground_beam_standalone(self, default_form_result):
        gb = default_form_result.ground_beam
        assert not gb.chained
        assert gb.total_udl == pytest.approx(11.68)

    def test_matches_stagewise_calls(self, default_form_result):
        code = BS8110()
        loads = LoadSet(tributary_width=3.0, wall_height=3.0, live_load=1.5)
        beam = design_beam(4.0, 25.0, 150.0, 450.0, loads, code)
        column = design_column(25.0, reaction=beam.reaction, height=3.0, code=code)
        footing = design_footing(column.axial_load, 150.0, 25.0, 200.0, code=code)
        gb = design_ground_beam(3.0, 25.0, load=10.0, width=200.0, depth=350.0, code=code)

        assert default_form_result.beam == beam
        assert default_form_result.column == column
        assert default_form_result.footing == footing
        assert default_form_result.ground_beam == gb

    def test_chained_ground_beam(self, default_form_inputs):
        inputs = default_form_inputs.model_copy(update={"column_spacing": 4.0})
        result = run_design(inputs)
        assert result.ground_beam.chained
        assert result.ground_beam.applied_load == pytest.approx(result.column.axial_load / 4.0)
        assert any("spacing" in note for note in result.notes)


class TestDefaults:

    def test_span_only(self):
        result = run_design(DesignInput(span=4.0))
        assert result.fcu == 25
        beam = result.beam
        assert beam.auto_sized
        assert (beam.width, beam.depth) == (150, 300)
        # No slab or wall: self-weight only
        assert beam.total_udl == pytest.approx(1.4 * 0.15 * 0.3 * 24)
        assert result.footing.soil_capacity == 150
        assert result.ground_beam.span == 3.0

    def test_negative_optional_values_fall_back(self):
        result = run_design(DesignInput(span=4.0, fcu=-5, tributary_width=-1))
        assert result.fcu == 25
        assert result.beam.dead_load == pytest.approx(result.beam.self_weight)

    def test_explicit_nonpositive_soil_capacity_idles_footing(self):
        result = run_design(DesignInput(span=4.0, soil_capacity=0))
        assert result.footing is None
        assert result.column is not None

    def test_modes_forwarded(self):
        result = run_design(DesignInput(
            span=4.0,
            column_capacity_mode=ColumnCapacityMode.DESIGN_STRENGTH,
            footing_cover=FootingCover.SIMPLIFIED,
        ))
        assert result.column.mode == "design_strength"
        assert result.footing.cover == 50

    def test_direct_axial_load(self):
        result = run_design(DesignInput(span=4.0, axial_load=500))
        assert result.column.axial_load == 500
        assert result.column.status == DesignStatus.UNSAFE
        assert result.overall_status == DesignStatus.UNSAFE


class TestIdleAndFailure:

    @pytest.mark.parametrize("span", [None, "", "abc", 0, -3])
    def test_missing_span_is_idle(self, span):
        result = run_design(DesignInput(span=span))
        assert result.is_idle
        assert result.overall_status == DesignStatus.IDLE
        assert result.beam is None and result.ground_beam is None

    def test_tiny_section_reports_unsafe(self):
        result = run_design(DesignInput(span=10, width=100, depth=150))
        assert result.beam.status == DesignStatus.UNSAFE
        assert result.beam.section.main_bar == "None"
        assert result.overall_status == DesignStatus.UNSAFE
        assert any("redesign" in note for note in result.notes)

    def test_engine_uses_injected_code(self):
        result = DesignEngine(BS8110(fy=500)).design(DesignInput(span=4.0, width=150, depth=450))
        reference = run_design(DesignInput(span=4.0, width=150, depth=450))
        assert result.beam.section.lever_arm == pytest.approx(reference.beam.section.lever_arm)
        assert result.beam.section.as_required <= reference.beam.section.as_required
        assert result.materials.fy == 500
        assert reference.materials.cover == 25

    def test_repeat_runs_are_identical(self):
        inputs = DesignInput(span=4.0, tributary_width=3, wall_height=3)
        assert run_design(inputs) == run_design(inputs)
        assert run_design(DesignInput(span=None)) == run_design(DesignInput(span=None))

    def test_raised_k_limit_designs_without_error(self):
        code = BS8110(k_limit=0.2)
        result = DesignEngine(code).design(DesignInput(span=4.0, tributary_width=3, wall_height=3))
        assert result.beam.section.k_limit == 0.2
        assert result.beam.status == DesignStatus.UNSAFE
