"""Section kernel tests: K check, steel, bar and link selection."""
import pytest

from beamsafe.codes.bs8110 import BS8110
from beamsafe.core.section import (
    SectionDesigner, design_section, k_factor, round_half_up,
    select_main_bar, select_shear_links, tension_steel,
)
from beamsafe.models.outputs import DesignStatus


class TestKFactor:
    """Flexural adequacy boundary."""

    def test_k_formula(self):
        assert k_factor(39.0, 1000, 100, 25) == pytest.approx(0.156)

    def test_k_equal_to_limit_is_safe(self):
        result = design_section(39.0, 0.0, 1000, 150, 100, 25)
        assert result.k_factor == 0.156
        assert result.status == DesignStatus.SAFE
        assert result.utilization == 100
        assert result.main_bar != "None"

    def test_k_just_above_limit_is_unsafe(self):
        result = design_section(39.01, 0.0, 1000, 150, 100, 25)
        assert result.status == DesignStatus.UNSAFE
        assert result.requires_redesign

    def test_utilization_capped_and_bounded(self):
        for moment in (0.0, 5.0, 39.0, 200.0, 5000.0):
            result = design_section(moment, 10.0, 1000, 150, 100, 25)
            assert 0 <= result.utilization <= 100

    def test_half_up_rounding(self):
        assert round_half_up(76.5) == 77
        assert round_half_up(0.5) == 1
        assert round_half_up(76.49) == 76


class TestTensionSteel:
    """Lever arm and steel area shared by beams and footings."""

    def test_small_k_caps_lever_arm(self, code):
        z, as_calc, as_min = tension_steel(20.0, 200, 450, 400, 0.01, code)
        assert z == pytest.approx(0.95 * 400)
        assert as_calc == pytest.approx(20e6 / (0.95 * 460 * 380))
        assert as_min == pytest.approx(0.0013 * 200 * 450)

    def test_matches_section_design(self, code):
        result = design_section(39.0, 0.0, 1000, 150, 100, 25)
        z, as_calc, as_min = tension_steel(39.0, 1000, 150, 100, result.k_factor, code)
        assert result.lever_arm == pytest.approx(z)
        assert result.as_required == pytest.approx(max(as_calc, as_min))


class TestMainBarSelection:
    """Bar step table with strict upper bounds."""

    @pytest.mark.parametrize("area,expected", [
        (0, "2T12 Bottom"),
        (225.9, "2T12 Bottom"),
        (226, "2T16 Bottom"),
        (402, "3T16 Bottom"),
        (602.9, "3T16 Bottom"),
        (603, "3T20 Bottom"),
        (942, "4T20 Bottom"),
        (5000, "4T20 Bottom"),
    ])
    def test_bounds(self, area, expected):
        assert select_main_bar(area) == expected


class TestShear:
    """Link selection and the maximum shear stress override."""

    def test_link_threshold(self):
        assert select_shear_links(0.4) == "R6 @ 200mm"
        assert select_shear_links(0.41) == "R8 @ 175mm"

    def test_shear_override_after_flexure_passes(self):
        # v = 500e3 / (200 x 400) = 6.25 > 0.8 x sqrt(25) = 4.0
        result = design_section(10.0, 500.0, 200, 450, 400, 25)
        assert result.k_factor < result.k_limit
        assert result.status == DesignStatus.UNSAFE
        assert result.shear_stress == pytest.approx(6.25)
        assert result.max_shear_stress == pytest.approx(4.0)
        # Steel is still selected; only the verdict flips
        assert result.main_bar == "2T12 Bottom"
        assert result.shear_links == "R8 @ 175mm"

    def test_unsafe_flexure_uses_default_links(self):
        result = design_section(100.0, 500.0, 100, 150, 107, 25)
        assert result.status == DesignStatus.UNSAFE
        assert result.main_bar == "None"
        assert result.as_required == 0.0
        assert result.shear_links == "R6-250"
        assert result.top_bar == "2T12 (Hangers)"
        assert result.shear_stress is None


class TestMinimumSteel:

    def test_minimum_steel_governs_small_moment(self):
        result = design_section(1.0, 1.0, 200, 450, 407, 25)
        assert result.as_required == pytest.approx(0.0013 * 200 * 450)

    def test_lever_arm_capped(self):
        result = design_section(1.0, 1.0, 200, 450, 407, 25)
        assert result.lever_arm == pytest.approx(0.95 * 407)


class TestSectionDesigner:

    def test_invalid_section_raises(self):
        with pytest.raises(ValueError):
            SectionDesigner().design(10.0, 10.0, 0, 450, 407, 25)

    def test_code_override_changes_limit(self):
        designer = SectionDesigner(BS8110(k_limit=0.2))
        result = designer.design(45.0, 0.0, 1000, 150, 100, 25)
        assert result.k_limit == 0.2
        assert result.status == DesignStatus.SAFE

    def test_calculation_steps_recorded(self):
        result = design_section(74.376, 74.376, 150, 450, 407, 25)
        assert [s.step_number for s in result.calculation_steps] == [1, 2, 3, 4]
