"""Design code constants and overrides."""
import pytest

from beamsafe.codes.bs8110 import BS8110


class TestBS8110:

    def test_defaults(self, code):
        assert code.code_name == "BS 8110-1:1997"
        assert code.get_partial_safety_factors() == {'gamma_g': 1.4, 'gamma_q': 1.6}
        assert code.get_k_limit() == 0.156
        assert code.effective_depth_allowance == 43
        assert code.get_maximum_shear_stress(25) == pytest.approx(4.0)

    def test_lever_arm(self, code):
        assert code.lever_arm(400, 0.0) == pytest.approx(380)
        assert code.lever_arm(400, 0.156) == pytest.approx(400 * (0.5 + (0.25 - 0.156 / 0.9) ** 0.5))

    def test_override_does_not_leak(self):
        variant = BS8110(fy=500, cover=30)
        assert variant.FY == 500
        assert variant.effective_depth_allowance == 48
        assert BS8110().FY == 460

    def test_unknown_override(self):
        with pytest.raises(KeyError):
            BS8110(fyk=500)

    @pytest.mark.parametrize("value", [0, -1, None])
    def test_non_positive_override(self, value):
        with pytest.raises(ValueError):
            BS8110(fy=value)

    def test_from_config(self):
        assert BS8110.from_config(None).as_dict() == BS8110().as_dict()
        assert BS8110.from_config({"gamma_g": 1.35, "fy": None}).GAMMA_G == 1.35

    @pytest.mark.parametrize("value", [0.225, 0.3])
    def test_k_limit_beyond_lever_arm_range(self, value):
        with pytest.raises(ValueError):
            BS8110(k_limit=value)

    def test_raised_k_limit_below_ceiling(self):
        assert BS8110(k_limit=0.2).get_k_limit() == 0.2
