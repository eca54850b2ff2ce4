"""
BS 8110-1:1997 provisions for simplified residential RC design.

Key clauses implemented:
- Clause 2.4.3: Partial safety factors for loads (1.4 Gk + 1.6 Qk)
- Clause 3.4.4.4: Design formulae for rectangular beams (K, K', z)
- Clause 3.4.5.2: Maximum design shear stress (0.8 √fcu)
- Table 3.25: Minimum percentage of tension reinforcement (0.13%)
- Clause 3.8.4.3: Short braced axially loaded columns
"""

from typing import Any, Dict, Optional
import math

from .base_code import DesignCode


class BS8110(DesignCode):
    """
    BS 8110 with the constants used for preliminary residential sizing.

    Every constant is a named attribute so that a regional variant is built
    by passing overrides, e.g. ``BS8110(fy=500, cover=30)``.
    """

    # Material
    CONCRETE_DENSITY = 24.0   # kN/m³
    FY = 460.0                # MPa, high-yield bars
    COVER = 25.0              # mm, internal exposure
    FOOTING_COVER = 75.0      # mm, cast against ground
    FOOTING_COVER_SIMPLIFIED = 50.0  # mm, blinded formation

    # Superimposed dead loads
    SLAB_DL_UNIT = 4.0        # kN/m² of tributary width
    WALL_DL_UNIT = 2.6        # kN/m² of wall height (brick wall)

    # Load factors (Table 2.1)
    GAMMA_G = 1.4
    GAMMA_Q = 1.6

    # Flexure (Clause 3.4.4.4)
    K_LIMIT = 0.156
    K_LIMIT_CEILING = 0.225   # 0.9 × 0.25
    MIN_STEEL_RATIO = 0.0013

    # Shear (Clause 3.4.5)
    LINK_STRESS_THRESHOLD = 0.4   # N/mm²
    MAX_SHEAR_FACTOR = 0.8

    # Allowance from face of concrete to centroid of main bar beyond cover
    LINK_ALLOWANCE = 8.0      # mm, link diameter
    HALF_BAR_ALLOWANCE = 10.0 # mm, half main-bar diameter

    _OVERRIDABLE = {
        'concrete_density': 'CONCRETE_DENSITY',
        'fy': 'FY',
        'cover': 'COVER',
        'footing_cover': 'FOOTING_COVER',
        'footing_cover_simplified': 'FOOTING_COVER_SIMPLIFIED',
        'slab_dl_unit': 'SLAB_DL_UNIT',
        'wall_dl_unit': 'WALL_DL_UNIT',
        'gamma_g': 'GAMMA_G',
        'gamma_q': 'GAMMA_Q',
        'k_limit': 'K_LIMIT',
        'min_steel_ratio': 'MIN_STEEL_RATIO',
        'link_stress_threshold': 'LINK_STRESS_THRESHOLD',
        'max_shear_factor': 'MAX_SHEAR_FACTOR',
    }

    def __init__(self, **overrides: float):
        for key, value in overrides.items():
            if key not in self._OVERRIDABLE:
                raise KeyError(
                    f"Unknown design constant '{key}'. "
                    f"Valid: {sorted(self._OVERRIDABLE)}"
                )
            if value is None or value <= 0:
                raise ValueError(f"Design constant '{key}' must be positive, got {value!r}")
            # z = d[0.5 + √(0.25 − K/0.9)] is undefined beyond K = 0.225
            if key == 'k_limit' and value >= self.K_LIMIT_CEILING:
                raise ValueError(
                    f"Design constant 'k_limit' must be below {self.K_LIMIT_CEILING}, got {value!r}"
                )
            setattr(self, self._OVERRIDABLE[key], float(value))

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "BS8110":
        """Build a code variant from a ``code:`` mapping (None -> defaults)."""
        if not config:
            return cls()
        return cls(**{k: v for k, v in config.items() if v is not None})

    @property
    def code_name(self) -> str:
        return "BS 8110-1:1997"

    @property
    def effective_depth_allowance(self) -> float:
        """Cover plus link plus half bar, deducted from h to give d (mm)."""
        return self.COVER + self.LINK_ALLOWANCE + self.HALF_BAR_ALLOWANCE

    def get_partial_safety_factors(self) -> Dict[str, float]:
        """
        Partial safety factors for loads per Table 2.1.

        - Dead load: γG = 1.4
        - Imposed load: γQ = 1.6
        """
        return {
            'gamma_g': self.GAMMA_G,
            'gamma_q': self.GAMMA_Q,
        }

    def get_k_limit(self) -> float:
        """K' = 0.156 when redistribution does not exceed 10%."""
        return self.K_LIMIT

    def get_minimum_steel_ratio(self) -> float:
        return self.MIN_STEEL_RATIO

    def get_maximum_shear_stress(self, fcu: float) -> float:
        """Clause 3.4.5.2: v must not exceed 0.8 √fcu."""
        return self.MAX_SHEAR_FACTOR * math.sqrt(fcu)

    def as_dict(self) -> Dict[str, float]:
        """Current constants keyed by their config names."""
        return {key: getattr(self, attr) for key, attr in self._OVERRIDABLE.items()}
