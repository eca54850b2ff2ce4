"""
Abstract base class for design code provisions.
Enables regional variants (different covers, steel grades, load factors)
as a configuration change rather than a rewrite.
"""

import math
from abc import ABC, abstractmethod
from typing import Dict


class DesignCode(ABC):
    """
    Abstract base class for structural design codes.

    Purpose:
    - Hold every process-wide constant used by the stages
    - Enable switching between code variants
    - Centralize code clause references
    """

    @property
    @abstractmethod
    def code_name(self) -> str:
        """Return the code name/version."""
        pass

    @abstractmethod
    def get_partial_safety_factors(self) -> Dict[str, float]:
        """Return partial safety factors for loads."""
        pass

    @abstractmethod
    def get_k_limit(self) -> float:
        """Return the K limit for singly reinforced sections."""
        pass

    @abstractmethod
    def get_minimum_steel_ratio(self) -> float:
        """Return minimum tension steel as a fraction of b·h."""
        pass

    @abstractmethod
    def get_maximum_shear_stress(self, fcu: float) -> float:
        """Return maximum nominal shear stress (N/mm²)."""
        pass

    def lever_arm(self, effective_depth: float, k: float) -> float:
        """Lever arm z for a singly reinforced section (mm)."""
        d = effective_depth
        return min(d * (0.5 + math.sqrt(0.25 - k / 0.9)), 0.95 * d)
