"""
Rectangular section design per BS 8110-1:1997.

Implements the singly reinforced design shared by the primary beam and the
ground beam:
- K factor check against K' (balanced section)
- Lever arm and required tension steel, floored by minimum steel
- Main bar selection from a fixed step table
- Nominal shear stress, link selection and the 0.8 √fcu shear limit

Key clauses:
- BS 8110 Clause 3.4.4.4: Design formulae for rectangular beams
- BS 8110 Clause 3.4.5.2: Maximum design shear stress
- BS 8110 Table 3.25: Minimum tension reinforcement
"""

import math
from typing import List, Optional, Tuple

from loguru import logger

from beamsafe.codes.base_code import DesignCode
from beamsafe.codes.bs8110 import BS8110
from beamsafe.models.outputs import CalculationStep, DesignStatus, SectionCheckResult
from beamsafe.utils.constants import (
    LINKS_DEFAULT, LINKS_HEAVY, LINKS_NOMINAL, MAIN_BAR_MAX, MAIN_BAR_TABLE,
    NO_BAR, TOP_BAR,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def k_factor(moment: float, width: float, effective_depth: float, fcu: float) -> float:
    """K = M / (b d² fcu) with M in kNm and dimensions in mm."""
    return moment * 1e6 / (width * effective_depth ** 2 * fcu)


def tension_steel(
    moment: float,
    width: float,
    depth: float,
    effective_depth: float,
    K: float,
    code: DesignCode,
) -> Tuple[float, float, float]:
    """Lever arm, As = M / (0.95 fy z) and the minimum-steel floor.

    Returns ``(z, as_calc, as_min)`` with z in mm and areas in mm². Only
    valid for K ≤ K'.
    """
    z = code.lever_arm(effective_depth, K)
    as_calc = moment * 1e6 / (0.95 * code.FY * z)
    as_min = code.get_minimum_steel_ratio() * width * depth
    return z, as_calc, as_min


def select_main_bar(as_required: float) -> str:
    """Pick the cheapest bottom bar group whose bound exceeds As.

    Bounds are exclusive: As = 226 gives "2T16 Bottom", not "2T12 Bottom".
    """
    for upper, callout in MAIN_BAR_TABLE:
        if as_required < upper:
            return callout
    return MAIN_BAR_MAX


def select_shear_links(shear_stress: float, threshold: float = 0.4) -> str:
    """Closer links when nominal shear stress exceeds the threshold."""
    return LINKS_HEAVY if shear_stress > threshold else LINKS_NOMINAL


class SectionDesigner:
    """
    Singly reinforced rectangular section design per BS 8110.

    Stateless: every call depends only on its arguments and the code object.
    """

    def __init__(self, code: DesignCode = None):
        self.code = code or BS8110()

    def design(
        self,
        moment: float,           # Ultimate moment M (kNm)
        shear: float,            # Ultimate shear V (kN)
        width: float,            # Width b (mm)
        depth: float,            # Overall depth h (mm)
        effective_depth: float,  # Effective depth d (mm)
        fcu: float,              # Concrete cube strength (MPa)
    ) -> SectionCheckResult:
        """
        Check flexure then shear and select reinforcement.

        Args:
            moment: Ultimate bending moment in kNm
            shear: Ultimate shear force (support reaction) in kN
            width: Section width b in mm
            depth: Overall depth h in mm, used for minimum steel
            effective_depth: Effective depth d in mm
            fcu: Characteristic cube strength in MPa

        Returns:
            SectionCheckResult with verdict and bar callouts
        """
        if width <= 0 or effective_depth <= 0 or fcu <= 0:
            raise ValueError(
                f"Section needs positive b, d and fcu, got "
                f"b={width}, d={effective_depth}, fcu={fcu}"
            )

        steps: List[CalculationStep] = []
        b, h, d = width, depth, effective_depth
        k_limit = self.code.get_k_limit()

        # Step 1: K factor
        K = k_factor(moment, b, d, fcu)
        utilization = min(100, round_half_up(K / k_limit * 100))

        steps.append(CalculationStep(
            step_number=1,
            description="Moment capacity factor (K)",
            formula="K = M / (b × d² × fcu)",
            substitution=f"= {moment:.2f}×10⁶ / ({b:.0f} × {d:.0f}² × {fcu:.0f})",
            result=round(K, 4),
            unit="",
            code_reference="BS 8110 Cl. 3.4.4.4"
        ))

        status = DesignStatus.SAFE if K <= k_limit else DesignStatus.UNSAFE

        if status == DesignStatus.UNSAFE:
            logger.debug(
                "K = {:.4f} exceeds K' = {}: compression steel or redesign needed",
                K, k_limit,
            )
            steps.append(CalculationStep(
                step_number=2,
                description="K exceeds K' - requires compression reinforcement / redesign",
                formula="K ≤ K'",
                substitution=f"{K:.4f} > {k_limit}",
                result=round(K, 4),
                unit="",
                code_reference="BS 8110 Cl. 3.4.4.4"
            ))
            return SectionCheckResult(
                moment=moment,
                shear=shear,
                k_factor=K,
                k_limit=k_limit,
                status=status,
                utilization=utilization,
                as_required=0.0,
                lever_arm=None,
                main_bar=NO_BAR,
                top_bar=TOP_BAR,
                shear_links=LINKS_DEFAULT,
                calculation_steps=steps,
            )

        # Step 2: Lever arm
        z, as_calc, as_min = tension_steel(moment, b, h, d, K, self.code)
        steps.append(CalculationStep(
            step_number=2,
            description="Lever arm (z)",
            formula="z = d[0.5 + √(0.25 − K/0.9)] ≤ 0.95d",
            substitution=f"= {d:.0f} × [0.5 + √(0.25 − {K:.4f}/0.9)]",
            result=round(z, 1),
            unit="mm",
            code_reference="BS 8110 Cl. 3.4.4.4"
        ))

        # Step 3: Tension steel, floored by minimum steel
        as_required = max(as_calc, as_min)
        steps.append(CalculationStep(
            step_number=3,
            description="Tension reinforcement (As)",
            formula="As = M / (0.95 fy z) ≥ 0.0013 b h",
            substitution=f"= max({as_calc:.0f}, {as_min:.0f})",
            result=round(as_required, 0),
            unit="mm²",
            code_reference="BS 8110 Table 3.25"
        ))
        main_bar = select_main_bar(as_required)

        # Step 4: Shear, evaluated only after flexure has passed
        v = shear * 1000 / (b * d)
        v_max = self.code.get_maximum_shear_stress(fcu)
        shear_links = select_shear_links(v, self.code.LINK_STRESS_THRESHOLD)
        steps.append(CalculationStep(
            step_number=4,
            description="Nominal shear stress (v)",
            formula="v = V / (b × d) ≤ 0.8√fcu",
            substitution=f"= {shear:.2f}×10³ / ({b:.0f} × {d:.0f}), limit {v_max:.2f}",
            result=round(v, 3),
            unit="N/mm²",
            code_reference="BS 8110 Cl. 3.4.5.2"
        ))

        if v > v_max:
            logger.debug("Shear stress {:.3f} exceeds {:.3f}: section UNSAFE", v, v_max)
            status = DesignStatus.UNSAFE

        return SectionCheckResult(
            moment=moment,
            shear=shear,
            k_factor=K,
            k_limit=k_limit,
            status=status,
            utilization=utilization,
            as_required=as_required,
            lever_arm=z,
            main_bar=main_bar,
            top_bar=TOP_BAR,
            shear_links=shear_links,
            shear_stress=v,
            max_shear_stress=v_max,
            calculation_steps=steps,
        )


def design_section(
    moment: float,
    shear: float,
    width: float,
    depth: float,
    effective_depth: float,
    fcu: float,
    code: Optional[DesignCode] = None,
) -> SectionCheckResult:
    """Functional shortcut for :meth:`SectionDesigner.design`."""
    return SectionDesigner(code).design(moment, shear, width, depth, effective_depth, fcu)
