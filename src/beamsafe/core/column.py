"""Short braced column axial check per BS 8110 Cl. 3.8.4.3.

The column carries the primary beam reaction plus its own factored
self-weight, or an axial load supplied directly. Two capacity formulas are
available as named modes:

* ``SIMPLIFIED``      -- N = 0.35 fcu Ac + 0.67 fy Asc, Asc = 0.8% Ac
* ``DESIGN_STRENGTH`` -- N = 0.4 fcd Ac + 0.87 fyd Asc, Asc = 1% Ag,
  Ac = Ag - Asc, fcd = 0.67 fcu / 1.5, fyd = fy / 1.15
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from beamsafe.codes.base_code import DesignCode
from beamsafe.codes.bs8110 import BS8110
from beamsafe.models.inputs import ColumnCapacityMode
from beamsafe.models.outputs import ColumnCheckResult, DesignStatus
from beamsafe.utils.constants import DEFAULT_INPUTS


SIMPLIFIED_STEEL_RATIO = 0.008
DESIGN_STRENGTH_STEEL_RATIO = 0.01


def column_self_weight(
    width: float,
    depth: float,
    height: float,
    code: DesignCode,
) -> float:
    """Factored self-weight of the column shaft in kN."""
    return (width / 1000) * (depth / 1000) * height * code.CONCRETE_DENSITY * code.GAMMA_G


def column_capacity(
    width: float,
    depth: float,
    fcu: float,
    mode: ColumnCapacityMode = ColumnCapacityMode.SIMPLIFIED,
    code: Optional[DesignCode] = None,
) -> tuple[float, float, float]:
    """Axial capacity of the section.

    Returns
    -------
    tuple
        ``(capacity_kN, concrete_area_mm2, steel_area_mm2)``
    """
    code = code or BS8110()
    fy = code.FY
    gross = width * depth

    if mode == ColumnCapacityMode.DESIGN_STRENGTH:
        asc = DESIGN_STRENGTH_STEEL_RATIO * gross
        ac = gross - asc
        fcd = 0.67 * fcu / 1.5
        fyd = fy / 1.15
        capacity = (0.4 * fcd * ac + 0.87 * fyd * asc) / 1000
    else:
        ac = gross
        asc = SIMPLIFIED_STEEL_RATIO * ac
        capacity = (0.35 * fcu * ac + 0.67 * fy * asc) / 1000

    return capacity, ac, asc


def design_column(
    fcu: float,
    reaction: Optional[float] = None,
    height: float = DEFAULT_INPUTS["column_height"],
    width: float = DEFAULT_INPUTS["column_width"],
    depth: float = DEFAULT_INPUTS["column_depth"],
    axial_load: Optional[float] = None,
    mode: ColumnCapacityMode = ColumnCapacityMode.SIMPLIFIED,
    code: Optional[DesignCode] = None,
) -> Optional[ColumnCheckResult]:
    """Check a column against the beam reaction or a direct axial load.

    ``axial_load`` takes precedence over ``reaction`` + self-weight. With
    neither available, or a non-positive section, the stage is idle.
    """
    code = code or BS8110()

    if width <= 0 or depth <= 0 or fcu <= 0:
        logger.debug("Column stage idle: section {}x{}, fcu={}", width, depth, fcu)
        return None

    self_weight = column_self_weight(width, depth, max(height, 0.0), code)
    if axial_load is not None:
        if axial_load <= 0:
            logger.debug("Column stage idle: axial load {}", axial_load)
            return None
        load = axial_load
    elif reaction is not None:
        load = reaction + self_weight
    else:
        logger.debug("Column stage idle: no reaction or axial load")
        return None

    capacity, ac, asc = column_capacity(width, depth, fcu, mode, code)
    status = DesignStatus.SAFE if load < capacity else DesignStatus.UNSAFE
    logger.debug(
        "Column {}x{} ({}): N={:.2f} kN, capacity={:.2f} kN -> {}",
        width, depth, ColumnCapacityMode(mode).value, load, capacity, status.value,
    )

    return ColumnCheckResult(
        mode=ColumnCapacityMode(mode).value,
        width=width,
        depth=depth,
        height=height,
        gross_area=width * depth,
        concrete_area=ac,
        steel_area=asc,
        self_weight=self_weight,
        axial_load=load,
        capacity=capacity,
        status=status,
    )
