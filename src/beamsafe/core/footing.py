"""Square isolated pad footing under a single column.

Sizes the pad from the service axial load and the allowable bearing
pressure, checks the recomputed pressure, then designs the bottom mesh for
the cantilever moment at the column face on a 1 m strip.

Key references
--------------
* BS 8110 Cl. 3.11.2.2 -- Critical section for bending at the column face
* BS 8110 Cl. 3.4.4.4  -- Lever arm formula reused on the design strip
* BS 8110 Table 3.25   -- Minimum steel 0.13% b h
"""

from __future__ import annotations

import math
from typing import Optional

from loguru import logger

from beamsafe.codes.base_code import DesignCode
from beamsafe.codes.bs8110 import BS8110
from beamsafe.core.section import k_factor, tension_steel
from beamsafe.models.inputs import FootingCover
from beamsafe.models.outputs import DesignStatus, FootingResult
from beamsafe.utils.constants import (
    DEFAULT_INPUTS, FOOTING_MESH_MAX, FOOTING_MESH_TABLE, FOOTING_MIN_THICKNESS,
    FOOTING_SIZE_STEPS_PER_M, FOOTING_STRIP_WIDTH, NO_BAR,
)


def footing_side(required_area: float) -> float:
    """Square side in m, rounded up to the next 0.1 m.

    The product is rounded to 9 decimals before ``ceil`` so that binary
    noise (e.g. 0.7 * 10 = 7.000000000000001) does not add a step.
    """
    steps = math.ceil(round(math.sqrt(required_area) * FOOTING_SIZE_STEPS_PER_M, 9))
    return steps / FOOTING_SIZE_STEPS_PER_M


def footing_thickness(column_dimension: float) -> float:
    """Pad thickness in mm: half the larger column dimension, min 300 mm."""
    return max(FOOTING_MIN_THICKNESS, float(math.ceil(column_dimension / 2)))


def select_footing_mesh(as_per_metre: float) -> str:
    """Pick mesh from area per metre; a value on a bound stays on that row."""
    for upper, callout in FOOTING_MESH_TABLE:
        if as_per_metre <= upper:
            return callout
    return FOOTING_MESH_MAX


def footing_cover(mode: FootingCover, code: DesignCode) -> float:
    if mode == FootingCover.SIMPLIFIED:
        return code.FOOTING_COVER_SIMPLIFIED
    return code.FOOTING_COVER


def design_footing(
    axial_load: Optional[float],
    soil_capacity: Optional[float],
    fcu: float,
    column_dimension: float = DEFAULT_INPUTS["column_width"],
    cover_mode: FootingCover = FootingCover.FULL,
    code: Optional[DesignCode] = None,
) -> Optional[FootingResult]:
    """Size and reinforce a square pad footing.

    Parameters
    ----------
    axial_load : float or None
        Service column load in kN.
    soil_capacity : float or None
        Allowable bearing pressure in kPa.
    fcu : float
        Concrete cube strength in MPa.
    column_dimension : float
        Larger column dimension in mm.
    cover_mode : FootingCover
        75 mm (``FULL``) or 50 mm (``SIMPLIFIED``) cover.

    Returns
    -------
    FootingResult or None
        ``None`` when the load or the soil capacity is absent or non-positive,
        or when the cover leaves no effective depth.
    """
    code = code or BS8110()

    if axial_load is None or axial_load <= 0:
        logger.debug("Footing stage idle: axial load {}", axial_load)
        return None
    if soil_capacity is None or soil_capacity <= 0:
        logger.debug("Footing stage idle: soil capacity {}", soil_capacity)
        return None
    if fcu <= 0:
        logger.debug("Footing stage idle: fcu {}", fcu)
        return None

    # Plan size and bearing
    required_area = axial_load / soil_capacity
    side = footing_side(required_area)
    bearing_pressure = axial_load / side ** 2
    status = DesignStatus.SAFE if bearing_pressure <= soil_capacity else DesignStatus.UNSAFE

    # Thickness and cantilever moment at the column face
    thickness = footing_thickness(column_dimension)
    cover = footing_cover(cover_mode, code)
    d = thickness - cover
    if d <= 0:
        logger.debug("Footing stage idle: cover {} mm exceeds thickness {} mm", cover, thickness)
        return None
    ultimate_pressure = code.GAMMA_G * axial_load / side ** 2
    cantilever = max((side * 1000 - column_dimension) / 2, 0.0)
    moment = ultimate_pressure * cantilever ** 2 / (2 * 1e6)

    # Reinforcement on a 1 m strip
    b = FOOTING_STRIP_WIDTH
    K = k_factor(moment, b, d, fcu)
    if K <= code.get_k_limit():
        _, as_calc, as_min = tension_steel(moment, b, thickness, d, K, code)
        as_required = max(as_calc, as_min)
        mesh = select_footing_mesh(as_required)
        flexure_status = DesignStatus.SAFE
    else:
        logger.debug("Footing strip K = {:.4f} exceeds limit; thickness inadequate", K)
        as_required = 0.0
        mesh = NO_BAR
        flexure_status = DesignStatus.UNSAFE

    logger.debug(
        "Footing {:.1f} m square: q={:.1f} kPa ({}), M={:.2f} kNm/m, mesh {}",
        side, bearing_pressure, status.value, moment, mesh,
    )

    return FootingResult(
        axial_load=axial_load,
        soil_capacity=soil_capacity,
        required_area=required_area,
        side=side,
        bearing_pressure=bearing_pressure,
        status=status,
        thickness=thickness,
        cover=cover,
        effective_depth=d,
        ultimate_pressure=ultimate_pressure,
        cantilever=cantilever,
        moment=moment,
        k_factor=K,
        flexure_status=flexure_status,
        as_required=as_required,
        mesh=mesh,
    )
