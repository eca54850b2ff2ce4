"""Primary beam design: simply supported floor beam carrying slab and wall.

Builds the factored UDL from self-weight, tributary slab load, wall load and
imposed load, derives midspan moment and end reaction, then hands the section
to :class:`~beamsafe.core.section.SectionDesigner`.

Sign conventions
----------------
* Spans in m, section dimensions in mm.
* Loads in kN/m, moments in kN.m, reactions in kN.
"""

from __future__ import annotations

import math
from typing import Optional

from loguru import logger

from beamsafe.codes.base_code import DesignCode
from beamsafe.codes.bs8110 import BS8110
from beamsafe.core.section import SectionDesigner
from beamsafe.models.inputs import LoadSet, MemberGeometry
from beamsafe.models.outputs import BeamDesignOutput
from beamsafe.utils.constants import (
    BEAM_DEPTH_WIDTH_RATIO, BEAM_MIN_DEPTH, BEAM_MIN_WIDTH,
    BEAM_SPAN_DEPTH_RATIO, SIZE_INCREMENT,
)


def round_up_to(value: float, step: float) -> float:
    """Round *value* up to the next multiple of *step*."""
    return math.ceil(value / step) * step


def auto_beam_depth(span: float) -> float:
    """Overall depth from span/14, rounded up to 25 mm, min 300 mm."""
    return max(BEAM_MIN_DEPTH, round_up_to(span * 1000 / BEAM_SPAN_DEPTH_RATIO, SIZE_INCREMENT))


def auto_beam_width(depth: float) -> float:
    """Width from depth/2.5, rounded up to 25 mm, min 150 mm."""
    return max(BEAM_MIN_WIDTH, round_up_to(depth / BEAM_DEPTH_WIDTH_RATIO, SIZE_INCREMENT))


def resolve_beam_geometry(
    span: float,
    width: Optional[float] = None,
    depth: Optional[float] = None,
) -> tuple[float, float, bool]:
    """Return ``(width, depth, auto_sized)``; None or 0 means derive it."""
    auto = not width or not depth
    h = depth or auto_beam_depth(span)
    b = width or auto_beam_width(h)
    return b, h, auto


def simply_supported_actions(udl: float, span: float) -> tuple[float, float]:
    """Midspan moment wL²/8 and end reaction wL/2."""
    return udl * span ** 2 / 8, udl * span / 2


def design_beam(
    span: Optional[float],
    fcu: float,
    width: Optional[float] = None,
    depth: Optional[float] = None,
    loads: Optional[LoadSet] = None,
    code: Optional[DesignCode] = None,
) -> Optional[BeamDesignOutput]:
    """Design the primary beam.

    Parameters
    ----------
    span : float or None
        Clear span in m. Missing or non-positive span gives no result.
    fcu : float
        Concrete cube strength in MPa.
    width, depth : float, optional
        Section size in mm; ``None`` or ``0`` triggers auto-sizing.
    loads : LoadSet, optional
        Tributary width, wall height and imposed load.
    code : DesignCode, optional
        Constants; defaults to :class:`BS8110`.

    Returns
    -------
    BeamDesignOutput or None
        ``None`` is the idle state, not a failure.
    """
    code = code or BS8110()
    loads = loads or LoadSet()

    if span is None or span <= 0 or fcu <= 0:
        logger.debug("Beam stage idle: span={}, fcu={}", span, fcu)
        return None

    b, h, auto = resolve_beam_geometry(span, width, depth)
    if b <= 0 or h <= 0:
        logger.debug("Beam stage idle: non-positive section {}x{}", b, h)
        return None
    geometry = MemberGeometry(width=b, depth=h, span=span)

    d = geometry.depth - code.effective_depth_allowance
    if d <= 0:
        logger.debug("Beam stage idle: depth {} leaves no effective depth", h)
        return None

    # Loads
    self_weight = (geometry.width / 1000) * (geometry.depth / 1000) * code.CONCRETE_DENSITY
    dead_load = (
        self_weight
        + code.SLAB_DL_UNIT * loads.tributary_width
        + code.WALL_DL_UNIT * loads.wall_height
    )
    live_load = loads.live_load * loads.tributary_width
    total_udl = code.GAMMA_G * dead_load + code.GAMMA_Q * live_load

    moment, reaction = simply_supported_actions(total_udl, geometry.span)
    logger.debug(
        "Beam {}x{} mm, L={} m: w={:.2f} kN/m, M={:.2f} kNm, V={:.2f} kN",
        b, h, span, total_udl, moment, reaction,
    )

    section = SectionDesigner(code).design(
        moment=moment,
        shear=reaction,
        width=geometry.width,
        depth=geometry.depth,
        effective_depth=d,
        fcu=fcu,
    )

    return BeamDesignOutput(
        span=geometry.span,
        width=geometry.width,
        depth=geometry.depth,
        effective_depth=d,
        auto_sized=auto,
        self_weight=self_weight,
        dead_load=dead_load,
        live_load=live_load,
        total_udl=total_udl,
        moment=moment,
        reaction=reaction,
        section=section,
    )
