"""Ground beam design, standalone or chained to the column load.

Standalone: the UDL is the user's load intensity plus self-weight.
Chained: the column load is spread over the column spacing, plus
self-weight. Flexure, shear and bar selection are delegated unchanged to
:class:`~beamsafe.core.section.SectionDesigner`.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from beamsafe.codes.base_code import DesignCode
from beamsafe.codes.bs8110 import BS8110
from beamsafe.core.beam import simply_supported_actions
from beamsafe.core.section import SectionDesigner
from beamsafe.models.inputs import MemberGeometry
from beamsafe.models.outputs import GroundBeamDesignOutput
from beamsafe.utils.constants import (
    DEFAULT_INPUTS, GROUND_BEAM_COLUMN_WIDTH_RATIO, GROUND_BEAM_MAX_DEPTH,
    GROUND_BEAM_MIN_DEPTH, GROUND_BEAM_MIN_WIDTH, GROUND_BEAM_SPAN_DEPTH_RATIO,
)


def auto_ground_beam_depth(span: float) -> float:
    """span/12 clamped to 300-600 mm."""
    depth = span * 1000 / GROUND_BEAM_SPAN_DEPTH_RATIO
    return min(max(depth, GROUND_BEAM_MIN_DEPTH), GROUND_BEAM_MAX_DEPTH)


def auto_ground_beam_width(column_dimension: float) -> float:
    """0.8 x the larger column dimension, min 200 mm."""
    return max(GROUND_BEAM_MIN_WIDTH, GROUND_BEAM_COLUMN_WIDTH_RATIO * column_dimension)


def design_ground_beam(
    span: Optional[float],
    fcu: float,
    load: Optional[float] = None,
    width: Optional[float] = None,
    depth: Optional[float] = None,
    column_load: Optional[float] = None,
    column_spacing: Optional[float] = None,
    column_dimension: float = DEFAULT_INPUTS["column_width"],
    code: Optional[DesignCode] = None,
) -> Optional[GroundBeamDesignOutput]:
    """Design the ground beam.

    Parameters
    ----------
    span : float or None
        Span in m.
    fcu : float
        Concrete cube strength in MPa.
    load : float, optional
        User load intensity in kN/m (standalone variant).
    width, depth : float, optional
        Section size in mm; ``None`` or ``0`` triggers auto-sizing.
    column_load, column_spacing : float, optional
        When a spacing is given the applied load is ``column_load / spacing``.
    column_dimension : float
        Larger column dimension in mm, used for the auto width.

    Returns
    -------
    GroundBeamDesignOutput or None
        ``None`` when span, load or spacing is absent or non-positive.
    """
    code = code or BS8110()

    if span is None or span <= 0 or fcu <= 0:
        logger.debug("Ground beam stage idle: span={}, fcu={}", span, fcu)
        return None

    chained = column_spacing is not None
    if chained:
        if column_spacing <= 0 or column_load is None or column_load <= 0:
            logger.debug(
                "Ground beam stage idle: column load {} over spacing {}",
                column_load, column_spacing,
            )
            return None
        applied_load = column_load / column_spacing
    else:
        if load is None or load <= 0:
            logger.debug("Ground beam stage idle: load {}", load)
            return None
        applied_load = load

    auto = not width or not depth
    h = depth or auto_ground_beam_depth(span)
    b = width or auto_ground_beam_width(column_dimension)
    if b <= 0 or h <= 0:
        logger.debug("Ground beam stage idle: non-positive section {}x{}", b, h)
        return None
    geometry = MemberGeometry(width=b, depth=h, span=span)

    d = geometry.depth - code.effective_depth_allowance
    if d <= 0:
        logger.debug("Ground beam stage idle: depth {} leaves no effective depth", h)
        return None

    self_weight = (geometry.width / 1000) * (geometry.depth / 1000) * code.CONCRETE_DENSITY
    total_udl = applied_load + self_weight
    moment, reaction = simply_supported_actions(total_udl, geometry.span)
    logger.debug(
        "Ground beam {}x{} mm, L={} m ({}): w={:.2f} kN/m, M={:.2f} kNm",
        b, h, span, "chained" if chained else "standalone", total_udl, moment,
    )

    section = SectionDesigner(code).design(
        moment=moment,
        shear=reaction,
        width=geometry.width,
        depth=geometry.depth,
        effective_depth=d,
        fcu=fcu,
    )

    return GroundBeamDesignOutput(
        span=geometry.span,
        width=geometry.width,
        depth=geometry.depth,
        effective_depth=d,
        auto_sized=auto,
        chained=chained,
        applied_load=applied_load,
        self_weight=self_weight,
        total_udl=total_udl,
        moment=moment,
        reaction=reaction,
        section=section,
    )
