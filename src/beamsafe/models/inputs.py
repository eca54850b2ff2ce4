"""
Input data models for residential RC member sizing using Pydantic.
"""

import math
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ColumnCapacityMode(str, Enum):
    """Axial capacity formula used by the column stage."""
    SIMPLIFIED = "simplified"            # 0.35 fcu Ac + 0.67 fy Asc, 0.8% steel
    DESIGN_STRENGTH = "design_strength"  # 0.4 fcd Ac + 0.87 fyd Asc, 1% steel


class FootingCover(str, Enum):
    """Cover assumption for the footing effective depth."""
    FULL = "full"              # 75 mm, cast against ground
    SIMPLIFIED = "simplified"  # 50 mm, blinded formation


class MemberGeometry(BaseModel):
    """Rectangular member geometry."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0, description="Section width b in mm")
    depth: float = Field(..., gt=0, description="Overall depth h in mm")
    span: float = Field(..., gt=0, description="Span (or height) in m")


class LoadSet(BaseModel):
    """Tributary loading on the primary beam."""
    model_config = ConfigDict(frozen=True)

    tributary_width: float = Field(default=0.0, ge=0, description="Slab tributary width in m")
    wall_height: float = Field(default=0.0, ge=0, description="Wall height carried in m")
    live_load: float = Field(default=1.5, ge=0, description="Imposed floor load in kPa")


class MaterialProps(BaseModel):
    """Material properties; only fcu varies between designs."""
    model_config = ConfigDict(frozen=True)

    fcu: float = Field(..., gt=0, description="Characteristic cube strength in MPa")
    fy: float = Field(default=460.0, gt=0, description="Steel yield strength in MPa")
    cover: float = Field(default=25.0, ge=0, description="Nominal cover in mm")


def to_number(value: Any) -> Optional[float]:
    """Coerce a form value to a finite float, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


class DesignInput(BaseModel):
    """Raw design input record.

    Fields accept numbers or numeric strings as typed into a form. Anything
    missing or non-numeric becomes ``None`` and is replaced by the engine
    with the documented default (see ``utils.constants.DEFAULT_INPUTS``).
    """
    model_config = ConfigDict(frozen=True, use_enum_values=False)

    # Primary beam
    span: Optional[float] = Field(None, description="Beam span in m (required)")
    width: Optional[float] = Field(None, description="Beam width in mm (None/0 = auto)")
    depth: Optional[float] = Field(None, description="Beam depth in mm (None/0 = auto)")
    fcu: Optional[float] = Field(None, description="Concrete grade fcu in MPa")
    tributary_width: Optional[float] = Field(None, description="Slab tributary width in m")
    wall_height: Optional[float] = Field(None, description="Wall height on beam in m")
    live_load: Optional[float] = Field(None, description="Imposed load in kPa")

    # Column
    column_height: Optional[float] = Field(None, description="Column clear height in m")
    column_width: Optional[float] = Field(None, description="Column width in mm")
    column_depth: Optional[float] = Field(None, description="Column depth in mm")
    axial_load: Optional[float] = Field(
        None, description="Direct column axial load in kN (overrides beam reaction)"
    )
    column_capacity_mode: ColumnCapacityMode = ColumnCapacityMode.SIMPLIFIED

    # Footing
    soil_capacity: Optional[float] = Field(None, description="Allowable bearing in kPa")
    footing_cover: FootingCover = FootingCover.FULL

    # Ground beam
    ground_beam_span: Optional[float] = Field(None, description="Ground beam span in m")
    ground_beam_width: Optional[float] = Field(None, description="Ground beam width in mm")
    ground_beam_depth: Optional[float] = Field(None, description="Ground beam depth in mm")
    ground_beam_load: Optional[float] = Field(None, description="Ground beam load in kN/m")
    column_spacing: Optional[float] = Field(
        None, description="Column spacing in m (set to chain ground beam to column load)"
    )

    @field_validator(
        "span", "width", "depth", "fcu", "tributary_width", "wall_height",
        "live_load", "column_height", "column_width", "column_depth",
        "axial_load", "soil_capacity", "ground_beam_span", "ground_beam_width",
        "ground_beam_depth", "ground_beam_load", "column_spacing",
        mode="before",
    )
    @classmethod
    def coerce_numeric(cls, value: Any) -> Optional[float]:
        return to_number(value)

    @property
    def is_chained_ground_beam(self) -> bool:
        """Ground beam load is derived from the column when spacing is given."""
        return self.column_spacing is not None
