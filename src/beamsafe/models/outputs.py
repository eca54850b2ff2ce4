"""
Output data models for residential RC member sizing results.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .inputs import MaterialProps


class DesignStatus(str, Enum):
    """Verdict of a design check."""
    SAFE = "SAFE"
    UNSAFE = "UNSAFE"
    IDLE = "IDLE"


class CalculationStep(BaseModel):
    """Single calculation step for transparency."""
    model_config = ConfigDict(frozen=True)

    step_number: int
    description: str
    formula: str
    substitution: str
    result: float
    unit: str
    code_reference: Optional[str] = None


class SectionCheckResult(BaseModel):
    """Flexure and shear verdict for a rectangular beam section."""
    model_config = ConfigDict(frozen=True)

    moment: float  # Ultimate moment M (kNm)
    shear: float  # Ultimate shear / reaction V (kN)
    k_factor: float  # K = M / (b d² fcu)
    k_limit: float  # K' (0.156)
    status: DesignStatus
    utilization: int  # 0-100, capped

    # Reinforcement
    as_required: float  # mm²
    lever_arm: Optional[float] = None  # z (mm), None when flexure fails
    main_bar: str
    top_bar: str
    shear_links: str

    # Shear
    shear_stress: Optional[float] = None  # v (N/mm²)
    max_shear_stress: Optional[float] = None  # 0.8 √fcu (N/mm²)

    calculation_steps: List[CalculationStep] = Field(default_factory=list)

    @property
    def requires_redesign(self) -> bool:
        """K above K': compression steel or a larger section is needed."""
        return self.k_factor > self.k_limit


class BeamDesignOutput(BaseModel):
    """Primary beam design output."""
    model_config = ConfigDict(frozen=True)

    span: float  # m
    width: float  # mm
    depth: float  # mm
    effective_depth: float  # mm
    auto_sized: bool

    # Loads (kN/m)
    self_weight: float
    dead_load: float
    live_load: float
    total_udl: float  # 1.4 Gk + 1.6 Qk

    moment: float  # kNm
    reaction: float  # kN, each support

    section: SectionCheckResult

    @property
    def status(self) -> DesignStatus:
        return self.section.status


class ColumnCheckResult(BaseModel):
    """Short braced column axial check."""
    model_config = ConfigDict(frozen=True)

    mode: str
    width: float  # mm
    depth: float  # mm
    height: float  # m
    gross_area: float  # mm²
    concrete_area: float  # mm²
    steel_area: float  # mm²
    self_weight: float  # kN, factored
    axial_load: float  # kN
    capacity: float  # kN
    status: DesignStatus

    @property
    def utilization(self) -> float:
        return self.axial_load / self.capacity if self.capacity > 0 else 0.0


class FootingResult(BaseModel):
    """Square pad footing sizing and reinforcement."""
    model_config = ConfigDict(frozen=True)

    axial_load: float  # kN
    soil_capacity: float  # kPa
    required_area: float  # m²
    side: float  # m
    bearing_pressure: float  # kPa
    status: DesignStatus  # bearing verdict

    thickness: float  # mm
    cover: float  # mm
    effective_depth: float  # mm
    ultimate_pressure: float  # kPa
    cantilever: float  # mm
    moment: float  # kNm per metre width
    k_factor: float
    flexure_status: DesignStatus
    as_required: float  # mm²/m
    mesh: str


class GroundBeamDesignOutput(BaseModel):
    """Ground beam design output."""
    model_config = ConfigDict(frozen=True)

    span: float  # m
    width: float  # mm
    depth: float  # mm
    effective_depth: float  # mm
    auto_sized: bool
    chained: bool  # load derived from the column

    applied_load: float  # kN/m, user load or column load / spacing
    self_weight: float  # kN/m
    total_udl: float  # kN/m

    moment: float  # kNm
    reaction: float  # kN

    section: SectionCheckResult

    @property
    def status(self) -> DesignStatus:
        return self.section.status


class DesignResult(BaseModel):
    """Complete pipeline output. Absent stages are idle, not failures."""
    model_config = ConfigDict(frozen=True)

    beam: Optional[BeamDesignOutput] = None
    column: Optional[ColumnCheckResult] = None
    footing: Optional[FootingResult] = None
    ground_beam: Optional[GroundBeamDesignOutput] = None

    fcu: float
    materials: Optional[MaterialProps] = None
    design_code: str
    notes: List[str] = Field(default_factory=list)

    @property
    def is_idle(self) -> bool:
        return all(
            stage is None
            for stage in (self.beam, self.column, self.footing, self.ground_beam)
        )

    @property
    def overall_status(self) -> DesignStatus:
        """UNSAFE if any computed verdict fails, IDLE if nothing was computed."""
        if self.is_idle:
            return DesignStatus.IDLE
        verdicts = [
            stage.status
            for stage in (self.beam, self.column, self.footing, self.ground_beam)
            if stage is not None
        ]
        if self.footing is not None:
            verdicts.append(self.footing.flexure_status)
        if DesignStatus.UNSAFE in verdicts:
            return DesignStatus.UNSAFE
        return DesignStatus.SAFE
