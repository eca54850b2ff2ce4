# Data models for residential RC member sizing
from .inputs import (
    DesignInput, MemberGeometry, LoadSet, MaterialProps,
    ColumnCapacityMode, FootingCover
)
from .outputs import (
    DesignResult, BeamDesignOutput, GroundBeamDesignOutput,
    SectionCheckResult, ColumnCheckResult, FootingResult,
    CalculationStep, DesignStatus
)
