"""
Residential frame sizing orchestrator per BS 8110.

Coordinates the complete design workflow:
1. Input resolution (defaults for absent fields)
2. Primary beam (loads, statics, section design)
3. Column (beam reaction + self-weight, or direct axial load)
4. Pad footing (plan size, bearing, mesh)
5. Ground beam (standalone load or column load / spacing)
"""

from typing import List, Optional

from loguru import logger

from beamsafe.codes.base_code import DesignCode
from beamsafe.codes.bs8110 import BS8110
from beamsafe.core.beam import design_beam
from beamsafe.core.column import design_column
from beamsafe.core.footing import design_footing
from beamsafe.core.ground_beam import design_ground_beam
from beamsafe.models.inputs import DesignInput, FootingCover, LoadSet, MaterialProps
from beamsafe.models.outputs import DesignResult
from beamsafe.utils.constants import DEFAULT_INPUTS


class DesignEngine:
    """
    Main calculation engine for the beam -> column -> footing chain.

    Key features:
    - One stateless engine shared by every front-end (CLI, web app, API)
    - Idle stages are returned as ``None``, never raised
    - Constants come from the injected design code
    """

    def __init__(self, code: DesignCode = None):
        self.code = code or BS8110()

    def design(self, inputs: DesignInput) -> DesignResult:
        """
        Execute the complete design workflow.

        Args:
            inputs: DesignInput record (absent fields take defaults)

        Returns:
            DesignResult with one entry per stage, ``None`` where idle
        """
        notes: List[str] = []

        fcu = self._resolve(inputs, "fcu", positive=True)
        materials = MaterialProps(fcu=fcu, fy=self.code.FY, cover=self.code.COVER)
        loads = LoadSet(
            tributary_width=self._resolve(inputs, "tributary_width"),
            wall_height=self._resolve(inputs, "wall_height"),
            live_load=self._resolve(inputs, "live_load"),
        )
        col_h = self._resolve(inputs, "column_height")
        col_b = self._resolve(inputs, "column_width", positive=True)
        col_d = self._resolve(inputs, "column_depth", positive=True)
        col_max = max(col_b, col_d)

        # Beam
        beam = design_beam(
            span=inputs.span,
            fcu=fcu,
            width=inputs.width,
            depth=inputs.depth,
            loads=loads,
            code=self.code,
        )
        if beam is None:
            logger.info("No valid beam span; design is idle")
            return DesignResult(
                fcu=fcu,
                materials=materials,
                design_code=self.code.code_name,
            )
        if beam.auto_sized:
            notes.append(f"Beam auto-sized to {beam.width:.0f}x{beam.depth:.0f} mm")
        if beam.section.requires_redesign:
            notes.append("Beam requires compression reinforcement / redesign")

        # Column
        column = design_column(
            fcu=fcu,
            reaction=beam.reaction,
            height=col_h,
            width=col_b,
            depth=col_d,
            axial_load=inputs.axial_load,
            mode=inputs.column_capacity_mode,
            code=self.code,
        )
        if column is not None:
            notes.append(f"Column capacity mode: {column.mode}")
            if inputs.axial_load is not None:
                notes.append("Column axial load taken from input")

        # Footing
        soil = inputs.soil_capacity
        if soil is None:
            soil = DEFAULT_INPUTS["soil_capacity"]
        footing = design_footing(
            axial_load=column.axial_load if column is not None else None,
            soil_capacity=soil,
            fcu=fcu,
            column_dimension=col_max,
            cover_mode=inputs.footing_cover,
            code=self.code,
        )
        if footing is not None:
            cover_label = "full" if inputs.footing_cover == FootingCover.FULL else "simplified"
            notes.append(f"Footing cover {footing.cover:.0f} mm ({cover_label})")

        # Ground beam
        gb_load = inputs.ground_beam_load
        if gb_load is None:
            gb_load = DEFAULT_INPUTS["ground_beam_load"]
        gb_span = inputs.ground_beam_span
        if gb_span is None:
            gb_span = DEFAULT_INPUTS["ground_beam_span"]
        ground_beam = design_ground_beam(
            span=gb_span,
            fcu=fcu,
            load=gb_load,
            width=inputs.ground_beam_width,
            depth=inputs.ground_beam_depth,
            column_load=column.axial_load if column is not None else None,
            column_spacing=inputs.column_spacing,
            column_dimension=col_max,
            code=self.code,
        )
        if ground_beam is not None and ground_beam.chained:
            notes.append(
                f"Ground beam load from column: {ground_beam.applied_load:.2f} kN/m "
                f"over {inputs.column_spacing:.2f} m spacing"
            )

        result = DesignResult(
            beam=beam,
            column=column,
            footing=footing,
            ground_beam=ground_beam,
            fcu=fcu,
            materials=materials,
            design_code=self.code.code_name,
            notes=notes,
        )
        logger.info("Design complete: {}", result.overall_status.value)
        return result

    def _resolve(self, inputs: DesignInput, name: str, positive: bool = False) -> float:
        """Input value, or its default when absent or out of range."""
        value: Optional[float] = getattr(inputs, name)
        invalid = value is None or value < 0 or (positive and value == 0)
        if invalid:
            if value is not None:
                logger.debug("Ignoring {}={} and using default", name, value)
            return DEFAULT_INPUTS[name]
        return value


def run_design(inputs: DesignInput, code: Optional[DesignCode] = None) -> DesignResult:
    """Convenience wrapper around :meth:`DesignEngine.design`."""
    return DesignEngine(code).design(inputs)
