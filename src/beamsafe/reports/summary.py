"""
Plain-text renderings of a design result: the copyable report and the
prompt text handed to an image generator.
"""

from typing import List

from beamsafe.models.outputs import DesignResult


IDLE_TEXT = "No design computed - enter a positive beam span."


def build_summary(result: DesignResult) -> str:
    """Copyable multi-line report of every computed stage."""
    if result.is_idle:
        return IDLE_TEXT

    lines: List[str] = ["BeamSafe Suite Report"]

    beam = result.beam
    if beam is not None:
        lines += [
            f"Primary Beam: {beam.width:.0f}x{beam.depth:.0f}mm",
            f"Main: {beam.section.main_bar}",
            f"Top: {beam.section.top_bar}",
            f"Links: {beam.section.shear_links}",
            f"Status: {beam.status.value} ({beam.section.utilization}%)",
        ]

    column = result.column
    if column is not None:
        lines += [
            "",
            f"Column: {column.width:.0f}x{column.depth:.0f}mm",
            f"Axial: {column.axial_load:.1f} kN / {column.capacity:.1f} kN",
            f"Status: {column.status.value}",
        ]

    footing = result.footing
    if footing is not None:
        lines += [
            "",
            f"Footing: {footing.side:.1f}m sq x {footing.thickness:.0f}mm",
            f"Pressure: {footing.bearing_pressure:.1f} kPa",
            f"Reinforcement: {footing.mesh}",
            f"Status: {footing.status.value}",
        ]

    ground_beam = result.ground_beam
    if ground_beam is not None:
        lines += [
            "",
            f"Ground Beam: {ground_beam.width:.0f}x{ground_beam.depth:.0f}mm",
            f"Main: {ground_beam.section.main_bar}",
            f"Top: {ground_beam.section.top_bar}",
            f"Status: {ground_beam.status.value}",
        ]

    return "\n".join(lines)


def build_image_prompt(result: DesignResult) -> str:
    """Blueprint-style prompt describing the computed members.

    Only text is produced; sending it to an image service is left to the
    caller.
    """
    if result.is_idle:
        return ""

    parts = ["Highly detailed 2D structural engineering layout."]
    section_no = 1

    beam = result.beam
    if beam is not None:
        parts.append(
            f"Section {section_no}: Reinforced concrete beam {beam.width:.0f}x{beam.depth:.0f}mm "
            f"with {beam.section.top_bar} and {beam.section.main_bar}, "
            f"showing shear links {beam.section.shear_links}."
        )
        section_no += 1

    footing = result.footing
    if footing is not None:
        parts.append(
            f"Section {section_no}: Foundation footing plan {footing.side:.1f}m x {footing.side:.1f}m "
            f"with reinforcement mesh {footing.mesh}."
        )
        section_no += 1

    ground_beam = result.ground_beam
    if ground_beam is not None:
        parts.append(
            f"Section {section_no}: Ground beam {ground_beam.width:.0f}x{ground_beam.depth:.0f}mm "
            f"with {ground_beam.section.top_bar} and {ground_beam.section.main_bar}, "
            f"showing shear links {ground_beam.section.shear_links}."
        )

    parts.append(
        "Blueprint aesthetic, blueprint blue background, white technical lines, "
        "architectural symbols, Malaysian standard format."
    )
    return "\n".join(parts)
