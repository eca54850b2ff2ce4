"""
PDF report generator using ReportLab.
"""

import io
from datetime import datetime
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import (
    Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle,
)

from beamsafe.models.inputs import DesignInput
from beamsafe.models.outputs import DesignResult, DesignStatus, SectionCheckResult
from beamsafe.reports.diagrams.cross_section import (
    generate_cross_section, generate_footing_plan,
)


STATUS_COLOURS = {
    DesignStatus.SAFE: '#27ae60',
    DesignStatus.UNSAFE: '#e74c3c',
    DesignStatus.IDLE: '#7f8c8d',
}


class PDFReportGenerator:
    """
    Generate PDF design reports using ReportLab.
    """

    def __init__(self, cover: float = 25.0, include_diagrams: bool = True):
        self.cover = cover
        self.include_diagrams = include_diagrams
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Set up custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            name='TitleStyle',
            parent=self.styles['Title'],
            fontSize=18,
            spaceAfter=30,
            textColor=colors.HexColor('#2c3e50')
        ))

        self.styles.add(ParagraphStyle(
            name='SectionHeader',
            parent=self.styles['Heading2'],
            fontSize=14,
            spaceBefore=20,
            spaceAfter=10,
            textColor=colors.HexColor('#34495e'),
            borderWidth=1,
            borderColor=colors.HexColor('#3498db'),
            borderPadding=5
        ))

        self.styles.add(ParagraphStyle(
            name='SubSection',
            parent=self.styles['Heading3'],
            fontSize=11,
            spaceBefore=10,
            spaceAfter=5,
            textColor=colors.HexColor('#7f8c8d')
        ))

    def generate_report(
        self,
        inputs: DesignInput,
        outputs: DesignResult,
        project_name: str = "Residential RC Design",
        engineer_name: Optional[str] = None,
    ) -> bytes:
        """
        Generate complete PDF report.

        Args:
            inputs: Design input record
            outputs: Design result from the engine
            project_name: Project name for report header
            engineer_name: Engineer name (optional)

        Returns:
            PDF file content as bytes
        """
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm
        )

        story = []
        story.extend(self._build_title_page(project_name, outputs, engineer_name))
        story.extend(self._build_input_summary(inputs, outputs))

        if outputs.beam is not None:
            story.extend(self._build_beam_section(outputs))
        if outputs.column is not None:
            story.extend(self._build_column_section(outputs))
        if outputs.footing is not None:
            story.extend(self._build_footing_section(outputs))
        if outputs.ground_beam is not None:
            story.extend(self._build_ground_beam_section(outputs))
        if self.include_diagrams and not outputs.is_idle:
            story.extend(self._build_diagrams(outputs))

        doc.build(story)

        buffer.seek(0)
        return buffer.getvalue()

    def _status_paragraph(self, label: str, status: DesignStatus) -> Paragraph:
        colour = STATUS_COLOURS[status]
        return Paragraph(
            f'<font color="{colour}"><b>{label}: {status.value}</b></font>',
            self.styles['Heading3']
        )

    def _build_title_page(self, project_name, outputs, engineer_name):
        """Build title page elements."""
        elements = []

        elements.append(Paragraph("RC FRAME SIZING REPORT", self.styles['TitleStyle']))
        elements.append(Paragraph(f"<b>{project_name}</b>", self.styles['Heading2']))
        elements.append(Spacer(1, 20))
        elements.append(self._status_paragraph("DESIGN STATUS", outputs.overall_status))
        elements.append(Spacer(1, 30))

        summary_data = [['Member', 'Result', 'Status']]
        if outputs.beam is not None:
            beam = outputs.beam
            summary_data.append([
                'Primary Beam',
                f'{beam.width:.0f} × {beam.depth:.0f} mm, {beam.section.main_bar}',
                beam.status.value,
            ])
        if outputs.column is not None:
            col = outputs.column
            summary_data.append([
                'Column',
                f'{col.width:.0f} × {col.depth:.0f} mm, N = {col.axial_load:.1f} kN',
                col.status.value,
            ])
        if outputs.footing is not None:
            ftg = outputs.footing
            summary_data.append([
                'Footing',
                f'{ftg.side:.1f} m sq × {ftg.thickness:.0f} mm, {ftg.mesh}',
                ftg.status.value,
            ])
        if outputs.ground_beam is not None:
            gb = outputs.ground_beam
            summary_data.append([
                'Ground Beam',
                f'{gb.width:.0f} × {gb.depth:.0f} mm, {gb.section.main_bar}',
                gb.status.value,
            ])

        elements.append(self._create_check_table(summary_data, col_widths=[3.5*cm, 9*cm, 2.5*cm]))
        elements.append(Spacer(1, 30))

        meta_data = [
            ['Report Date', datetime.now().strftime('%Y-%m-%d %H:%M')],
            ['Engineer', engineer_name or 'Not specified'],
            ['Design Code', outputs.design_code],
        ]
        meta_table = Table(meta_data, colWidths=[3*cm, 6*cm])
        meta_table.setStyle(TableStyle([
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ]))
        elements.append(meta_table)

        for note in outputs.notes:
            elements.append(Paragraph(f"• {note}", self.styles['BodyText']))

        elements.append(PageBreak())
        return elements

    def _build_input_summary(self, inputs, outputs):
        """Build input summary section."""
        elements = []
        elements.append(Paragraph("1. INPUT DATA", self.styles['SectionHeader']))

        def fmt(value, fmt_spec='.2f'):
            return 'default' if value is None else format(value, fmt_spec)

        data = [
            ['Parameter', 'Value', 'Unit'],
            ['Beam span', fmt(inputs.span), 'm'],
            ['Beam width', fmt(inputs.width, '.0f'), 'mm'],
            ['Beam depth', fmt(inputs.depth, '.0f'), 'mm'],
            ['Concrete fcu', f'{outputs.fcu:.0f}', 'MPa'],
            ['Tributary width', fmt(inputs.tributary_width), 'm'],
            ['Wall height', fmt(inputs.wall_height), 'm'],
            ['Live load', fmt(inputs.live_load), 'kPa'],
            ['Column height', fmt(inputs.column_height), 'm'],
            ['Soil capacity', fmt(inputs.soil_capacity, '.0f'), 'kPa'],
            ['Ground beam span', fmt(inputs.ground_beam_span), 'm'],
            ['Ground beam load', fmt(inputs.ground_beam_load), 'kN/m'],
        ]
        if outputs.materials is not None:
            data.append(['Steel fy', f'{outputs.materials.fy:.0f}', 'MPa'])
            data.append(['Nominal cover', f'{outputs.materials.cover:.0f}', 'mm'])
        elements.append(self._create_data_table(data))
        return elements

    def _section_rows(self, section: SectionCheckResult) -> List[list]:
        return [
            ['Parameter', 'Value', 'Unit'],
            ['Design moment (M)', f'{section.moment:.2f}', 'kNm'],
            ['Design shear (V)', f'{section.shear:.2f}', 'kN'],
            ['K factor', f'{section.k_factor:.4f}', '-'],
            ["K' limit", f'{section.k_limit:.3f}', '-'],
            ['Utilization', f'{section.utilization}', '%'],
            ['Required As', f'{section.as_required:.0f}', 'mm²'],
            ['Main bars', section.main_bar, '-'],
            ['Top bars', section.top_bar, '-'],
            ['Links', section.shear_links, '-'],
        ]

    def _steps_table(self, section: SectionCheckResult):
        data = [['#', 'Step', 'Formula', 'Result']]
        for step in section.calculation_steps:
            data.append([
                str(step.step_number),
                Paragraph(step.description, self.styles['BodyText']),
                Paragraph(step.formula, self.styles['BodyText']),
                f'{step.result:g} {step.unit}',
            ])
        table = Table(data, colWidths=[1*cm, 6*cm, 6*cm, 3*cm])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#34495e')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTSIZE', (0, 0), (-1, -1), 8),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.gray),
        ]))
        return table

    def _build_beam_section(self, outputs):
        """Build primary beam section."""
        elements = []
        beam = outputs.beam
        elements.append(Paragraph("2. PRIMARY BEAM", self.styles['SectionHeader']))

        elements.append(Paragraph("2.1 Loading", self.styles['SubSection']))
        load_data = [
            ['Load', 'Value', 'Unit'],
            ['Self weight', f'{beam.self_weight:.2f}', 'kN/m'],
            ['Dead load (Gk)', f'{beam.dead_load:.2f}', 'kN/m'],
            ['Live load (Qk)', f'{beam.live_load:.2f}', 'kN/m'],
            ['Ultimate UDL (1.4Gk + 1.6Qk)', f'{beam.total_udl:.2f}', 'kN/m'],
            ['Reaction', f'{beam.reaction:.2f}', 'kN'],
        ]
        elements.append(self._create_data_table(load_data))
        elements.append(Spacer(1, 10))

        elements.append(Paragraph("2.2 Section Design", self.styles['SubSection']))
        elements.append(self._create_data_table(self._section_rows(beam.section)))
        elements.append(Spacer(1, 10))
        elements.append(self._steps_table(beam.section))
        elements.append(self._status_paragraph("BEAM", beam.status))
        return elements

    def _build_column_section(self, outputs):
        """Build column section."""
        elements = []
        col = outputs.column
        elements.append(Paragraph("3. COLUMN", self.styles['SectionHeader']))
        data = [
            ['Parameter', 'Value', 'Unit'],
            ['Section', f'{col.width:.0f} × {col.depth:.0f}', 'mm'],
            ['Capacity mode', col.mode, '-'],
            ['Self weight (factored)', f'{col.self_weight:.2f}', 'kN'],
            ['Axial load', f'{col.axial_load:.2f}', 'kN'],
            ['Capacity', f'{col.capacity:.2f}', 'kN'],
            ['Utilization', f'{col.utilization * 100:.0f}', '%'],
            ['Steel area (Asc)', f'{col.steel_area:.0f}', 'mm²'],
        ]
        elements.append(self._create_data_table(data))
        elements.append(self._status_paragraph("COLUMN", col.status))
        return elements

    def _build_footing_section(self, outputs):
        """Build footing section."""
        elements = []
        ftg = outputs.footing
        elements.append(Paragraph("4. PAD FOOTING", self.styles['SectionHeader']))
        data = [
            ['Parameter', 'Value', 'Unit'],
            ['Required area', f'{ftg.required_area:.3f}', 'm²'],
            ['Side', f'{ftg.side:.1f}', 'm'],
            ['Bearing pressure', f'{ftg.bearing_pressure:.2f}', 'kPa'],
            ['Soil capacity', f'{ftg.soil_capacity:.0f}', 'kPa'],
            ['Thickness', f'{ftg.thickness:.0f}', 'mm'],
            ['Effective depth', f'{ftg.effective_depth:.0f}', 'mm'],
            ['Moment at column face', f'{ftg.moment:.2f}', 'kNm/m'],
            ['Required As', f'{ftg.as_required:.0f}', 'mm²/m'],
            ['Mesh', ftg.mesh, '-'],
        ]
        elements.append(self._create_data_table(data))
        elements.append(self._status_paragraph("BEARING", ftg.status))
        elements.append(self._status_paragraph("FOOTING FLEXURE", ftg.flexure_status))
        return elements

    def _build_ground_beam_section(self, outputs):
        """Build ground beam section."""
        elements = []
        gb = outputs.ground_beam
        elements.append(Paragraph("5. GROUND BEAM", self.styles['SectionHeader']))
        load_data = [
            ['Load', 'Value', 'Unit'],
            ['Applied load', f'{gb.applied_load:.2f}', 'kN/m'],
            ['Self weight', f'{gb.self_weight:.2f}', 'kN/m'],
            ['Total UDL', f'{gb.total_udl:.2f}', 'kN/m'],
        ]
        elements.append(self._create_data_table(load_data))
        elements.append(Spacer(1, 10))
        elements.append(self._create_data_table(self._section_rows(gb.section)))
        elements.append(self._status_paragraph("GROUND BEAM", gb.status))
        return elements

    def _build_diagrams(self, outputs):
        """Build schematic drawings."""
        elements = [PageBreak(), Paragraph("6. SCHEMATICS", self.styles['SectionHeader'])]

        if outputs.beam is not None:
            png = generate_cross_section(
                outputs.beam.width, outputs.beam.depth, self.cover,
                outputs.beam.section.main_bar, outputs.beam.section.top_bar,
                title='Primary Beam', return_figure=False,
            )
            elements.append(Image(io.BytesIO(png), width=6*cm, height=8*cm))
        if outputs.footing is not None and outputs.column is not None:
            png = generate_footing_plan(
                outputs.footing.side, max(outputs.column.width, outputs.column.depth),
                outputs.footing.mesh, return_figure=False,
            )
            elements.append(Image(io.BytesIO(png), width=8*cm, height=8*cm))
        if outputs.ground_beam is not None:
            png = generate_cross_section(
                outputs.ground_beam.width, outputs.ground_beam.depth, self.cover,
                outputs.ground_beam.section.main_bar, outputs.ground_beam.section.top_bar,
                title='Ground Beam', return_figure=False,
            )
            elements.append(Image(io.BytesIO(png), width=6*cm, height=8*cm))
        return elements

    def _create_data_table(self, data):
        """Create a formatted data table."""
        table = Table(data, colWidths=[6*cm, 5*cm, 2*cm])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3498db')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ALIGN', (1, 0), (-1, -1), 'CENTER'),
            ('ALIGN', (0, 0), (0, -1), 'LEFT'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.gray),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#f8f9fa')]),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
        ]))
        return table

    def _create_check_table(self, data, col_widths=None):
        """Create a status table with SAFE/UNSAFE colour coding in the last column."""
        table = Table(data, colWidths=col_widths or [8*cm, 3*cm])
        style = [
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#34495e')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('ALIGN', (-1, 0), (-1, -1), 'CENTER'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.gray),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
        ]

        for i, row in enumerate(data[1:], 1):
            if row[-1] == DesignStatus.SAFE.value:
                style.append(('TEXTCOLOR', (-1, i), (-1, i), colors.HexColor('#27ae60')))
                style.append(('FONTNAME', (-1, i), (-1, i), 'Helvetica-Bold'))
            elif row[-1] == DesignStatus.UNSAFE.value:
                style.append(('TEXTCOLOR', (-1, i), (-1, i), colors.HexColor('#e74c3c')))
                style.append(('FONTNAME', (-1, i), (-1, i), 'Helvetica-Bold'))

        table.setStyle(TableStyle(style))
        return table
