"""
BeamSafe Residential RC Designer

Live sizing of a primary beam, column, pad footing and ground beam
per BS 8110 for residential frames.
"""

import streamlit as st
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from beamsafe.core.engine import DesignEngine
from beamsafe.models.inputs import ColumnCapacityMode, DesignInput, FootingCover
from beamsafe.models.outputs import DesignStatus
from beamsafe.reports.diagrams import generate_cross_section, generate_footing_plan
from beamsafe.reports.pdf_generator import PDFReportGenerator
from beamsafe.reports.summary import IDLE_TEXT, build_image_prompt, build_summary
from beamsafe.utils.constants import CONCRETE_GRADES

st.set_page_config(
    page_title="BeamSafe Residential RC Designer",
    page_icon="Building",
    layout="wide",
    initial_sidebar_state="expanded"
)


def init_state():
    """Initialize session state with the form defaults."""
    defaults = {
        'span': 4.0,
        'width': 150.0,
        'depth': 450.0,
        'fcu': 25,
        'tributary_width': 3.0,
        'wall_height': 3.0,
        'live_load': 1.5,
        'column_height': 3.0,
        'soil_capacity': 150.0,
        'ground_beam_span': 3.0,
        'ground_beam_width': 200.0,
        'ground_beam_depth': 350.0,
        'ground_beam_load': 10.0,
        'chain_ground_beam': False,
        'column_spacing': 4.0,
        'capacity_mode': ColumnCapacityMode.SIMPLIFIED.value,
        'footing_cover': FootingCover.FULL.value,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


def render_inputs():
    """Sidebar form. Every widget writes straight into session state."""
    st.sidebar.markdown("## Primary Beam")
    st.sidebar.number_input("Span (m)", 0.0, 15.0, step=0.25, key='span')
    col1, col2 = st.sidebar.columns(2)
    col1.number_input("Width (mm)", 0.0, 600.0, step=25.0, key='width',
                      help="0 = auto-size from span")
    col2.number_input("Depth (mm)", 0.0, 1200.0, step=25.0, key='depth',
                      help="0 = auto-size from span")
    st.sidebar.selectbox("Concrete grade fcu (MPa)", list(CONCRETE_GRADES.values()), key='fcu')
    st.sidebar.number_input("Slab tributary width (m)", 0.0, 10.0, step=0.5, key='tributary_width')
    st.sidebar.number_input("Wall height (m)", 0.0, 6.0, step=0.25, key='wall_height')
    st.sidebar.number_input("Live load (kPa)", 0.0, 10.0, step=0.5, key='live_load')

    st.sidebar.markdown("## Column & Footing")
    st.sidebar.number_input("Column height (m)", 0.0, 6.0, step=0.25, key='column_height')
    st.sidebar.number_input("Soil capacity (kPa)", 0.0, 600.0, step=25.0, key='soil_capacity')

    st.sidebar.markdown("## Ground Beam")
    st.sidebar.number_input("Span (m) ", 0.0, 10.0, step=0.25, key='ground_beam_span')
    col1, col2 = st.sidebar.columns(2)
    col1.number_input("Width (mm) ", 0.0, 600.0, step=25.0, key='ground_beam_width')
    col2.number_input("Depth (mm) ", 0.0, 1200.0, step=25.0, key='ground_beam_depth')
    st.sidebar.number_input("Wall load (kN/m)", 0.0, 100.0, step=1.0, key='ground_beam_load')

    with st.sidebar.expander("Advanced Options"):
        st.selectbox(
            "Column capacity formula",
            [m.value for m in ColumnCapacityMode],
            key='capacity_mode',
        )
        st.selectbox(
            "Footing cover",
            [c.value for c in FootingCover],
            key='footing_cover',
            help="full = 75 mm, simplified = 50 mm",
        )
        st.checkbox("Load ground beam from column", key='chain_ground_beam')
        st.number_input("Column spacing (m)", 0.5, 12.0, step=0.5, key='column_spacing',
                        disabled=not st.session_state.chain_ground_beam)


def build_inputs() -> DesignInput:
    s = st.session_state
    return DesignInput(
        span=s.span,
        width=s.width,
        depth=s.depth,
        fcu=s.fcu,
        tributary_width=s.tributary_width,
        wall_height=s.wall_height,
        live_load=s.live_load,
        column_height=s.column_height,
        soil_capacity=s.soil_capacity,
        ground_beam_span=s.ground_beam_span,
        ground_beam_width=s.ground_beam_width,
        ground_beam_depth=s.ground_beam_depth,
        ground_beam_load=s.ground_beam_load,
        column_spacing=s.column_spacing if s.chain_ground_beam else None,
        column_capacity_mode=ColumnCapacityMode(s.capacity_mode),
        footing_cover=FootingCover(s.footing_cover),
    )


def status_banner(label, status):
    if status == DesignStatus.SAFE:
        st.success(f"{label}: SAFE")
    else:
        st.error(f"{label}: UNSAFE")


def render_results(inputs, result):
    """Results panel."""
    if result.is_idle:
        st.info(IDLE_TEXT)
        return

    beam = result.beam
    col1, col2 = st.columns(2)
    with col1:
        status_banner("System Integrity", beam.status)
        st.caption(f"Utilization: {beam.section.utilization}%")
    with col2:
        if result.ground_beam is not None:
            status_banner("Ground Beam Status", result.ground_beam.status)
            st.caption(f"Utilization: {result.ground_beam.section.utilization}%")

    st.markdown("### Primary Beam")
    col1, col2, col3 = st.columns(3)
    col1.metric("Dimensions", f"{beam.width:.0f}×{beam.depth:.0f} mm")
    col1.metric("Total Moment", f"{beam.moment:.2f} kNm")
    col2.metric("Top Reinforcement", beam.section.top_bar)
    col2.metric("Bottom Reinforcement", beam.section.main_bar)
    col3.metric("Shear Links", beam.section.shear_links)
    col3.metric("K", f"{beam.section.k_factor:.3f} / {beam.section.k_limit}")

    column, footing = result.column, result.footing
    if column is not None:
        st.markdown("### Column & Footing")
        col1, col2, col3 = st.columns(3)
        col1.metric("Column Size", f"{column.width:.0f}×{column.depth:.0f} mm")
        col1.metric(
            "Column Status", column.status.value,
            delta=f"{column.axial_load:.1f} / {column.capacity:.1f} kN",
            delta_color="normal" if column.status == DesignStatus.SAFE else "inverse",
        )
        if footing is not None:
            col2.metric("Footing Size", f"{footing.side:.1f}m × {footing.side:.1f}m")
            col2.metric("Total Pressure", f"{footing.bearing_pressure:.1f} kPa")
            col3.metric("Footing Reinforcement", footing.mesh)
            col3.metric("Thickness", f"{footing.thickness:.0f} mm")
            if footing.flexure_status == DesignStatus.UNSAFE:
                st.warning("Footing thickness inadequate for bending; increase thickness.")

    gb = result.ground_beam
    if gb is not None:
        st.markdown("### Ground Beam")
        col1, col2, col3 = st.columns(3)
        col1.metric("Dimensions", f"{gb.width:.0f}×{gb.depth:.0f} mm")
        col1.metric("Moment", f"{gb.moment:.2f} kNm")
        col2.metric("Top Reinforcement", gb.section.top_bar)
        col2.metric("Bottom Reinforcement", gb.section.main_bar)
        col3.metric("Shear Links", gb.section.shear_links)
        col3.metric("UDL", f"{gb.total_udl:.2f} kN/m")

    tab1, tab2, tab3 = st.tabs(["Schematics", "Calculation Steps", "Report"])

    with tab1:
        col1, col2, col3 = st.columns(3)
        with col1:
            st.pyplot(generate_cross_section(
                beam.width, beam.depth, 25, beam.section.main_bar,
                beam.section.top_bar, title='Primary Beam'))
        if footing is not None and column is not None:
            with col2:
                st.pyplot(generate_footing_plan(
                    footing.side, max(column.width, column.depth), footing.mesh))
        if gb is not None:
            with col3:
                st.pyplot(generate_cross_section(
                    gb.width, gb.depth, 25, gb.section.main_bar,
                    gb.section.top_bar, title='Ground Beam'))

    with tab2:
        for step in beam.section.calculation_steps:
            st.markdown(
                f"**{step.step_number}. {step.description}**: "
                f"{step.formula} = {step.substitution} = **{step.result:g} {step.unit}**"
            )

    with tab3:
        st.code(build_summary(result), language=None)
        with st.expander("Blueprint image prompt"):
            st.code(build_image_prompt(result), language=None)
        pdf = PDFReportGenerator().generate_report(inputs, result)
        st.download_button(
            "Download PDF Report", pdf,
            file_name="beamsafe_report.pdf", mime="application/pdf",
            use_container_width=True,
        )

    if result.notes:
        st.markdown("### Notes")
        for note in result.notes:
            st.caption(note)


def main():
    init_state()

    st.markdown("# BeamSafe Residential RC Designer")
    st.markdown("*Beam → column → footing sizing to BS 8110 (Malaysian practice)*")
    st.markdown("---")

    render_inputs()
    inputs = build_inputs()
    result = DesignEngine().design(inputs)
    render_results(inputs, result)


if __name__ == "__main__":
    main()
