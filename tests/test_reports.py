"""Text summary, image prompt, schematic and PDF output tests."""
import pytest

from beamsafe import DesignInput, run_design
from beamsafe.reports.diagrams.cross_section import (
    generate_cross_section, generate_footing_plan, parse_bar_callout, parse_mesh_callout,
)
from beamsafe.reports.pdf_generator import PDFReportGenerator
from beamsafe.reports.summary import IDLE_TEXT, build_image_prompt, build_summary


@pytest.fixture(scope="module")
def idle_result():
    return run_design(DesignInput())


class TestSummary:

    def test_contains_every_callout(self, default_form_result):
        text = build_summary(default_form_result)
        assert text.startswith("BeamSafe Suite Report")
        assert "Primary Beam: 150x450mm" in text
        assert "Main: 3T16 Bottom" in text
        assert "Top: 2T12 (Hangers)" in text
        assert "Links: R8 @ 175mm" in text
        assert "Status: SAFE (77%)" in text
        assert "Footing: 0.8m sq x 300mm" in text
        assert "Reinforcement: T12@250" in text
        assert "Ground Beam: 200x350mm" in text

    def test_idle(self, idle_result):
        assert build_summary(idle_result) == IDLE_TEXT


class TestImagePrompt:

    def test_sections_numbered(self, default_form_result):
        prompt = build_image_prompt(default_form_result)
        assert "Section 1: Reinforced concrete beam 150x450mm" in prompt
        assert "Section 2: Foundation footing plan 0.8m x 0.8m" in prompt
        assert "Section 3: Ground beam 200x350mm" in prompt
        assert "T12@250" in prompt
        assert prompt.rstrip().endswith("Malaysian standard format.")

    def test_idle_prompt_empty(self, idle_result):
        assert build_image_prompt(idle_result) == ""


class TestDiagrams:

    def test_parse_callouts(self):
        assert parse_bar_callout("3T16 Bottom") == (3, 16)
        assert parse_bar_callout("2T12 (Hangers)") == (2, 12)
        assert parse_bar_callout("None") is None
        assert parse_mesh_callout("T12@250") == (12, 250)
        assert parse_mesh_callout("None") is None

    def test_cross_section_png(self):
        png = generate_cross_section(150, 450, 25, "3T16 Bottom", "2T12 (Hangers)",
                                     return_figure=False)
        assert png[:8] == b"\x89PNG\r\n\x1a\n"

    def test_redesign_section_png(self):
        png = generate_cross_section(100, 150, 25, "None", "2T12 (Hangers)",
                                     return_figure=False)
        assert png[:4] == b"\x89PNG"

    def test_footing_plan_figure(self):
        import matplotlib.pyplot as plt

        fig = generate_footing_plan(1.9, 200, "T16@250")
        assert fig.axes
        plt.close(fig)


class TestPDFReport:

    def test_full_report(self, default_form_inputs, default_form_result):
        pdf = PDFReportGenerator().generate_report(
            default_form_inputs, default_form_result,
            project_name="Terrace House", engineer_name="A. Engineer",
        )
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 1000

    def test_unsafe_report_without_diagrams(self):
        inputs = DesignInput(span=10, width=100, depth=150)
        result = run_design(inputs)
        pdf = PDFReportGenerator(include_diagrams=False).generate_report(inputs, result)
        assert pdf.startswith(b"%PDF")
