"""Shared fixtures for the design tests."""
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from beamsafe.codes.bs8110 import BS8110
from beamsafe.core.engine import DesignEngine
from beamsafe.models.inputs import DesignInput


SAMPLE_INPUT = Path(__file__).parent.parent / "config" / "sample_input.yaml"


@pytest.fixture(scope="module")
def code():
    return BS8110()


@pytest.fixture(scope="module")
def default_form_inputs():
    """Initial form values of the interactive app."""
    return DesignInput(
        span="4.0", width="150", depth="450", fcu="25",
        tributary_width="3.0", wall_height="3.0", live_load="1.5",
        column_height="3.0", soil_capacity="150",
        ground_beam_span="3.0", ground_beam_width="200",
        ground_beam_depth="350", ground_beam_load="10.0",
    )


@pytest.fixture(scope="module")
def default_form_result(default_form_inputs):
    """Run the design once and share results across all tests."""
    return DesignEngine().design(default_form_inputs)
