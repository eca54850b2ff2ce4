# Core calculation engine
from .engine import DesignEngine, run_design
from .section import SectionDesigner, design_section
from .beam import design_beam
from .column import design_column
from .footing import design_footing
from .ground_beam import design_ground_beam
