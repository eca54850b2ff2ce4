"""
Reinforcement tables and input defaults for residential RC sizing.
"""

# Main (bottom) bar selection: (exclusive upper bound on As in mm², callout).
# A value equal to a bound moves to the next row.
MAIN_BAR_TABLE = [
    (226, "2T12 Bottom"),
    (402, "2T16 Bottom"),
    (603, "3T16 Bottom"),
    (942, "3T20 Bottom"),
]
MAIN_BAR_MAX = "4T20 Bottom"

# Footing mesh selection: (inclusive upper bound on As in mm²/m, callout)
FOOTING_MESH_TABLE = [
    (452, "T12@250"),
    (565, "T12@200"),
    (804, "T16@250"),
    (1005, "T16@200"),
]
FOOTING_MESH_MAX = "T20@250"

# Fixed callouts
TOP_BAR = "2T12 (Hangers)"
NO_BAR = "None"
LINKS_HEAVY = "R8 @ 175mm"
LINKS_NOMINAL = "R6 @ 200mm"
LINKS_DEFAULT = "R6-250"

# Concrete grades with characteristic cube strength (fcu in MPa)
CONCRETE_GRADES = {
    "C20": 20,
    "C25": 25,
    "C30": 30,
    "C35": 35,
    "C40": 40,
}

# Defaults substituted for absent or non-numeric input fields
DEFAULT_INPUTS = {
    "fcu": 25.0,
    "tributary_width": 0.0,
    "wall_height": 0.0,
    "live_load": 1.5,
    "column_height": 3.0,
    "column_width": 200.0,
    "column_depth": 200.0,
    "soil_capacity": 150.0,
    "ground_beam_span": 3.0,
    "ground_beam_load": 10.0,
}

# Auto-sizing rules
BEAM_SPAN_DEPTH_RATIO = 14
BEAM_MIN_DEPTH = 300.0      # mm
BEAM_MIN_WIDTH = 150.0      # mm
BEAM_DEPTH_WIDTH_RATIO = 2.5
SIZE_INCREMENT = 25.0       # mm

GROUND_BEAM_SPAN_DEPTH_RATIO = 12
GROUND_BEAM_MIN_DEPTH = 300.0   # mm
GROUND_BEAM_MAX_DEPTH = 600.0   # mm
GROUND_BEAM_MIN_WIDTH = 200.0   # mm
GROUND_BEAM_COLUMN_WIDTH_RATIO = 0.8

FOOTING_MIN_THICKNESS = 300.0   # mm
FOOTING_STRIP_WIDTH = 1000.0    # mm, design strip
FOOTING_SIZE_STEPS_PER_M = 10    # side rounded up to 0.1 m
