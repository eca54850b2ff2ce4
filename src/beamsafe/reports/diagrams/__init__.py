from .cross_section import generate_cross_section, generate_footing_plan
