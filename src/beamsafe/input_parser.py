"""Parse and validate YAML input for residential RC member sizing.

Reads a project YAML file, checks every section against the schema below,
applies defaults for optional fields and converts the result into a
:class:`~beamsafe.models.inputs.DesignInput` plus a design code variant.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from beamsafe.codes.bs8110 import BS8110
from beamsafe.models.inputs import ColumnCapacityMode, DesignInput, FootingCover


# ---------------------------------------------------------------------------
# Schema definitions
# ---------------------------------------------------------------------------
# Each leaf entry is a tuple:
#   (type, required, default, validator_or_None)
# A validator is a callable (value) -> bool; True means OK.

_VALID_CAPACITY_MODES = {mode.value for mode in ColumnCapacityMode}
_VALID_FOOTING_COVERS = {cover.value for cover in FootingCover}

_positive = lambda v: v > 0  # noqa: E731
_non_negative = lambda v: v >= 0  # noqa: E731


def _in_set(valid: set[str]):
    """Return a validator that checks membership in *valid*."""
    return lambda v: v in valid


# ``None`` as default on an optional field means "let the engine decide"
# (documented default or auto-sizing).
SCHEMA: dict[str, dict[str, tuple]] = {
    "project": {
        "name":     (str,   False, "Residential RC Design", None),
        "engineer": (str,   False, "",    None),
        "date":     (str,   False, "",    None),
    },
    "beam": {
        "span":            (float, True,  None, _positive),
        "width":           (float, False, None, _non_negative),
        "depth":           (float, False, None, _non_negative),
        "fcu":             (float, False, 25.0, _positive),
        "tributary_width": (float, False, 0.0,  _non_negative),
        "wall_height":     (float, False, 0.0,  _non_negative),
        "live_load":       (float, False, 1.5,  _non_negative),
    },
    "column": {
        "height":        (float, False, 3.0,   _positive),
        "width":         (float, False, 200.0, _positive),
        "depth":         (float, False, 200.0, _positive),
        "axial_load":    (float, False, None,  _positive),
        "capacity_mode": (str,   False, ColumnCapacityMode.SIMPLIFIED.value,
                          _in_set(_VALID_CAPACITY_MODES)),
    },
    "footing": {
        "soil_capacity": (float, False, 150.0, _positive),
        "cover":         (str,   False, FootingCover.FULL.value,
                          _in_set(_VALID_FOOTING_COVERS)),
    },
    "ground_beam": {
        "span":           (float, False, 3.0,  _positive),
        "width":          (float, False, None, _non_negative),
        "depth":          (float, False, None, _non_negative),
        "load":           (float, False, 10.0, _positive),
        "column_spacing": (float, False, None, _positive),
    },
}

# Optional design-constant overrides; absent keys keep the BS 8110 values.
_CODE_SCHEMA: dict[str, tuple] = {
    name: (float, False, None, _positive) for name in BS8110._OVERRIDABLE
}


class InputError(Exception):
    """Raised when the input YAML fails validation."""


def _coerce(value: Any, expected_type: type) -> Any:
    """Attempt to coerce *value* to *expected_type*.

    YAML often reads ``2`` as ``int`` where a ``float`` is expected.  This
    silently promotes ints to floats when the schema says ``float``.
    """
    if expected_type is float and isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, expected_type):
        return value
    raise InputError(
        f"Expected type {expected_type.__name__}, got "
        f"{type(value).__name__} for value {value!r}"
    )


def _validate_section(
    data: dict[str, Any],
    schema: dict[str, tuple],
    section_path: str,
    errors: list[str],
) -> dict[str, Any]:
    """Validate *data* against a flat field *schema*.

    Fills defaults and coerces types.  Appends human-readable messages to
    *errors* for every problem found.
    """
    validated: dict[str, Any] = {}
    for field, (ftype, required, default, validator) in schema.items():
        path_str = f"{section_path}.{field}"
        raw = data.get(field)
        if raw is None:
            if required and default is None:
                errors.append(f"Missing required field: {path_str}")
                continue
            validated[field] = default
            continue

        try:
            coerced = _coerce(raw, ftype)
        except InputError:
            errors.append(
                f"{path_str}: expected {ftype.__name__}, "
                f"got {type(raw).__name__} ({raw!r})"
            )
            continue

        if validator is not None and not validator(coerced):
            errors.append(f"{path_str}: value {coerced!r} is out of range")
            continue

        validated[field] = coerced

    for field in sorted(set(data) - set(schema)):
        errors.append(f"{section_path}.{field}: unknown field")

    return validated


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_config(raw: Any) -> dict[str, Any]:
    """Validate an already-loaded YAML document.

    Raises
    ------
    InputError
        If validation fails (the message lists every problem found).
    """
    if not isinstance(raw, dict):
        raise InputError("YAML root must be a mapping (dict)")

    errors: list[str] = []
    config: dict[str, Any] = {}

    for section_name, field_schema in SCHEMA.items():
        section_data = raw.get(section_name)
        if section_data is None:
            has_required = any(
                req and default is None
                for (_, req, default, _) in field_schema.values()
            )
            if has_required:
                errors.append(f"Missing required section: {section_name}")
            config[section_name] = {
                field: default
                for field, (_, _, default, _) in field_schema.items()
            }
            continue

        if not isinstance(section_data, dict):
            errors.append(f"Section '{section_name}' must be a mapping")
            continue

        config[section_name] = _validate_section(
            section_data, field_schema, section_name, errors
        )

    code_raw = raw.get("code") or {}
    if not isinstance(code_raw, dict):
        errors.append("Section 'code' must be a mapping")
    else:
        overrides = _validate_section(code_raw, _CODE_SCHEMA, "code", errors)
        config["code"] = {k: v for k, v in overrides.items() if v is not None}

    for section_name in sorted(set(raw) - set(SCHEMA) - {"code"}):
        errors.append(f"Unknown section: {section_name}")

    if errors:
        bullet_list = "\n  - ".join(errors)
        raise InputError(
            f"Input validation failed with {len(errors)} error(s):\n"
            f"  - {bullet_list}"
        )

    return config


def parse_input(yaml_path: str | Path) -> dict[str, Any]:
    """Read and validate a project YAML file.

    Parameters
    ----------
    yaml_path:
        Filesystem path to the YAML input file.

    Returns
    -------
    dict
        A fully validated configuration dictionary with defaults applied.

    Raises
    ------
    FileNotFoundError
        If *yaml_path* does not exist.
    InputError
        If validation fails (the message lists every problem found).
    """
    path = Path(yaml_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {yaml_path}")

    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)

    return parse_config(raw)


def build_design_input(config: dict[str, Any]) -> DesignInput:
    """Map a validated configuration onto the engine's input record."""
    beam = config["beam"]
    column = config["column"]
    footing = config["footing"]
    ground_beam = config["ground_beam"]
    return DesignInput(
        span=beam["span"],
        width=beam["width"],
        depth=beam["depth"],
        fcu=beam["fcu"],
        tributary_width=beam["tributary_width"],
        wall_height=beam["wall_height"],
        live_load=beam["live_load"],
        column_height=column["height"],
        column_width=column["width"],
        column_depth=column["depth"],
        axial_load=column["axial_load"],
        column_capacity_mode=ColumnCapacityMode(column["capacity_mode"]),
        soil_capacity=footing["soil_capacity"],
        footing_cover=FootingCover(footing["cover"]),
        ground_beam_span=ground_beam["span"],
        ground_beam_width=ground_beam["width"],
        ground_beam_depth=ground_beam["depth"],
        ground_beam_load=ground_beam["load"],
        column_spacing=ground_beam["column_spacing"],
    )


def build_design_code(config: dict[str, Any]) -> BS8110:
    """Design code variant from the ``code:`` section."""
    return BS8110.from_config(config.get("code"))


# ---------------------------------------------------------------------------
# Template generator
# ---------------------------------------------------------------------------

_TEMPLATE_YAML = """\
# Residential RC Sizing Input File
# ================================
# Comments show units and valid options. Omit a field to use its default.

project:
  name: "Two-Storey Terrace"
  engineer: "Design Engineer"
  date: "2026-01-01"

beam:
  span: 5.0                     # m - Clear span (required, > 0)
  width: 150                    # mm - 0 or omitted = auto-size
  depth: 450                    # mm - 0 or omitted = auto-size
  fcu: 25                       # MPa - Concrete grade (C25 default)
  tributary_width: 0            # m - Slab width carried by the beam
  wall_height: 0                # m - Brick wall height on the beam
  live_load: 1.5                # kPa - Imposed floor load

column:
  height: 3.0                   # m
  width: 200                    # mm
  depth: 200                    # mm
  # axial_load: 250             # kN - Overrides beam reaction when given
  capacity_mode: "simplified"   # Options: simplified | design_strength

footing:
  soil_capacity: 150            # kPa - Allowable bearing pressure
  cover: "full"                 # Options: full (75 mm) | simplified (50 mm)

ground_beam:
  span: 3.0                     # m
  width: 0                      # mm - 0 = auto-size
  depth: 0                      # mm - 0 = auto-size
  load: 10.0                    # kN/m - Wall load (standalone)
  # column_spacing: 4.0         # m - Chain load from column axial / spacing

# Optional design constant overrides (BS 8110 values shown)
code:
  fy: 460                       # MPa
  cover: 25                     # mm
"""


def generate_template() -> str:
    """Return a complete sample YAML input template as a string.

    The returned text is ready to be written to a file and edited by the
    user.
    """
    return _TEMPLATE_YAML
