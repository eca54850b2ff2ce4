"""Command-line interface for BeamSafe residential RC sizing.

Usage::

    beamsafe run <input_yaml> [-o output_dir] [--pdf] [-v]
    beamsafe template
    beamsafe validate <input_yaml>
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

import click
import yaml
from loguru import logger

from beamsafe.core.engine import DesignEngine
from beamsafe.input_parser import (
    InputError,
    build_design_code,
    build_design_input,
    generate_template,
    parse_input,
)
from beamsafe.models.outputs import DesignStatus
from beamsafe.reports.summary import build_image_prompt, build_summary


_STATUS_COLOURS = {
    DesignStatus.SAFE: "green",
    DesignStatus.UNSAFE: "red",
    DesignStatus.IDLE: "yellow",
}


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    logger.enable("beamsafe")


def _load(input_file: str):
    """Parse the input file, exiting with status 1 on any input problem."""
    try:
        config = parse_input(input_file)
    except (InputError, yaml.YAMLError) as exc:
        click.secho(f"Error parsing input: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc
    return config


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="beamsafe")
def main():
    """BeamSafe - residential RC beam, column and footing sizing to BS 8110."""


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o", "--output",
    default="./output",
    show_default=True,
    help="Output directory for results.",
)
@click.option("--pdf", is_flag=True, help="Also write a PDF design report.")
@click.option("-v", "--verbose", is_flag=True, help="Log every design step.")
def run(input_file: str, output: str, pdf: bool, verbose: bool) -> None:
    """Run the beam, column, footing and ground beam design for INPUT_FILE."""
    _configure_logging(verbose)
    input_path = Path(input_file)
    output_dir = Path(output)
    output_dir.mkdir(parents=True, exist_ok=True)

    click.echo(f"Reading input file: {input_path}")
    config = _load(input_file)
    project = config["project"]

    try:
        code = build_design_code(config)
    except (KeyError, ValueError) as exc:
        click.secho(f"Error in code section: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc

    inputs = build_design_input(config)
    result = DesignEngine(code).design(inputs)

    # ------------------------------------------------------------------
    # Console summary
    # ------------------------------------------------------------------
    click.echo("")
    click.secho("=" * 60, bold=True)
    click.secho("  RESIDENTIAL RC DESIGN SUMMARY", bold=True)
    click.secho("=" * 60, bold=True)

    click.echo(f"\n  Project       : {project['name']}")
    click.echo(f"  Design code   : {result.design_code}")
    click.echo(f"  Concrete      : C{result.fcu:.0f}")

    def _status_line(label, status):
        click.echo(f"  {label:<26}: ", nl=False)
        if status is None:
            click.secho("not computed", fg="yellow")
        else:
            click.secho(status.value, fg=_STATUS_COLOURS[status])

    click.echo("\n  --- Design Status ---")
    _status_line("Primary Beam", result.beam.status if result.beam else None)
    _status_line("Column", result.column.status if result.column else None)
    _status_line("Footing Bearing", result.footing.status if result.footing else None)
    _status_line("Footing Flexure", result.footing.flexure_status if result.footing else None)
    _status_line("Ground Beam", result.ground_beam.status if result.ground_beam else None)
    _status_line("Overall", result.overall_status)

    click.echo("")
    click.echo(build_summary(result))
    for note in result.notes:
        click.echo(f"  * {note}")
    click.secho("\n" + "=" * 60, bold=True)

    # ------------------------------------------------------------------
    # Save results
    # ------------------------------------------------------------------
    results_file = output_dir / "results.json"
    with open(results_file, "w", encoding="utf-8") as fh:
        json.dump(
            {
                "project": project,
                "generated_at": datetime.now().isoformat(timespec="seconds"),
                "code": code.as_dict(),
                "inputs": inputs.model_dump(mode="json"),
                "result": result.model_dump(mode="json"),
            },
            fh,
            indent=2,
            default=str,
        )
    click.echo(f"\nResults saved to {results_file.resolve()}")

    summary_file = output_dir / "summary.txt"
    summary_file.write_text(build_summary(result) + "\n", encoding="utf-8")
    prompt = build_image_prompt(result)
    if prompt:
        (output_dir / "image_prompt.txt").write_text(prompt + "\n", encoding="utf-8")

    if pdf:
        click.echo("Generating PDF report ...")
        from beamsafe.reports.pdf_generator import PDFReportGenerator

        generator = PDFReportGenerator(cover=code.COVER)
        content = generator.generate_report(
            inputs, result,
            project_name=project["name"],
            engineer_name=project["engineer"] or None,
        )
        pdf_path = output_dir / "design_report.pdf"
        pdf_path.write_bytes(content)
        click.secho(f"Report saved to {pdf_path.resolve()}", fg="green")


# ---------------------------------------------------------------------------
# template
# ---------------------------------------------------------------------------

@main.command()
def template() -> None:
    """Print a sample input YAML to stdout."""
    click.echo(generate_template(), nl=False)


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
def validate(input_file: str) -> None:
    """Validate an input YAML file without running the design."""
    click.echo(f"Validating: {input_file}")
    config = _load(input_file)

    try:
        build_design_code(config)
    except (KeyError, ValueError) as exc:
        click.secho(f"Error in code section: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc

    click.secho("\nInput file is valid.", fg="green")


# ---------------------------------------------------------------------------
# Allow ``python -m beamsafe.cli``
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    main()
