"""CLI entry point for oas2json."""

import logging
from pathlib import Path

import click

from oas2json.generator.validator import validate_output
from oas2json.pipeline import run_command


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log skipped entries and failure details.")
def main(verbose: bool):
    """oas2json — split an OpenAPI document into standalone JSON schemas."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )


@main.command("oas2json")
@click.option("-i", "--input", "input_path", required=True, type=click.Path(path_type=Path), help="Path to the OpenAPI file.")
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Path to the folder where to output the schemas.")
@click.option("-p", "--properties", default=None, help="Comma-separated list of properties to convert from the OpenAPI file.")
def oas2json(input_path: Path, output: Path, properties: str | None):
    """Create JSON schemas from an OpenAPI file.

    \b
    Examples:
      $ oas2json oas2json -i ./openapi.yml -o ./schemas
    """
    report = run_command(input_path, output, properties)
    click.echo(f"Wrote {len(report.written)} schemas to {output}")
    if report.skipped:
        click.echo(f"Skipped {len(report.skipped)} entries (use -v for details).")


@main.command()
@click.argument("schemas_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Also require every $ref to match a generated file.")
def check(schemas_dir: Path, strict: bool):
    """Check a generated schema folder for missing titles, ids and stale refs."""
    errors = validate_output(schemas_dir, strict=strict)
    for filename, error in errors.items():
        click.echo(f"  {filename}: {error}")
    if errors:
        raise click.ClickException(f"{len(errors)} invalid schema files in {schemas_dir}")
    click.echo(f"All schemas in {schemas_dir} are valid.")
