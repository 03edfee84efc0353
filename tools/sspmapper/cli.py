#!/usr/bin/env python3
"""
sspmapper CLI - OSCAL SSP control-implementation extractor

Validates OSCAL System Security Plan XML, detects its FedRAMP baseline,
extracts metadata, system characteristics and implemented requirements, and
prints node fingerprints for traceability.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .constants import OSCAL_NAMESPACE
from .conversion import ExtractionOrchestrator
from .exceptions import DocumentParseError
from .tree import find_xpath, find_xpath_without_index, load_document
from .validation import BaselineClassifier, DocumentValidator, ExtractionSchemaValidator

# Set up console and logging
console = Console()
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(console=console, show_time=False, show_path=False)]
)
logger = logging.getLogger("sspmapper")


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.option('--namespace', default=OSCAL_NAMESPACE, show_default=True,
              help='Expected OSCAL namespace URI')
@click.pass_context
def cli(ctx, verbose: bool, quiet: bool, namespace: str):
    """sspmapper - OSCAL SSP extraction and fingerprinting"""
    ctx.ensure_object(dict)

    if quiet:
        logging.getLogger().setLevel(logging.WARNING)
    elif verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.obj['verbose'] = verbose
    ctx.obj['quiet'] = quiet
    ctx.obj['namespace'] = namespace


@cli.command()
@click.argument('xml_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx, xml_file: Path):
    """Check namespace and required sections of an SSP"""
    validator = DocumentValidator(ctx.obj['namespace'])
    result = validator.validate(xml_file)

    console.print_json(data=result.to_dict())

    if not result.is_valid:
        logger.error(f"Validation failed for {xml_file}")
        sys.exit(1)


@cli.command()
@click.argument('xml_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def baseline(xml_file: Path):
    """Detect the FedRAMP baseline of an SSP"""
    level = BaselineClassifier().detect_baseline(xml_file)
    console.print_json(data={
        "baseline": level.value,
        "template": level.template_file
    })


@cli.command()
@click.argument('xml_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the extraction JSON to this file')
@click.option('--workers', type=click.IntRange(min=1), default=1, show_default=True,
              help='Threads used to extract implemented requirements')
@click.option('--check-schema', is_flag=True, help='Validate the export against its JSON schema')
@click.option('--schema-dir', type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Directory containing export JSON schemas')
@click.pass_context
def extract(ctx, xml_file: Path, output: Optional[Path], workers: int,
            check_schema: bool, schema_dir: Optional[Path]):
    """Extract metadata, system characteristics and controls as JSON"""
    orchestrator = ExtractionOrchestrator(ctx.obj['namespace'], max_workers=workers)

    try:
        result = orchestrator.extract(xml_file)
    except DocumentParseError as e:
        logger.error(f"Failed to read {xml_file}: {e}")
        if ctx.obj['verbose']:
            logger.exception(e)
        sys.exit(1)

    data = result.to_dict()

    if check_schema:
        schema_validator = ExtractionSchemaValidator(schema_dir)
        if not schema_validator.validate(data):
            logger.error("Extraction output failed schema validation")
            sys.exit(1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, 'w') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"Generated: {output}")
    else:
        console.print_json(data=data)

    if not ctx.obj['quiet']:
        _print_control_summary(result.controls)


@cli.command()
@click.argument('xml_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('tag')
@click.option('--no-index', is_flag=True, help='Omit sibling indices from the locators')
@click.pass_context
def locate(ctx, xml_file: Path, tag: str, no_index: bool):
    """Print the fingerprint of every element named TAG"""
    try:
        root = load_document(xml_file)
    except DocumentParseError as e:
        logger.error(f"Failed to read {xml_file}: {e}")
        sys.exit(1)

    locator = find_xpath_without_index if no_index else find_xpath
    nodes = [root] if root.tag == tag else []
    nodes.extend(node for node in root.iter_descendants() if node.tag == tag)

    if not nodes:
        logger.warning(f"No <{tag}> elements found in {xml_file}")
        return

    for node in nodes:
        click.echo(locator(node))


@cli.command()
def doctor():
    """Diagnostic tool for sspmapper installation"""
    _check_python_deps()


def _print_control_summary(controls) -> None:
    """Render a short control table on the console"""
    if not controls:
        return

    table = Table(title=f"{len(controls)} security controls")
    table.add_column("Control")
    table.add_column("Implementation status")
    table.add_column("Origination")
    table.add_column("Roles", justify="right")

    for control in controls:
        table.add_row(
            control.control_id,
            control.implementation_status or "-",
            control.control_origination or "-",
            str(len(control.responsible_roles))
        )

    console.print(table)


def _check_python_deps():
    """Check Python dependencies"""
    required = ['defusedxml', 'jsonschema', 'click', 'rich']
    missing = []

    for pkg in required:
        try:
            __import__(pkg)
        except ImportError:
            missing.append(pkg)

    if missing:
        logger.error(f"Missing Python dependencies: {', '.join(missing)}")
        logger.info("Run: pip install -e .")
        sys.exit(1)
    else:
        logger.info("All Python dependencies satisfied")


if __name__ == '__main__':
    cli()
