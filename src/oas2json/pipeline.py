"""Runs one OpenAPI -> JSON schemas conversion from start to finish."""

import logging
import sys
from pathlib import Path

from oas2json.errors import DocumentReadError, Oas2JsonError, OutputDirectoryError
from oas2json.generator.components import process_components
from oas2json.generator.emitter import SchemaEmitter
from oas2json.generator.paths import process_path_schemas
from oas2json.parser.base import ExtractionReport, RunConfig
from oas2json.parser.convert import from_schema
from oas2json.parser.loader import load_document

logger = logging.getLogger(__name__)

EXTRACTION_ERRORS = (Oas2JsonError, TypeError, AttributeError, KeyError, ValueError)


def extract(
    document: dict,
    definition_keywords: list[str],
    emitter: SchemaEmitter,
    report: ExtractionReport | None = None,
) -> ExtractionReport:
    """Convert `document` and write component and path schemas through `emitter`.

    Errors propagate; files written before the failure stay where they are.
    """
    report = report if report is not None else ExtractionReport()
    converted = from_schema(document, definition_keywords)
    process_components(definition_keywords, converted, document, emitter, report)
    process_path_schemas(converted, emitter, report)
    return report


def run_command(
    input_path: Path,
    output_dir: Path,
    properties: str | None = None,
    logger: logging.Logger = logger,
) -> ExtractionReport:
    """Regenerate `output_dir` from the OpenAPI file at `input_path`.

    An unreadable input terminates the process with status 1. Any failure
    while converting or extracting is logged as a warning and the partial
    report is returned.
    """
    config = RunConfig.from_options(Path(input_path), Path(output_dir), properties)
    try:
        emitter = SchemaEmitter(config.output_dir).prepare()
    except OutputDirectoryError as e:
        logger.error("Could not prepare the output directory: %s", e)
        sys.exit(1)

    try:
        document = load_document(config.input_path)
    except DocumentReadError as e:
        logger.error("Could not find the OpenAPI file")
        logger.debug("%s", e)
        sys.exit(1)

    report = ExtractionReport()
    try:
        extract(document, config.definition_keywords, emitter, report)
    except EXTRACTION_ERRORS as e:
        logger.warning("Failed to convert non-object attribute, skipping")
        logger.debug("Extraction aborted: %s", e)
        report.error = str(e)
        report.written = emitter.written
        return report

    for entry in report.skipped:
        logger.debug("Skipped %s: %s", entry.location, entry.reason)
    report.written = emitter.written
    logger.info("JSON schemas generated successfully from OpenAPI file")
    return report
