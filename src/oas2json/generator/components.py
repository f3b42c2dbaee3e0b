"""Component extractor: one schema file per named definition."""

import logging
from enum import Enum

from oas2json.errors import ConversionError
from oas2json.generator.emitter import SchemaEmitter
from oas2json.generator.names import get_filename
from oas2json.generator.refs import adapt_schema, serialize
from oas2json.parser.base import ExtractionReport
from oas2json.parser.loader import get_path

logger = logging.getLogger(__name__)


class CollectionKind(Enum):
    MAPPING = "mapping"  # keys are the names
    ARRAY = "array"  # names come from each member's `name`
    MISSING = "missing"


def collection_kind(original_collection) -> CollectionKind:
    """Shape of a definition collection in the original document."""
    if isinstance(original_collection, list):
        return CollectionKind.ARRAY
    if isinstance(original_collection, dict):
        return CollectionKind.MAPPING
    return CollectionKind.MISSING


def _entries(keyword: str, collection, kind: CollectionKind):
    if kind is CollectionKind.ARRAY:
        # an index is not a useful identifier, use the declared name instead
        for index, value in enumerate(collection):
            if not isinstance(value, dict):
                raise ConversionError(f"Failed to convert non-object attribute: {keyword}[{index}]")
            name = value.get("name")
            yield f"[{index}]", None if name is None else str(name), value
    elif kind is CollectionKind.MAPPING:
        for key, value in collection.items():
            yield f".{key}", str(key), value


def process_components(
    definition_keywords: list[str],
    converted: dict,
    original: dict,
    emitter: SchemaEmitter,
    report: ExtractionReport,
) -> None:
    """Emit every member of every definition keyword collection."""
    for keyword in definition_keywords:
        collection = get_path(converted, keyword)
        kind = collection_kind(get_path(original, keyword))
        if kind is CollectionKind.MISSING or collection_kind(collection) is not kind:
            raise ConversionError(f"Failed to convert non-object attribute: {keyword}")

        for suffix, name, value in _entries(keyword, collection, kind):
            location = f"{keyword}{suffix}"
            if not name:
                report.skip(location, "entry has no name")
                logger.debug("Skipping %s: entry has no name", location)
                continue

            filename = get_filename(name)
            if not filename:
                report.skip(location, "name has no usable characters")
                logger.debug("Skipping %s: name has no usable characters", location)
                continue
            adapt_schema(value, name, filename)
            emitter.write(keyword, filename, serialize(value))
