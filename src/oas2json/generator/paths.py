"""Path/operation extractor: parameter lists become object schemas.

For each path, the path-level `parameters` list and the `parameters` of every
HTTP operation are split into `query` and `path` buckets, and each non-empty
bucket is written as one `<flattened-path>_<bucket>_parameters.json` schema.

Bucket assignment is swapped relative to the bucket names: `in: path`
parameters land in the `query` bucket and `in: query` ones in the `path`
bucket. Generated files already depend on this, so it is kept.
Parameters located anywhere else (header, cookie) are dropped.
"""

import logging
from enum import Enum
from pathlib import PurePosixPath

from oas2json.errors import ConversionError
from oas2json.generator.emitter import SchemaEmitter
from oas2json.generator.names import flatten_path, get_filename, path_folder
from oas2json.generator.refs import adapt_schema, serialize
from oas2json.parser.base import ExtractionReport, ParameterObject

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"get", "post", "put", "delete", "options", "head", "patch"})
PARAMETERS_KEYWORD = "parameters"
PARAMETER_BUCKETS = ("query", "path")
BUCKET_FOR_LOCATION = {"path": "query", "query": "path"}


class PathItemKey(Enum):
    OPERATION = "operation"  # an HTTP method carrying its own parameters
    PATH_PARAMETERS = "path_parameters"  # the path-level `parameters` list
    IGNORED = "ignored"


def classify_key(key: str, value) -> PathItemKey:
    """Decide what a key under a path item contributes."""
    if key in HTTP_METHODS and isinstance(value, dict) and PARAMETERS_KEYWORD in value:
        return PathItemKey.OPERATION
    if key == PARAMETERS_KEYWORD:
        return PathItemKey.PATH_PARAMETERS
    return PathItemKey.IGNORED


def partition_parameters(parameters: list) -> dict[str, list[ParameterObject]]:
    """Split raw parameter dicts into the `query` / `path` buckets."""
    buckets: dict[str, list[ParameterObject]] = {bucket: [] for bucket in PARAMETER_BUCKETS}
    for raw in parameters:
        if not isinstance(raw, dict):
            continue
        bucket = BUCKET_FOR_LOCATION.get(raw.get("in"))
        if bucket:
            buckets[bucket].append(ParameterObject.from_raw(raw))
    return buckets


def build_schema_from_parameters(parameters: list[ParameterObject]) -> dict:
    """Object schema whose properties are the given parameters."""
    properties: dict = {}
    required: list[str] = []
    for parameter in parameters:
        if not parameter.name:
            continue
        properties[parameter.name] = {"schema": parameter.schema_} if parameter.schema_ is not None else {}
        if parameter.required:
            required.append(parameter.name)

    return {
        "type": "object",
        "properties": properties,
        "required": required,
        "additionalProperties": False,
    }


def process_path_schemas(converted: dict, emitter: SchemaEmitter, report: ExtractionReport) -> None:
    """Emit the parameter schemas of every path in the converted document."""
    paths = converted.get("paths")
    if not isinstance(paths, dict):
        raise ConversionError("Failed to convert non-object attribute: paths")

    for endpoint, path_item in paths.items():
        if not isinstance(path_item, dict):
            raise ConversionError(f"Failed to convert non-object attribute: paths.{endpoint}")
        folder = path_folder(endpoint)
        base_name = flatten_path(endpoint)

        for key, value in path_item.items():
            kind = classify_key(key, value)
            if kind is PathItemKey.IGNORED:
                continue
            if kind is PathItemKey.OPERATION:
                target = str(PurePosixPath(folder, key)) if folder else key
                parameters = value[PARAMETERS_KEYWORD]
            else:
                target = folder
                parameters = value
            if not isinstance(parameters, list):
                raise ConversionError(f"Failed to convert non-object attribute: paths.{endpoint}.{key}")

            for index, raw in enumerate(parameters):
                location = raw.get("in") if isinstance(raw, dict) else None
                if location not in BUCKET_FOR_LOCATION:
                    report.skip(
                        f"paths.{endpoint}.{key}[{index}]",
                        f"parameter location {location!r} is not extracted",
                    )

            buckets = partition_parameters(parameters)
            for bucket in PARAMETER_BUCKETS:
                if not buckets[bucket]:
                    continue
                name = f"{base_name}_{bucket}_{PARAMETERS_KEYWORD}"
                filename = get_filename(name)
                schema = adapt_schema(build_schema_from_parameters(buckets[bucket]), name, filename)
                emitter.write(target, filename, serialize(schema))
