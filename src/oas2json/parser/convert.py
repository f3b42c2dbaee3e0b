"""OpenAPI Schema Object -> JSON Schema (draft-04) lowering.

Only the definition collections that will be extracted and the parameter
schemas under `paths` are converted; the rest of the document is copied as is.
The lowering of each schema is done by `openapi_schema_to_json_schema`.
"""

import copy
import logging

from openapi_schema_to_json_schema import to_json_schema

from oas2json.errors import ConversionError
from oas2json.parser.loader import get_path

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "post", "put", "delete", "options", "head", "patch")


def from_schema(document: dict, definition_keywords: list[str]) -> dict:
    """Return a converted deep copy of `document`.

    Each member of each `definition_keywords` collection (a dotted path such as
    `components.schemas`) is lowered and stamped with `$schema`. Members that
    are not objects are left alone for the extractors to reject.
    """
    if not isinstance(document, dict):
        raise ConversionError("Failed to convert non-object attribute: document root")

    converted = copy.deepcopy(document)
    for keyword in definition_keywords:
        collection = get_path(converted, keyword)
        if isinstance(collection, dict):
            members = collection.items()
        elif isinstance(collection, list):
            members = enumerate(collection)
        else:
            logger.debug("No definitions under %s", keyword)
            continue
        for key, member in list(members):
            if isinstance(member, dict):
                collection[key] = to_json_schema(member)

    paths = converted.get("paths")
    if isinstance(paths, dict):
        for path_item in paths.values():
            _convert_path_item(path_item)
    return converted


def convert_parameter_schema(schema: dict) -> dict:
    """Lower a parameter's `schema`, without the draft marker."""
    result = to_json_schema(schema)
    result.pop("$schema", None)
    return result


def _convert_parameters(parameters) -> None:
    if not isinstance(parameters, list):
        return
    for parameter in parameters:
        if isinstance(parameter, dict) and isinstance(parameter.get("schema"), dict):
            parameter["schema"] = convert_parameter_schema(parameter["schema"])


def _convert_path_item(path_item) -> None:
    if not isinstance(path_item, dict):
        return
    _convert_parameters(path_item.get("parameters"))
    for method in HTTP_METHODS:
        operation = path_item.get(method)
        if isinstance(operation, dict):
            _convert_parameters(operation.get("parameters"))
