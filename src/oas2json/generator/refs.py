"""Schema adaptation and `#/components/...` reference rewriting."""

import json
import re

from oas2json.errors import ConversionError
from oas2json.generator.names import strip_uri_chars

JSON_INDENT = 2

COMPONENT_KINDS = (
    "callbacks",
    "examples",
    "headers",
    "links",
    "parameters",
    "requestBodies",
    "responses",
    "schemas",
    "securitySchemes",
)
COMPONENT_REF_RE = re.compile(r"#/components/(?:" + "|".join(COMPONENT_KINDS) + r')/[^"]+')


def adapt_schema(schema: dict, name: str, filename: str) -> dict:
    """Annotate a schema in place with its title, `$id` and TS hints."""
    if not isinstance(schema, dict):
        raise ConversionError(f"Failed to convert non-object attribute: {name}")
    schema.pop("$schema", None)
    schema["title"] = name
    schema["$id"] = f"{strip_uri_chars(filename)}.json"

    fmt = schema.get("format")
    if isinstance(fmt, str) and "date" in fmt:
        schema["tsType"] = "Date"
    return schema


def rewrite_refs(text: str) -> str:
    """Point every internal component reference at `<name>.json`."""
    return COMPONENT_REF_RE.sub(lambda m: m.group(0).rsplit("/", 1)[-1] + ".json", text)


def serialize(schema: dict) -> str:
    """Stable JSON text of a schema with its references rewritten."""
    return rewrite_refs(json.dumps(schema, indent=JSON_INDENT, ensure_ascii=False))
