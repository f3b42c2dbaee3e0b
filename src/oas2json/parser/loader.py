"""OpenAPI document loader.

Reads a YAML or JSON OpenAPI document (JSON is valid YAML) into plain dicts.
"""

from pathlib import Path

import yaml

from oas2json.errors import DocumentReadError


def read_document(file_path: Path) -> str:
    """Read the raw document text."""
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"Could not read {file_path}: {e}") from e


def parse_document(text: str) -> dict:
    """Parse document text with a YAML parser."""
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentReadError(f"Invalid YAML/JSON document: {e}") from e
    return doc if doc is not None else {}


def load_document(file_path: Path) -> dict:
    """Read and parse an OpenAPI file."""
    return parse_document(read_document(file_path))


def get_path(doc, dotted: str):
    """Look up a dotted key path like `components.schemas`, None when absent."""
    node = doc
    for key in dotted.split("."):
        if isinstance(node, dict):
            node = node.get(key)
        elif isinstance(node, list) and key.isdigit() and int(key) < len(node):
            node = node[int(key)]
        else:
            return None
    return node
