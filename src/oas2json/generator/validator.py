"""Checks a generated schema tree for structural correctness."""

import json
import re
from pathlib import Path

from oas2json.generator.refs import COMPONENT_KINDS

LEFTOVER_REF_RE = re.compile(r"#/components/(?:" + "|".join(COMPONENT_KINDS) + r")/")
SIBLING_REF_RE = re.compile(r'"\$ref":\s*"([^"#/]+\.json)"')


def validate_schema_file(path: Path) -> str | None:
    """Return an error message for one schema file, or None if it is fine."""
    text = path.read_text(encoding="utf-8")
    try:
        schema = json.loads(text)
    except json.JSONDecodeError as e:
        return f"JSONDecodeError: {e.msg} (line {e.lineno})"

    if not isinstance(schema, dict):
        return "Schema is not a JSON object"
    missing = [key for key in ("title", "$id") if key not in schema]
    if missing:
        return f"Missing {', '.join(missing)}"
    if LEFTOVER_REF_RE.search(text):
        return "Contains an unrewritten component reference"
    return None


def validate_refs(directory: Path) -> dict[str, str]:
    """Report `$ref`s to `<name>.json` that match no generated file.

    References are resolved by file name anywhere in the tree, since
    component files of different keywords refer to each other.
    """
    files = sorted(directory.rglob("*.json"))
    known = {f.name for f in files}
    errors = {}
    for path in files:
        missing = sorted({ref for ref in SIBLING_REF_RE.findall(path.read_text(encoding="utf-8")) if ref not in known})
        if missing:
            errors[path.relative_to(directory).as_posix()] = f"Unresolved references: {', '.join(missing)}"
    return errors


def validate_output(directory: Path, strict: bool = False) -> dict[str, str]:
    """Run all checks on a generated tree.

    Returns dict of {relative_path: error_message} for files with errors.
    Reference resolution is only checked when `strict` is set and every
    file passed the structural checks.
    """
    errors = {}
    for path in sorted(directory.rglob("*.json")):
        error = validate_schema_file(path)
        if error:
            errors[path.relative_to(directory).as_posix()] = error

    if strict and not errors:
        errors.update(validate_refs(directory))

    return errors
