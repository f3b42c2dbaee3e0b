"""Writes adapted schemas into the output tree."""

import shutil
from pathlib import Path

from oas2json.errors import OutputDirectoryError


class SchemaEmitter:
    """Owns one output directory for the duration of a run.

    `prepare()` wipes and recreates the directory; `write()` places one
    schema file under a keyword or path-derived subdirectory.
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self.written: list[Path] = []

    def prepare(self) -> "SchemaEmitter":
        """Remove everything under the root and recreate it empty."""
        if self.root.exists() and not self.root.is_dir():
            raise OutputDirectoryError(f"{self.root} exists and is not a directory")
        try:
            if self.root.is_dir():
                shutil.rmtree(self.root)
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(f"Could not prepare {self.root}: {e}") from e
        return self

    def write(self, subdirectory: str, stem: str, payload: str) -> Path:
        """Write `payload` to `<root>/<subdirectory>/<stem>.json`, overwriting."""
        destination_dir = self.root / subdirectory if subdirectory else self.root
        destination_dir.mkdir(parents=True, exist_ok=True)
        destination = destination_dir / f"{stem}.json"
        destination.write_text(payload, encoding="utf-8")
        self.written.append(destination)
        return destination
