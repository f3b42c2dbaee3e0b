"""Data models shared by the loader, the extractors and the pipeline.

Parameter objects come straight out of the converted document, so unknown
keys are kept around rather than rejected.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_DEFINITION_KEYWORD = "components.schemas"


class ParameterObject(BaseModel):
    """A single operation or path-level parameter."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    location: str | None = None  # query / path / header / cookie
    required: bool = False
    description: Any = None
    deprecated: Any = None
    schema_: Any = None

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, value):
        # YAML reads `name: 404` as an int
        return None if value is None else str(value)

    @field_validator("required", mode="before")
    @classmethod
    def required_truthy(cls, value):
        return bool(value)

    @classmethod
    def from_raw(cls, raw: dict) -> "ParameterObject":
        """Build from a raw OpenAPI parameter mapping (`in` and `schema` keys)."""
        data = {k: v for k, v in raw.items() if k not in ("in", "schema")}
        return cls(location=raw.get("in"), schema_=raw.get("schema"), **data)


class SkippedEntry(BaseModel):
    """An entry that was left out of the output, and why."""

    location: str  # components.examples[2] / paths./pets.get
    reason: str


class ExtractionReport(BaseModel):
    """Outcome of one run: files written, entries skipped, abort reason."""

    written: list[Path] = []
    skipped: list[SkippedEntry] = []
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def skip(self, location: str, reason: str) -> None:
        self.skipped.append(SkippedEntry(location=location, reason=reason))


class RunConfig(BaseModel):
    """Effective options for one run."""

    input_path: Path
    output_dir: Path
    definition_keywords: list[str] = [DEFAULT_DEFINITION_KEYWORD]

    @classmethod
    def from_options(
        cls, input_path: Path, output_dir: Path, properties: str | None = None
    ) -> "RunConfig":
        """Merge the comma-separated extra keywords with the default one."""
        extra = [p.strip() for p in (properties or "").split(",") if p.strip()]
        keywords = list(dict.fromkeys([*extra, DEFAULT_DEFINITION_KEYWORD]))
        return cls(input_path=input_path, output_dir=output_dir, definition_keywords=keywords)
