"""Split an OpenAPI document into standalone, cross-referencing JSON Schema files."""

__version__ = "0.1.0"
