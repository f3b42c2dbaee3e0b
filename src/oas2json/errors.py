"""Exceptions raised while turning an OpenAPI document into JSON schemas."""


class Oas2JsonError(Exception):
    """Base class for all oas2json errors."""


class DocumentReadError(Oas2JsonError):
    """The input document could not be read or parsed."""


class ConversionError(Oas2JsonError):
    """A value that must be an object is something else."""


class OutputDirectoryError(Oas2JsonError):
    """The output directory could not be cleared or created."""
