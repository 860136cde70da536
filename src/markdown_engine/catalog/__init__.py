"""Marker catalog: format identifiers and their markdown syntax."""

from .formats import CATALOG, iter_formats, resolve_format
from .models import (
    HEADINGS,
    LINE_STYLES,
    FormatId,
    FormatKind,
    FormatSpec,
    UnknownFormatError,
)

__all__ = [
    "CATALOG",
    "HEADINGS",
    "LINE_STYLES",
    "FormatId",
    "FormatKind",
    "FormatSpec",
    "UnknownFormatError",
    "iter_formats",
    "resolve_format",
]
