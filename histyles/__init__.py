"""Highlighting style registry: standard, custom and available styles."""
from .core import (
    CUSTOM_SAMPLE_NAME,
    StyleCollection,
    Registry,
    get_registry,
    set_registry,
    lookup_style,
    list_style_names,
)
from .errors import StyleError, StyleIOError, StyleDecodeError, StyleEncodeError
from .sources import StyleSource, PygmentsStyleSource, style_from_pygments, style_to_pygments

__all__ = [
    "CUSTOM_SAMPLE_NAME",
    "StyleCollection",
    "Registry",
    "get_registry",
    "set_registry",
    "lookup_style",
    "list_style_names",
    "StyleError",
    "StyleIOError",
    "StyleDecodeError",
    "StyleEncodeError",
    "StyleSource",
    "PygmentsStyleSource",
    "style_from_pygments",
    "style_to_pygments",
]
