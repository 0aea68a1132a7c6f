"""Standard styles supplied by an external highlighting library (Pygments)."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Protocol

from pygments.style import Style as PygmentsStyle
from pygments.styles import get_all_styles, get_style_by_name
from pygments.token import Token, string_to_tokentype
from pygments.util import ClassNotFound
import structlog

from models import Style, StyleEntry
from utils import normalize_color

logger = structlog.get_logger("histyles")

_FLAGS = ("bold", "italic", "underline")
_FONTS = ("roman", "sans", "mono")


class StyleSource(Protocol):
    """Read-only provider of standard styles, consulted once per registry init."""

    def snapshot(self) -> Mapping[str, Any]:
        ...

    def to_style(self, external: Any) -> Style:
        ...


def parse_style_definition(definition: str) -> StyleEntry:
    """Parse a Pygments definition such as 'bold #f00 bg:#fff noinherit'."""
    entry = StyleEntry()
    for part in definition.split():
        if part == "noinherit":
            entry.noinherit = True
        elif part in _FLAGS:
            setattr(entry, part, True)
        elif part.startswith("no") and part[2:] in _FLAGS:
            setattr(entry, part[2:], False)
        elif part in _FONTS:
            setattr(entry, part, True)
        elif part.startswith("bg:"):
            entry.bgcolor = normalize_color(part[3:])
        elif part.startswith("border:"):
            entry.border = normalize_color(part[7:])
        else:
            entry.color = normalize_color(part)
    return entry


def format_style_definition(entry: StyleEntry) -> str:
    """Inverse of parse_style_definition."""
    parts = []
    if entry.noinherit:
        parts.append("noinherit")
    for flag in _FLAGS:
        value = getattr(entry, flag)
        if value is not None:
            parts.append(flag if value else f"no{flag}")
    for font in _FONTS:
        if getattr(entry, font):
            parts.append(font)
    if entry.color:
        parts.append(entry.color)
    if entry.bgcolor:
        parts.append(f"bg:{entry.bgcolor}")
    if entry.border:
        parts.append(f"border:{entry.border}")
    return " ".join(parts)


def _token_type(name: str):
    # names are stored as str(ttype), e.g. "Token.Keyword.Constant"
    if name == "Token":
        return Token
    if name.startswith("Token."):
        name = name[len("Token."):]
    return string_to_tokentype(name)


def style_from_pygments(style_cls: type[PygmentsStyle]) -> Style:
    """Convert a Pygments style class, keeping only explicitly defined tokens."""
    tokens: Dict[str, StyleEntry] = {}
    for ttype, definition in style_cls.styles.items():
        if not definition:
            continue
        tokens[str(ttype)] = parse_style_definition(definition)
    return Style(
        background_color=normalize_color(style_cls.background_color or ""),
        highlight_color=normalize_color(style_cls.highlight_color or ""),
        tokens=tokens,
    )


def style_to_pygments(style: Style, name: str = "custom") -> type[PygmentsStyle]:
    """Build a Pygments style class so a formatter can use the style directly."""
    attrs: Dict[str, Any] = {
        "name": name,
        "styles": {
            _token_type(token): format_style_definition(entry)
            for token, entry in style.tokens.items()
        },
    }
    if style.background_color:
        attrs["background_color"] = style.background_color
    if style.highlight_color:
        attrs["highlight_color"] = style.highlight_color
    class_name = "".join(part.capitalize() for part in name.replace("_", "-").split("-")) or "Custom"
    return type(f"{class_name}Style", (PygmentsStyle,), attrs)


class PygmentsStyleSource:
    """All styles registered with Pygments, including plugin styles."""

    def snapshot(self) -> Dict[str, type[PygmentsStyle]]:
        styles: Dict[str, type[PygmentsStyle]] = {}
        for name in get_all_styles():
            try:
                styles[name] = get_style_by_name(name)
            except ClassNotFound:
                # broken plugin entry point
                logger.warning("pygments_style_unavailable", style=name)
        return styles

    def to_style(self, external: type[PygmentsStyle]) -> Style:
        return style_from_pygments(external)


__all__ = [
    "StyleSource",
    "PygmentsStyleSource",
    "parse_style_definition",
    "format_style_definition",
    "style_from_pygments",
    "style_to_pygments",
]
