# /models.py
import re
from typing import Optional, Dict, List
from pydantic import BaseModel, Field, field_validator
from pygments.style import ansicolors

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


# ----------------------------
# Style data models
# ----------------------------

class StyleEntry(BaseModel):
    # Visual rule for one token category. None means "inherit from parent token".
    color: Optional[str] = None  # "#rrggbb", "#rgb", an ansi color name, var(...) or calc(...)
    bgcolor: Optional[str] = None
    border: Optional[str] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    roman: Optional[bool] = None
    sans: Optional[bool] = None
    mono: Optional[bool] = None
    noinherit: bool = False

    @field_validator("color", "bgcolor", "border")
    @classmethod
    def _check_color(cls, value: Optional[str]) -> Optional[str]:
        # same forms Pygments accepts when it builds a style class
        if value is None or value in ansicolors or _HEX_COLOR.fullmatch(value):
            return value
        if value.startswith(("var(", "calc(")) and value.endswith(")"):
            return value
        raise ValueError(f"unsupported color {value!r}")


class Style(BaseModel):
    """Highlighting style: per-token rules plus editor-wide colors."""

    background_color: Optional[str] = None
    highlight_color: Optional[str] = None
    tokens: Dict[str, StyleEntry] = Field(default_factory=dict)  # "Token.Keyword" -> entry

    def copy_style(self) -> "Style":
        """Independent deep copy, safe to mutate."""
        return self.model_copy(deep=True)

    def to_document(self) -> Dict[str, object]:
        """JSON-ready document with unset fields left out."""
        return self.model_dump(mode="json", exclude_none=True)


# ----------------------------
# API request / response bodies
# ----------------------------

class FilePathBody(BaseModel):
    path: str


class StyleNamesResponse(BaseModel):
    ok: bool = True
    default: str
    items: List[str] = []


class RegistryState(BaseModel):
    dirty: bool
    can_save: bool  # save action enabled only while there are unsaved edits
    prefs_path: str
    default_style: str
    standard_count: int
    custom_count: int
    available_count: int
