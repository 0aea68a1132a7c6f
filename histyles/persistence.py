"""JSON persistence for style collections."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping

import structlog
from pydantic import ValidationError

from histyles.errors import StyleDecodeError, StyleEncodeError, StyleIOError
from models import Style
from utils import atomic_write_text

logger = structlog.get_logger("histyles")


def dumps_styles(styles: Mapping[str, Style]) -> str:
    """Serialize name -> Style as indented JSON with sorted keys."""
    try:
        payload = {name: styles[name].to_document() for name in sorted(styles)}
        return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise StyleEncodeError(f"cannot encode styles: {exc}") from exc


def loads_styles(text: str, path: str | Path | None = None) -> Dict[str, Style]:
    """Parse a JSON object of name -> style document."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StyleDecodeError(path, f"malformed JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise StyleDecodeError(path, "top level must be a JSON object of named styles")

    styles: Dict[str, Style] = {}
    for name, doc in raw.items():
        if not name:
            raise StyleDecodeError(path, "style names must be non-empty")
        if not isinstance(doc, dict):
            raise StyleDecodeError(path, f"style {name!r} must be a JSON object")
        try:
            styles[name] = Style.model_validate(doc)
        except ValidationError as exc:
            raise StyleDecodeError(path, f"invalid style {name!r}: {exc}") from exc
    return styles


def read_styles(path: str | Path) -> Dict[str, Style]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StyleIOError(path, exc.strerror or str(exc), missing=isinstance(exc, FileNotFoundError)) from exc
    except UnicodeDecodeError as exc:
        raise StyleDecodeError(path, f"not UTF-8 text: {exc}") from exc
    styles = loads_styles(text, path)
    logger.info("styles_file_read", path=str(path), count=len(styles))
    return styles


def write_styles(path: str | Path, styles: Mapping[str, Style]) -> None:
    path = Path(path)
    text = dumps_styles(styles)
    try:
        atomic_write_text(path, text)
    except OSError as exc:
        logger.error("styles_file_write_failed", path=str(path), error=str(exc))
        raise StyleIOError(path, exc.strerror or str(exc)) from exc
    logger.info("styles_file_written", path=str(path), count=len(styles))


__all__ = ["dumps_styles", "loads_styles", "read_styles", "write_styles"]
