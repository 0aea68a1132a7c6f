"""Environment-driven settings for the style registry."""
from __future__ import annotations

import os
from pathlib import Path

import platformdirs
from dotenv import load_dotenv
from pydantic import BaseModel

APP_NAME = "hi-styles"

# Name of the preferences file holding the custom styles
PREFS_STYLES_FILENAME = "hi_styles.json"

# Fallback style when a lookup misses; can be set to any standard style name
DEFAULT_STYLE_NAME = "emacs"


class HistylesSettings(BaseModel):
    app_name: str = APP_NAME
    prefs_dir: Path | None = None  # None -> platform config dir for app_name
    prefs_filename: str = PREFS_STYLES_FILENAME
    default_style_name: str = DEFAULT_STYLE_NAME
    front_origin: str = "http://localhost:3000"

    def resolved_prefs_dir(self) -> Path:
        if self.prefs_dir is not None:
            return Path(self.prefs_dir)
        return Path(platformdirs.user_config_dir(self.app_name))

    def prefs_path(self) -> Path:
        return self.resolved_prefs_dir() / self.prefs_filename


def load_settings() -> HistylesSettings:
    """Build settings from the process environment (and a .env file if present)."""
    load_dotenv()
    prefs_dir = os.getenv("HISTYLES_PREFS_DIR")
    return HistylesSettings(
        app_name=os.getenv("HISTYLES_APP_NAME", APP_NAME),
        prefs_dir=Path(prefs_dir) if prefs_dir else None,
        prefs_filename=os.getenv("HISTYLES_PREFS_FILENAME", PREFS_STYLES_FILENAME),
        default_style_name=os.getenv("HISTYLES_DEFAULT_STYLE", DEFAULT_STYLE_NAME),
        front_origin=os.getenv("HISTYLES_FRONT_ORIGIN", "http://localhost:3000"),
    )


__all__ = [
    "APP_NAME",
    "PREFS_STYLES_FILENAME",
    "DEFAULT_STYLE_NAME",
    "HistylesSettings",
    "load_settings",
]
