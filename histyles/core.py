"""Style collections and the registry merging standard and custom styles."""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional

import structlog

from histyles.config import DEFAULT_STYLE_NAME, HistylesSettings, load_settings
from histyles.errors import StyleError
from histyles.persistence import dumps_styles, loads_styles, read_styles, write_styles
from histyles.sources import PygmentsStyleSource, StyleSource
from models import Style
from utils import sorted_names

logger = structlog.get_logger("histyles")

CUSTOM_SAMPLE_NAME = "custom-sample"


class StyleCollection(dict[str, Style]):
    """Mapping of style name -> Style. Iteration order is not meaningful."""

    def from_external(self, source: Mapping[str, Any], to_style: Callable[[Any], Style]) -> None:
        self.clear()
        for name, external in source.items():
            self[name] = to_style(external)

    def copy_from(self, other: Mapping[str, Style]) -> None:
        """Additive merge: entries of other replace same-named entries here."""
        for name, style in other.items():
            self[name] = style.copy_style()

    def names(self) -> List[str]:
        return list(self.keys())

    def copy_collection(self) -> "StyleCollection":
        out = StyleCollection()
        out.copy_from(self)
        return out

    def to_json(self) -> str:
        return dumps_styles(self)

    def replace_with(self, styles: Mapping[str, Style]) -> None:
        self.clear()
        self.update(styles)

    def load_json(self, path: str | Path) -> None:
        # parse fully before touching the receiver so a failure leaves it as-is
        self.replace_with(read_styles(path))

    def save_json(self, path: str | Path) -> None:
        write_styles(path, self)

    @classmethod
    def from_json(cls, text: str) -> "StyleCollection":
        out = cls()
        out.replace_with(loads_styles(text))
        return out


class Registry:
    """Standard, custom and merged ("available") highlighting styles.

    ``standard`` is snapshotted from the style source at init and never saved.
    ``custom`` is the user's collection, persisted to the preferences file.
    ``available`` is standard + custom (custom wins) and is what lookups read;
    it is rebuilt by ``merge_available`` and must not be edited directly.
    """

    def __init__(
        self,
        source: Optional[StyleSource] = None,
        prefs_path: Optional[str | Path] = None,
        default_style_name: str = DEFAULT_STYLE_NAME,
    ) -> None:
        self.source: StyleSource = source if source is not None else PygmentsStyleSource()
        self.prefs_path = Path(prefs_path) if prefs_path is not None else load_settings().prefs_path()
        self.default_style_name = default_style_name
        self.standard = StyleCollection()
        self.custom = StyleCollection()
        self.available = StyleCollection()
        self.names: List[str] = []
        self.dirty = False
        self._initialized = False
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: HistylesSettings, source: Optional[StyleSource] = None) -> "Registry":
        return cls(
            source=source,
            prefs_path=settings.prefs_path(),
            default_style_name=settings.default_style_name,
        )

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ----------------------------
    # Initialization & merge
    # ----------------------------

    def init(self) -> None:
        """Load standard styles, then custom ones from prefs, then merge."""
        with self._lock:
            self.standard.from_external(self.source.snapshot(), self.source.to_style)
            try:
                self.custom.load_json(self.prefs_path)
            except StyleError as exc:
                # no custom styles yet (or unreadable prefs): start from the seed
                logger.info("custom_styles_load_failed", path=str(self.prefs_path), error=str(exc))
            if not self.custom:
                self.custom[CUSTOM_SAMPLE_NAME] = self._default_standard_copy()
                logger.info("custom_styles_seeded", name=CUSTOM_SAMPLE_NAME, based_on=self.default_style_name)
            self.merge_available()
            self.dirty = False
            self._initialized = True
            logger.info(
                "styles_initialized",
                standard=len(self.standard),
                custom=len(self.custom),
                available=len(self.available),
            )

    def ensure_initialized(self) -> None:
        with self._lock:
            if not self._initialized:
                self.init()

    def merge_available(self) -> None:
        with self._lock:
            available = StyleCollection()
            available.copy_from(self.standard)
            available.copy_from(self.custom)
            self.available = available
            self.names = sorted_names(available)
            logger.debug("styles_merged", count=len(self.names))

    def _default_standard_copy(self) -> Style:
        base = self.standard.get(self.default_style_name)
        if base is None:
            logger.warning("default_style_missing", name=self.default_style_name, collection="standard")
            return Style()
        return base.copy_style()

    # ----------------------------
    # Lookup
    # ----------------------------

    def lookup(self, name: str) -> Style:
        """Style by name from available, falling back to the default style."""
        return self.resolve(name)[1]

    def resolve(self, name: str) -> tuple[str, Style]:
        """Like lookup, also returning the name that was actually used."""
        with self._lock:
            self.ensure_initialized()
            style = self.available.get(name)
            if style is not None:
                return name, style
            style = self.available.get(self.default_style_name)
            if style is not None:
                return self.default_style_name, style
            logger.warning("default_style_missing", name=self.default_style_name, collection="available")
            return self.default_style_name, Style()

    def list_names(self) -> List[str]:
        with self._lock:
            self.ensure_initialized()
            return list(self.names)

    def view_standard(self) -> StyleCollection:
        """Read-only copy of the standard styles for display."""
        with self._lock:
            self.ensure_initialized()
            return self.standard.copy_collection()

    def view_custom(self) -> StyleCollection:
        with self._lock:
            self.ensure_initialized()
            return self.custom.copy_collection()

    # ----------------------------
    # Custom edits
    # ----------------------------

    def mark_changed(self) -> None:
        with self._lock:
            self.dirty = True

    def get_custom_style(self, name: str) -> Style:
        with self._lock:
            self.ensure_initialized()
            return self.custom[name].copy_style()

    def set_custom_style(self, name: str, style: Style) -> None:
        if not name:
            raise ValueError("style name must be non-empty")
        with self._lock:
            self.ensure_initialized()
            self.custom[name] = style.copy_style()
            self.mark_changed()
            self.merge_available()

    def delete_custom_style(self, name: str) -> None:
        with self._lock:
            self.ensure_initialized()
            del self.custom[name]
            self.mark_changed()
            self.merge_available()

    # ----------------------------
    # Persistence
    # ----------------------------

    def open_prefs(self) -> None:
        """Reload custom styles from the preferences file. Errors propagate."""
        self.open_file(self.prefs_path)

    def save_prefs(self) -> None:
        with self._lock:
            self.ensure_initialized()
            was_dirty = self.dirty
            self.dirty = False
            self.merge_available()
            try:
                self.prefs_path.parent.mkdir(parents=True, exist_ok=True)
                self.custom.save_json(self.prefs_path)
            except (StyleError, OSError):
                self.dirty = was_dirty
                raise
            logger.info("custom_styles_saved", path=str(self.prefs_path), count=len(self.custom))

    def open_file(self, path: str | Path) -> None:
        with self._lock:
            self.ensure_initialized()
            self.custom.load_json(path)
            self.dirty = False
            self.merge_available()
            logger.info("custom_styles_opened", path=str(path), count=len(self.custom))

    def save_file(self, path: str | Path) -> None:
        with self._lock:
            self.ensure_initialized()
            self.custom.save_json(path)
            self.dirty = False
            logger.info("custom_styles_saved", path=str(path), count=len(self.custom))


# ----------------------------
# Process-wide default registry
# ----------------------------

_default_registry: Optional[Registry] = None
_default_lock = threading.Lock()


def get_registry() -> Registry:
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = Registry.from_settings(load_settings())
        return _default_registry


def set_registry(registry: Optional[Registry]) -> None:
    """Replace the default registry (None resets it to be rebuilt lazily)."""
    global _default_registry
    with _default_lock:
        _default_registry = registry


def lookup_style(name: str) -> Style:
    return get_registry().lookup(name)


def list_style_names() -> List[str]:
    return get_registry().list_names()


__all__ = [
    "CUSTOM_SAMPLE_NAME",
    "StyleCollection",
    "Registry",
    "get_registry",
    "set_registry",
    "lookup_style",
    "list_style_names",
]
