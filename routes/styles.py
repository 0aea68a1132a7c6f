# routes/styles.py
# FastAPI router exposing the highlighting style registry to editor front-ends.

from fastapi import APIRouter, HTTPException, Body

from histyles import (
    StyleDecodeError,
    StyleEncodeError,
    StyleError,
    StyleIOError,
    get_registry,
)
from models import FilePathBody, RegistryState, Style, StyleNamesResponse

router = APIRouter(prefix="/api/styles", tags=["styles"])


def _raise_http(exc: StyleError) -> None:
    # Translate registry errors into HTTP errors for the caller.
    if isinstance(exc, StyleIOError):
        status = 404 if exc.missing else 500
        raise HTTPException(status_code=status, detail={"where": "io", "path": exc.path, "error": str(exc)}) from exc
    if isinstance(exc, StyleDecodeError):
        raise HTTPException(status_code=422, detail={"where": "decode", "path": exc.path, "error": str(exc)}) from exc
    if isinstance(exc, StyleEncodeError):
        raise HTTPException(status_code=500, detail={"where": "encode", "error": str(exc)}) from exc
    raise HTTPException(status_code=500, detail=str(exc)) from exc


def _state() -> RegistryState:
    reg = get_registry()
    reg.ensure_initialized()
    return RegistryState(
        dirty=reg.dirty,
        can_save=reg.dirty,
        prefs_path=str(reg.prefs_path),
        default_style=reg.default_style_name,
        standard_count=len(reg.standard),
        custom_count=len(reg.custom),
        available_count=len(reg.available),
    )


@router.get("", response_model=StyleNamesResponse)
def list_styles():
    reg = get_registry()
    return StyleNamesResponse(default=reg.default_style_name, items=reg.list_names())


@router.get("/state", response_model=RegistryState)
def get_state():
    return _state()


@router.get("/standard")
def view_standard():
    # Read-only: the standard styles come from Pygments and are never saved.
    styles = get_registry().view_standard()
    return {"ok": True, "items": {name: styles[name].to_document() for name in sorted(styles)}}


@router.get("/custom")
def list_custom():
    styles = get_registry().view_custom()
    return {"ok": True, "items": {name: styles[name].to_document() for name in sorted(styles)}}


@router.put("/custom/{name}")
def put_custom(name: str, style: Style):
    get_registry().set_custom_style(name, style)
    return {"ok": True, "name": name, "state": _state()}


@router.delete("/custom/{name}")
def delete_custom(name: str):
    reg = get_registry()
    try:
        reg.delete_custom_style(name)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="custom style not found") from exc
    return {"ok": True, "name": name, "state": _state()}


@router.post("/changed")
def mark_changed():
    """Flag custom styles as edited (enables the save action)."""
    get_registry().mark_changed()
    return {"ok": True, "state": _state()}


@router.post("/prefs/open")
def open_prefs():
    reg = get_registry()
    reg.ensure_initialized()
    try:
        reg.open_prefs()
    except StyleError as exc:
        _raise_http(exc)
    return {"ok": True, "state": _state()}


@router.post("/prefs/save")
def save_prefs():
    reg = get_registry()
    reg.ensure_initialized()
    try:
        reg.save_prefs()
    except StyleError as exc:
        _raise_http(exc)
    return {"ok": True, "state": _state()}


@router.post("/file/open")
def open_file(body: FilePathBody = Body(...)):
    reg = get_registry()
    reg.ensure_initialized()
    try:
        reg.open_file(body.path)
    except StyleError as exc:
        _raise_http(exc)
    return {"ok": True, "path": body.path, "state": _state()}


@router.post("/file/save")
def save_file(body: FilePathBody = Body(...)):
    reg = get_registry()
    reg.ensure_initialized()
    try:
        reg.save_file(body.path)
    except StyleError as exc:
        _raise_http(exc)
    return {"ok": True, "path": body.path, "state": _state()}


@router.get("/{name}")
def get_style(name: str):
    # Unknown names fall back to the default style, like every other lookup.
    resolved, style = get_registry().resolve(name)
    return {
        "ok": True,
        "name": name,
        "resolved_name": resolved,
        "fallback": resolved != name,
        "item": style.to_document(),
    }
