from fastapi import APIRouter

from histyles import get_registry

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    reg = get_registry()
    return {"ok": True, "styles_initialized": reg.initialized}
