# app.py
# FastAPI backend for the highlighting style registry.
# - Standard styles come from Pygments, custom styles from the prefs file
# - Custom styles override standard ones of the same name
# - Editors call the /api/styles endpoints to list, look up, edit and save styles

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from histyles import Registry, set_registry
from histyles.config import load_settings

# --- Configure structlog + stdlib logging
logging.basicConfig(format="%(message)s", level=logging.INFO,)
structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO), processors=[structlog.processors.TimeStamper(fmt="iso"), structlog.processors.JSONRenderer(), ],)
logger = structlog.get_logger("app")

# ----------------------------
# Environment & settings
# ----------------------------

settings = load_settings()

registry = Registry.from_settings(settings)
set_registry(registry)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Load styles up front so the first request does not pay for it.
    registry.ensure_initialized()
    logger.info("styles_ready", prefs_path=str(registry.prefs_path), default_style=registry.default_style_name)
    yield


# ----------------------------
# FastAPI app
# ----------------------------
from routes.styles import router as styles_router
from routes.health import router as health_router

app = FastAPI(title="hi-styles: highlighting style registry", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.front_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(styles_router)
app.include_router(health_router)
