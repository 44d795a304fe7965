import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_settings
from src.rules.loader import load_rules
from src.rules.models import Rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _load_startup_rules() -> Rules:
    settings = get_settings()
    try:
        rules = load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"Rules load failed: {e}")
        sys.exit(1)
    logger.info(f"Rules loaded from {settings.rules_path}")
    return rules


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Fail fast on an invalid rules file
    _load_startup_rules()
    yield


app = FastAPI(
    title="Issue Docs Lab API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import adf, issues  # noqa: E402

app.include_router(adf.router, prefix="/api/adf", tags=["ADF"])
app.include_router(issues.router, prefix="/api/issues", tags=["Issues"])


# CORS origins come from the rules file; read once at import.
def _cors_origins() -> list[str]:
    settings = get_settings()
    if not settings.rules_path.exists():
        return []
    try:
        return load_rules(settings.rules_path).api.cors_origins
    except ValueError as e:
        # lifespan fails startup on the same file
        logger.warning(f"CORS origins unavailable: {e}")
        return []


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
