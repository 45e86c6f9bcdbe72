"""TheraNote Compliance API.

Evaluates session documentation against NYC DOE / NYSED compliance
rules: the 7-day signing deadline, SOAP completeness, goal progress
tracking and IEP service frequency. The caller posts the records it
has already fetched; nothing is persisted here.

Run with:
    python3 -m uvicorn theranote.main:app --host 0.0.0.0 --port 8000
"""

import json
from pathlib import Path
from typing import Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from theranote.compliance.engine import ComplianceEngine
from theranote.errors import (
    SessionAlreadySignedError,
    SignValidationError,
    UnknownRuleError,
)
from theranote.logging_config import configure_logging
from theranote.models import ComplianceConfig
from theranote.routes import compliance, rules, sessions

# Resolve the data/ directory relative to this file so the server works
# regardless of which directory uvicorn is launched from.
DATA_DIR = Path(__file__).parent.parent / "data"

configure_logging()
logger = structlog.get_logger(__name__)

app = FastAPI(
    title="TheraNote Compliance API",
    description=(
        "Documentation compliance checks for therapy session notes. "
        "Flags unsigned and incomplete notes, missing goal progress and "
        "under-delivered IEP services, and scores overall compliance."
    ),
    version="1.0.0",
)


def load_config(path: Path) -> ComplianceConfig:
    """Load rule thresholds from JSON, falling back to the defaults."""
    if path.exists():
        with open(path, "r") as f:
            return ComplianceConfig(**json.load(f))
    return ComplianceConfig()


@app.on_event("startup")
async def startup() -> None:
    """Load rule configuration and initialize the compliance engine."""
    config = load_config(DATA_DIR / "rules_config.json")
    engine = ComplianceEngine(config=config)

    # Attach to app state for dependency injection in routes
    app.state.engine = engine
    app.state.config = config
    logger.info("compliance_engine_ready", **config.model_dump())


@app.exception_handler(SignValidationError)
async def sign_validation_handler(request: Request, exc: SignValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": {"session_id": exc.session_id, "errors": exc.errors}},
    )


@app.exception_handler(SessionAlreadySignedError)
async def already_signed_handler(request: Request, exc: SessionAlreadySignedError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(UnknownRuleError)
async def unknown_rule_handler(request: Request, exc: UnknownRuleError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# Mount all API routers
app.include_router(compliance.router)
app.include_router(sessions.router)
app.include_router(rules.router)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy"}
