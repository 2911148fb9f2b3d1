"""
FSEQ Validator Service
======================

FastAPI entry point exposing the validator over HTTP.

Endpoints:
    GET  /          - Service information
    GET  /health    - Liveness probe
    POST /validate  - Validate a sequence sent as the raw request body
"""

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from fseq_validator import __version__
from fseq_validator.config import settings
from fseq_validator.fseq.reader import FseqError
from fseq_validator.messages import build_error_messages
from fseq_validator.validator import Validator


logger = logging.getLogger(__name__)


# =============================================================================
# Application
# =============================================================================

app = FastAPI(
    title="FSEQ Validator",
    description="Pre-playback validation of FSEQ v2 light-show sequences",
    version=__version__,
)

_validator = Validator(settings.validation)
_startup_time = time.time()
_validation_count = 0


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information."""
    return JSONResponse({
        "service": "fseq-validator",
        "version": __version__,
        "memory_limit": settings.validation.memory_limit,
        "max_duration_ms": settings.validation.max_duration_ms,
        "channel_count": settings.validation.required_channel_count,
    })


@app.get("/health")
async def health() -> JSONResponse:
    """Liveness probe."""
    return JSONResponse({
        "status": "ok",
        "uptime_seconds": round(time.time() - _startup_time, 1),
        "validations": _validation_count,
    })


@app.post("/validate")
async def validate_sequence(request: Request) -> JSONResponse:
    """Validate the raw request body as a sequence file."""
    global _validation_count

    data = await request.body()

    try:
        result = await run_in_threadpool(_validator.validate, data)
    except FseqError as e:
        logger.warning(f"Rejected truncated upload ({len(data)} bytes): {e}")
        return JSONResponse({"error": "truncated_frame_data", "detail": str(e)}, status_code=422)

    _validation_count += 1

    return JSONResponse({
        "valid": result.is_valid,
        "result": result.model_dump(mode="json"),
        "messages": build_error_messages(result, settings.validation),
    })


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", settings.server.port))

    uvicorn.run(
        "fseq_validator.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
