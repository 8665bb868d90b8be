"""
Merkle Commit - FastAPI Application Entry Point.

Computes Merkle Roots over ordered items and verifies membership proofs.
"""

import json
import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .api import merkle_router
from .config import get_settings
from .merkle import MerkleError


# ============================================================================
# JSON LOGGING SETUP
# ============================================================================

class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in ["endpoint", "action", "leaf_count", "proof_length",
                    "valid", "error"]:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


def setup_json_logging(level: str = "INFO") -> logging.Logger:
    """Configure JSON logging on the root logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("merkle_commit")


logger = setup_json_logging(get_settings().log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Merkle Commit service", extra={"action": "startup"})
    yield
    logger.info("Shutting down Merkle Commit service", extra={"action": "shutdown"})


app = FastAPI(
    title="Merkle Commit",
    description="""
# Merkle Root Commitments

- **Root**: `POST /merkle/root` with an ordered list of items
- **Layers**: `POST /merkle/layers` to materialize intermediate nodes
- **Verify**: `POST /merkle/verify` with an item, its sibling proof and a root

Digests are 32-byte Keccak-256 values, exchanged as `0x`-prefixed hex.
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(merkle_router)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API information."""
    settings = get_settings()
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "root": "/merkle/root",
            "layers": "/merkle/layers",
            "verify": "/merkle/verify",
        },
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.exception_handler(MerkleError)
async def merkle_exception_handler(request, exc: MerkleError):
    """Reject input that cannot be committed to."""
    logger.warning(
        f"Rejected request: {exc}",
        extra={"endpoint": request.url.path, "error": exc.code},
    )
    return JSONResponse(
        status_code=400,
        content={
            "error": exc.code,
            "detail": str(exc),
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


# CLI entry point for running with uvicorn
def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "merkle_commit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
