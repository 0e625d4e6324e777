# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the AskBoard API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run askboard
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.exceptions import (
    AskBoardException,
    askboard_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.middleware import ForbiddingCORSMiddleware
from app.routers import answers, health, questions
from core.services.store import Store
from lib.seed import SeedLoadError, load_seed_questions

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Seed the store from settings.SEED_FILE. A missing or
      malformed seed document raises SeedLoadError and aborts startup.
    - Shutdown: Nothing to flush; the store lives only in memory.
    """
    logger.info(f"Starting AskBoard API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    try:
        seed = load_seed_questions(settings.SEED_FILE)
    except SeedLoadError as e:
        logger.error(f"Cannot start without seed questions: {e.to_dict()}")
        raise

    app.state.store = Store.from_seed(seed)
    logger.info(f"Store seeded with {await app.state.store.count()} questions")

    yield

    logger.info("Shutting down AskBoard API")


# Create FastAPI application
app = FastAPI(
    title="AskBoard API",
    description="""
## Questions & Answers API

An in-memory question board. Questions can be listed, paginated, created,
replaced and deleted; answers can be posted against a question.

### Quick Start

```bash
# List questions (optionally paginated)
curl "http://127.0.0.1:3030/questions?start=0&end=2"

# Add a question
curl -X POST http://127.0.0.1:3030/questions \\
  -H "Content-Type: application/json" \\
  -d '{"id": "4", "title": "New", "content": "How?", "tags": ["faq"]}'

# Answer it
curl -X POST http://127.0.0.1:3030/answers -d "content=Like this&questionId=4"
```

All data is lost when the server stops.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Questions",
            "description": "Create, list, replace and delete questions",
        },
        {
            "name": "Answers",
            "description": "Post answers to questions",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - rejected preflights become 403 CORS_FORBIDDEN
app.add_middleware(
    ForbiddingCORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=settings.cors_methods_list,
    allow_headers=settings.cors_headers_list,
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(AskBoardException, askboard_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Question endpoints
app.include_router(
    questions.router,
    prefix="/questions",
    tags=["Questions"]
)

# Answer endpoints
app.include_router(
    answers.router,
    prefix="/answers",
    tags=["Answers"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "AskBoard API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


def run() -> None:
    """Serve the API on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
