"""
FastAPI application for TubeSummarize.
"""

import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tubesummarize.config import config
from tubesummarize.api.routes import router
from tubesummarize.core.errors import ErrorKind, TubeSummarizeError, UpstreamError, UpstreamReason
from tubesummarize.core.orchestrator import create_orchestrator
from tubesummarize.utils.logger import logging

ERROR_STATUS = {
    ErrorKind.INVALID_URL: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CAPTIONS_UNAVAILABLE: 404,
    ErrorKind.VIDEO_TOO_LONG: 422,
    ErrorKind.UPSTREAM: 502,
}

UPSTREAM_STATUS = {
    UpstreamReason.AUTH: 502,
    UpstreamReason.RATE_LIMIT: 429,
    UpstreamReason.TIMEOUT: 504,
    UpstreamReason.GENERIC: 502,
}

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for extracting and summarizing YouTube video transcripts",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Initialize components on application startup."""
    if getattr(app.state, "orchestrator", None) is None:
        app.state.orchestrator = create_orchestrator()
    logging.info(f"{config.APP_NAME} started with {len(app.state.orchestrator.store)} videos in history")


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


def status_for_error(exc: TubeSummarizeError) -> int:
    """Map an error to the HTTP status returned to the client."""
    if isinstance(exc, UpstreamError):
        return UPSTREAM_STATUS[exc.reason]
    return ERROR_STATUS[exc.kind]


@app.exception_handler(TubeSummarizeError)
async def tubesummarize_exception_handler(request: Request, exc: TubeSummarizeError):
    """Render core errors with their kind so clients can tell them apart."""
    content = {"detail": exc.message, "kind": exc.kind.value}
    if isinstance(exc, UpstreamError):
        content["reason"] = exc.reason.value
        content["dependency"] = exc.dependency
    logging.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_for_error(exc), content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": f"An unexpected error occurred: {str(exc)}"},
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube transcript extraction and summarization API",
    }
