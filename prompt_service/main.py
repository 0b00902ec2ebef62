"""Main FastAPI application entry point."""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from prompt_service import logging_client
from prompt_service.config import settings
from prompt_service.dependencies import close_completion_gateway, get_prompt_repository
from prompt_service.exceptions import InvalidInputError
from prompt_service.models.responses import HealthResponse

# Initialize logger
logger = logging_client.setup_logger('prompt-service')


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Bootstrap the prompt store on startup, release the gateway on shutdown."""
    repository = get_prompt_repository()
    logger.info(f"📁 Prompts: {repository.root}")
    try:
        written = await repository.bootstrap()
        if written:
            logger.info(f"Created default prompts: {', '.join(written)}")
        else:
            logger.info("All default prompts already exist")
    except Exception as e:
        logger.error(f"Failed to bootstrap prompt store: {e}")
        raise

    logger.info(f"🚀 {settings.APP_NAME} ready on port {settings.PORT}")
    yield

    await close_completion_gateway()
    logger.info("Shutting down")


app = FastAPI(title=settings.APP_NAME, version=settings.VERSION, lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):
    """Reject bodies above MAX_REQUEST_BYTES based on Content-Length."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > settings.MAX_REQUEST_BYTES:
        logger.warning(f"Rejected {request.method} {request.url.path}: {content_length} bytes")
        return JSONResponse(
            status_code=413,
            content={"detail": {"error": "Request body too large", "code": "payload_too_large"}}
        )
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as InvalidInput (400) rather than 422."""
    error = InvalidInputError(f"Invalid request: {exc.errors()}")
    return JSONResponse(status_code=error.status_code, content={"detail": error.to_detail()})


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return HealthResponse(
        status="OK",
        service=settings.APP_NAME,
        version=settings.VERSION
    )


# Register API routers
from prompt_service.api import assistant, prompts  # noqa: E402
app.include_router(prompts.router)
app.include_router(assistant.router)


def mount_frontend(app: FastAPI, public_dir: Optional[Union[str, Path]]) -> bool:
    """
    Serve a built browser client from ``public_dir`` when it exists.

    Files are served as-is; any other non-API path falls back to index.html
    so client-side routes work. Must be registered after the API routers.

    Returns:
        True if the client was mounted
    """
    if not public_dir:
        return False

    public_path = Path(public_dir).resolve()
    if not public_path.is_dir():
        return False

    index_file = public_path / "index.html"

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        if full_path.startswith("api") or full_path.startswith("health"):
            raise HTTPException(status_code=404, detail={"error": "Not found", "code": "not_found"})

        candidate = (public_path / full_path).resolve()
        if candidate.is_file() and candidate.is_relative_to(public_path):
            return FileResponse(candidate)

        if not index_file.is_file():
            raise HTTPException(status_code=404, detail={"error": "Not found", "code": "not_found"})
        return FileResponse(index_file)

    logger.info(f"📱 Frontend served from {public_path}")
    return True


mount_frontend(app, settings.PUBLIC_DIR)

logger.info("📦 Prompt service module loaded")
