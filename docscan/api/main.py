from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..core.config import Settings, settings as default_settings
from ..core.logging import setup_logging
from ..services.gemini import GeminiClient
from ..services.inference_base import InferenceBackend
from .routers import document, health


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # errors() may carry raw bytes inputs for multipart bodies
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def create_app(settings: Settings | None = None, backend: InferenceBackend | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Configuration; defaults to values read from the environment / .env
        backend: Inference backend; defaults to a GeminiClient built from settings
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title="docscan")
    app.state.settings = settings
    app.state.inference_backend = backend or GeminiClient(settings)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # CORS_ORIGINS can be "*" or a comma-separated list
    # Example: CORS_ORIGINS=http://localhost:3000,https://your-frontend.com
    allowed_origins = [origin.strip() for origin in settings.cors_origins.split(",")]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(document.router)

    # Mounted last so API routes take precedence over the front-end
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info("Serving static front-end", directory=str(static_dir))

    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY not set - /analyze requests will fail until it is configured")

    return app


app = create_app()


def run():
    import uvicorn

    logger.info(f"Server running on http://localhost:{default_settings.port}")
    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_config=None)
