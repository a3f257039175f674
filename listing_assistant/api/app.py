"""
FastAPI application exposing the assistant over HTTP.
"""
import json
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import get_config
from ..service import AssistantService
from ..logging_config import setup_logging


logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization", "X-Client-Info", "Apikey"]


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def create_app(service: Optional[AssistantService] = None) -> FastAPI:
    """Build the app; a service can be injected for tests."""
    config = get_config()
    setup_logging(config.server.log_level, config.server.json_logs)

    app = FastAPI(
        title="Listing Assistant API",
        description="Listing completeness scoring and AI-assisted listing suggestions",
        version=config.version,
    )

    # Wildcard origins by default; set LISTING_ASSISTANT_CORS_ORIGINS to scope down
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    app.state.service = service or AssistantService()

    @app.post("/assistant")
    async def assistant(request: Request) -> JSONResponse:
        """Dispatch one assistant action. Failures become 400 {"error": ...}."""
        try:
            payload = json.loads(await request.body() or b"null")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return _error(f"Invalid JSON body: {e}")

        try:
            result = await run_in_threadpool(app.state.service.handle, payload)
        except Exception as e:
            logger.warning(f"Request failed: {type(e).__name__}: {e}")
            return _error(str(e) or type(e).__name__)

        return JSONResponse(content=result)

    @app.get("/health")
    async def health() -> dict:
        """Liveness check."""
        return {
            "status": "healthy",
            "ai_available": app.state.service.assistant.ai_available,
            "version": config.version,
        }

    return app


app = create_app()
