from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from vibeforge.agent import DocumentSynthesizer
from vibeforge.config import Settings, load_settings
from vibeforge.llm import ModelClient, OpenAIModelClient
from vibeforge.logger import get_logger
from vibeforge.routes import router

logger = get_logger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Malformed request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


async def limit_body_size(request: Request, call_next):
    """Refuse request bodies larger than the configured limit"""
    limit = request.app.state.settings.max_body_bytes
    length = request.headers.get("content-length")

    if length is not None:
        try:
            size = int(length)
        except ValueError:
            return JSONResponse(
                status_code=400, content={"error": "Invalid Content-Length header."}
            )
    elif request.method in ("POST", "PUT", "PATCH"):
        # chunked upload: the body is cached for the route after this read
        size = len(await request.body())
    else:
        size = 0

    if size > limit:
        logger.warning(f"Rejected {size} byte body on {request.url.path} (limit {limit})")
        return JSONResponse(status_code=413, content={"error": "Request body too large."})
    return await call_next(request)


def create_app(
    settings: Settings, model_client: Optional[ModelClient] = None
) -> FastAPI:
    """Build the application: API routes first, static pages for everything else"""
    settings.generated_dir.mkdir(parents=True, exist_ok=True)

    app = FastAPI(
        title="VibeForge",
        description="Edit HTML pages with natural-language requests",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.synthesizer = DocumentSynthesizer(
        settings, model_client or OpenAIModelClient(settings)
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.middleware("http")(limit_body_size)

    app.include_router(router)
    app.mount(
        "/", StaticFiles(directory=settings.public_dir, html=True), name="static"
    )

    logger.info(f"Serving pages from {settings.public_dir}")
    return app


def main():
    settings = load_settings()
    app = create_app(settings)
    logger.info(f"Server listening on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
