import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, load_settings
from database import Base, make_engine, make_session_factory
from routers import (
    admin,
    auth,
    registrations,
    messages,
    images,
    pages,
)

logger = logging.getLogger(__name__)


def error_envelope(status_code: int, detail, headers=None, **extra) -> JSONResponse:
    if isinstance(detail, dict):
        content = {"success": False, **detail}
    else:
        content = {"success": False, "message": detail}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def is_api_path(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Settings default to the environment; the app refuses to
    start when the signing secret or admin password is missing.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    engine = make_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title="Festiverse")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Serve uploaded images
    os.makedirs(settings.upload_dir, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")

    # Unmatched API paths get the JSON envelope, everything else the 404 page
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and not is_api_path(request.url.path, settings.api_prefix):
            return pages.not_found_page(settings.public_dir)
        return error_envelope(exc.status_code, exc.detail, getattr(exc, "headers", None))

    # Missing or malformed body fields
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_envelope(
            400,
            "Validation error",
            errors=jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Storage failure on %s %s", request.method, request.url.path)
        return error_envelope(500, "Server Error")

    for module in (admin, auth, registrations, messages, images):
        app.include_router(module.router, prefix=settings.api_prefix)
    for module in (registrations, messages, images):
        app.include_router(module.admin_router, prefix=settings.api_prefix)
    app.include_router(pages.router)

    logger.info("Festiverse API ready (database: %s)", engine.url.render_as_string(hide_password=True))
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=int(os.getenv("PORT", 3000)))
