from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diagnostic.infrastructure.config import get_settings
from diagnostic.infrastructure.exceptions import (
    ConfigurationError,
    DiagnosticError,
    ExportError,
    MultipleValidationError,
    ResponseError,
    ValidationError,
    log_error_details,
)
from diagnostic.infrastructure.logging import get_logger
from diagnostic.web.routes import api

logger = get_logger(__name__)

UNPROCESSABLE = (ValidationError, MultipleValidationError, ResponseError)
SERVER_SIDE = (ExportError, ConfigurationError)


def _status_for(exc: DiagnosticError) -> int:
    if isinstance(exc, UNPROCESSABLE):
        return 422
    if isinstance(exc, SERVER_SIDE):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


async def diagnostic_error_handler(request: Request, exc: DiagnosticError) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error("Request failed", extra=log_error_details(exc, {"path": request.url.path}))
    else:
        logger.warning("Rejected request to %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.user_message,
            "error": type(exc).__name__,
            "details": jsonable_encoder(exc.details),
        },
    )


def create_application() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app.title,
        version=settings.app.version,
        debug=settings.app.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_origins,
        allow_credentials=True,
        allow_methods=settings.security.cors_methods,
        allow_headers=["*"],
    )

    app.add_exception_handler(DiagnosticError, diagnostic_error_handler)
    app.include_router(api.router)

    return app


app = create_application()
