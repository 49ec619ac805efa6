from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mazegrid.api.errors import ApiErrorCode, ApiException, make_error_payload
from mazegrid.api.router import build_api_router
from mazegrid.core.config import get_settings
from mazegrid.core.constants import APP_VERSION
from mazegrid.core.logging import configure_logging
from mazegrid.core.middleware import REQUEST_ID_HEADER, RequestContextMiddleware

logger = structlog.get_logger(__name__)


def _request_id_from_request(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    return request_id if isinstance(request_id, str) and request_id else "unknown"


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: ApiErrorCode | str,
    message: str,
    details: object | None = None,
) -> JSONResponse:
    request_id = _request_id_from_request(request)
    return JSONResponse(
        status_code=status_code,
        headers={REQUEST_ID_HEADER: request_id},
        content={
            **make_error_payload(code=code, message=message, details=details),
            "request_id": request_id,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = jsonable_encoder(exc.errors())
        logger.warning(
            "request_validation_error",
            method=request.method,
            path=request.url.path,
            details=details,
        )
        return _error_response(
            request,
            status_code=422,
            code=ApiErrorCode.VALIDATION_ERROR,
            message="Invalid request",
            details=details,
        )

    @app.exception_handler(ApiException)
    async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
        # Missing difficulties or grids are ordinary client lookups, not server faults.
        log = logger.error if exc.status_code >= 500 else logger.info
        log(
            "api_exception",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code,
            code=exc.code,
            message=exc.message,
        )
        return _error_response(
            request,
            status_code=exc.status_code,
            code=exc.code,
            message=exc.message,
            details=exc.details,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        logger.info(
            "http_exception",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code,
            detail=message,
        )
        return _error_response(request, status_code=exc.status_code, code=ApiErrorCode.HTTP_ERROR, message=message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unhandled_exception",
            method=request.method,
            path=request.url.path,
        )
        return _error_response(
            request,
            status_code=500,
            code=ApiErrorCode.INTERNAL_ERROR,
            message="Internal server error",
        )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(title="Maze Grid Backend", version=APP_VERSION)
    app.state.process_started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)
    app.include_router(build_api_router(settings.api_prefix))

    logger.info(
        "app_initialized",
        service=settings.service_name,
        env=settings.env,
        grid_data_path=str(settings.grid_data_path),
        api_prefix=settings.api_prefix or "/",
    )
    return app


app = create_app()
