import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from db.repositories import RecordInUseError, RecordValidationError, StorageError

logger = logging.getLogger(__name__)


def _entity_for(request: Request) -> str:
    # Lo fija la dependencia del router de cada colección
    return getattr(request.state, "entity", "request")


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(messages)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "message": f"Invalid {_entity_for(request)} data",
                "error": _format_validation_errors(exc),
            },
        )

    @app.exception_handler(RecordInUseError)
    async def record_in_use_handler(request: Request, exc: RecordInUseError):
        return JSONResponse(status_code=409, content={"message": str(exc)})

    @app.exception_handler(RecordValidationError)
    async def record_validation_handler(request: Request, exc: RecordValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": f"Invalid {_entity_for(request)} data", "error": str(exc)},
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Error de almacenamiento en {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"message": "Server error", "error": str(exc)})
