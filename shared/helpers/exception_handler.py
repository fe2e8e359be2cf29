import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already packs a failure result into detail
        if isinstance(exc.detail, dict) and {"status", "status_code", "message"}.issubset(exc.detail.keys()):
            return JSONResponse(content=exc.detail, status_code=exc.status_code or 400)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=str(AppStatusCode.OPERATION_FAILED),
            message=str(exc.detail)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=exc.status_code or 400)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=str(AppStatusCode.INVALID_INPUT),
            message=str(exc)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=422)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=str(AppStatusCode.OPERATION_FAILED),
            message=str(exc)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=500)
