from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request
from fastapi.responses import JSONResponse
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode
import json
from typing import Callable


class JsonResponseMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        # Skip docs/openapi endpoints
        if request.url.path.startswith(("/openapi", "/docs", "/redoc")):
            return await call_next(request)

        response = await call_next(request)

        # Only wrap successful JSON responses
        if 200 <= response.status_code < 400 and "application/json" in response.headers.get("content-type", ""):
            body_bytes = b""
            async for chunk in response.body_iterator:
                body_bytes += chunk

            async def body_gen():
                yield body_bytes

            response.body_iterator = body_gen()

            try:
                data = json.loads(body_bytes.decode("utf-8"))
            except ValueError:
                return response  # non-JSON, return as-is

            # Skip if already wrapped
            if isinstance(data, dict) and {"status", "status_code", "message"}.issubset(data.keys()):
                return response

            wrapped = JsonOutResult(
                data=data,
                status="Success",
                status_code=str(AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY),
                message="Data retrieved successfully"
            ).model_dump()

            return JSONResponse(
                content=wrapped,
                status_code=response.status_code,
                headers={k: v for k, v in response.headers.items()
                         if k.lower() != "content-length"}
            )

        return response
