from __future__ import annotations

import json
import logging
from time import perf_counter
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

logger = logging.getLogger("recipebook.request")


def _request_payload(request: Request, event: str, status_code: int, started: float) -> dict[str, object]:
    return {
        "event": event,
        "request_id": request.state.request_id,
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "duration_ms": round((perf_counter() - started) * 1000, 2),
        "user_id": getattr(request.state, "user_id", None),
    }


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Tags every request with an ``X-Request-ID`` and logs one JSON line for it."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id

        started = perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(json.dumps(_request_payload(request, "request_error", 500, started)))
            response = JSONResponse(
                status_code=500,
                content={"detail": "Internal server error", "request_id": request_id},
            )
        else:
            payload = json.dumps(_request_payload(request, "request_completed", response.status_code, started))
            if response.status_code >= 500:
                logger.error(payload)
            elif response.status_code >= 400:
                logger.warning(payload)
            else:
                logger.info(payload)

        response.headers["X-Request-ID"] = request_id
        return response
