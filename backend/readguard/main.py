"""FastAPI application (read-only).

- Bearer-token authentication; the token's role picks the readable attributes
- Every record leaves the API through a role-bound `RecordReader`
- Request-id propagation and access logs that say how much each role was shown
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from readguard.api.router import router as api_router
import readguard.models as _models  # noqa: F401  (register models and their readable declarations)


logger = logging.getLogger("readguard")
logger.setLevel(logging.INFO)


def access_record(request: Request, response: Response, request_id: str, duration_ms: int) -> dict[str, Any]:
    """Access-log payload. Attribute counts only, never names or values."""
    record: dict[str, Any] = {
        "event": "access",
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "status_code": response.status_code,
        "duration_ms": duration_ms,
    }
    reader = getattr(request.state, "record_reader", None)
    if reader is not None:
        record.update(reader.log_fields())
    return record


def create_app() -> FastAPI:
    app = FastAPI(
        title="readguard",
        version="0.1.0",
        openapi_url="/openapi.json",
        docs_url=None,
        redoc_url=None,
        description="Role-filtered, read-only access to records.",
    )

    app.include_router(api_router)

    @app.middleware("http")
    async def request_id_and_access_log(request: Request, call_next: Callable):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        start = time.time()
        try:
            response = await call_next(request)
        except OperationalError:
            logger.warning("database unavailable", extra={"request_id": request_id})
            return JSONResponse(
                status_code=503,
                content={"detail": "Service temporarily unavailable."},
                headers={"x-request-id": request_id},
            )
        except Exception:  # noqa: BLE001
            logger.exception("Unhandled error", extra={"request_id": request_id})
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal error."},
                headers={"x-request-id": request_id},
            )

        response.headers["x-request-id"] = request_id
        duration_ms = int((time.time() - start) * 1000)
        logger.info(json.dumps(access_record(request, response, request_id, duration_ms)))
        return response

    return app


app = create_app()
