"""FastAPI server exposing Wilson interval endpoints."""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from wilson_ci.config import settings
from wilson_ci.models.errors import InvalidArgument
from wilson_ci.models.wilson import WilsonResult, compute_wilson_interval
from wilson_ci.report.formatting import format_result, scale_sweep

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Wilson Interval", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


class IntervalRequest(BaseModel):
    successes: int = Field(ge=0)
    trials: int = Field(gt=0)
    confidence_level: float = Field(default=settings.confidence_level, gt=0.0, lt=1.0)


class SweepRequest(IntervalRequest):
    factors: list[int] = Field(default_factory=lambda: list(settings.scale_factors), min_length=1, max_length=64)


def _result_payload(result: WilsonResult) -> dict[str, Any]:
    payload = result.as_dict()
    payload["width"] = result.width
    payload["summary"] = format_result(result, precision=settings.report_precision)
    return payload


@app.middleware("http")
async def interval_response_middleware(request: Request, call_next):
    """Stamp interval responses with timing and content-type headers.

    Interval results depend only on the query, so GET responses are marked
    cacheable. Anything the handlers fail to map becomes a JSON 500.
    """

    t0 = time.perf_counter()
    try:
        response = await call_next(request)
    except HTTPException:
        raise
    except Exception as exc:
        LOGGER.exception("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    response.headers["X-Response-Time"] = f"{(time.perf_counter() - t0) * 1000.0:.3f}ms"
    if request.method == "GET" and request.url.path == "/interval" and response.status_code == 200:
        response.headers["Cache-Control"] = "public, max-age=86400"
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/interval")
def interval(payload: IntervalRequest) -> dict[str, Any]:
    t0 = time.perf_counter()
    try:
        result = compute_wilson_interval(payload.successes, payload.trials, payload.confidence_level)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    LOGGER.info("/interval %s/%s elapsed=%.3fs", payload.successes, payload.trials, time.perf_counter() - t0)
    return _result_payload(result)


@app.get("/interval")
def interval_get(
    successes: int = Query(..., ge=0),
    trials: int = Query(..., gt=0),
    confidence_level: float = Query(default=settings.confidence_level, gt=0.0, lt=1.0),
) -> dict[str, Any]:
    return interval(IntervalRequest(successes=successes, trials=trials, confidence_level=confidence_level))


@app.post("/sweep")
def sweep(payload: SweepRequest) -> dict[str, Any]:
    """Evaluate the interval across scaled counts with the proportion held fixed."""

    t0 = time.perf_counter()
    try:
        results = scale_sweep(payload.successes, payload.trials, payload.factors, payload.confidence_level)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    LOGGER.info(
        "/sweep %s/%s factors=%d elapsed=%.3fs",
        payload.successes,
        payload.trials,
        len(results),
        time.perf_counter() - t0,
    )
    return {
        "proportion": results[0].proportion,
        "confidence_level": payload.confidence_level,
        "rows": [{"factor": factor, **_result_payload(row)} for factor, row in zip(payload.factors, results)],
    }
