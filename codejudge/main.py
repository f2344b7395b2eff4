"""FastAPI app exposing the Judge0 execution client."""

from __future__ import annotations

import os
import re
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from codejudge.core.config import get_settings
from codejudge.core.log import configure_logging
from codejudge.features.execution.endpoints import router as execution_router

_settings = get_settings()
configure_logging(_settings.log_level)

app = FastAPI(title="codejudge")


# ------------------------
# CORS Setup
# ------------------------
def _split_env_csv(name: str, default: str = ""):
    raw = os.getenv(name, default)
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


_FRONTEND_ORIGINS = _split_env_csv(
    "ALLOW_ORIGINS",
    "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000",
)

_CORS_ORIGIN_REGEX = re.compile(r"https?://(localhost|127\.0\.0\.1)(:\d+)?", re.I)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_FRONTEND_ORIGINS,
    allow_origin_regex=_CORS_ORIGIN_REGEX.pattern,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    from time import perf_counter

    t0 = perf_counter()
    resp = await call_next(request)
    dt = int((perf_counter() - t0) * 1000)
    logging.getLogger("request").info("%s %s %dms %d", request.method, request.url.path, dt, resp.status_code)
    return resp


app.include_router(execution_router)


@app.get("/")
def health_check():
    return {"status": "ok"}
