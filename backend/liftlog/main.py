# liftlog/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from liftlog.errors import StorageError
from liftlog.routers.sessions import router as sessions_router
from liftlog.routers.dashboard import router as dashboard_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.preferences import router as preferences_router
from liftlog.db import SessionLocal  # for healthz DB check

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="LiftLog API",
    openapi_tags=[
        {"name": "sessions", "description": "Logged training sessions"},
        {"name": "dashboard", "description": "Consistency matrix, weekly calendar, weight trend"},
        {"name": "exercises", "description": "Exercise catalog"},
        {"name": "preferences", "description": "Last chosen exercise and form drafts"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    # Surface the underlying message; the client decides whether to retry
    return JSONResponse(status_code=503, content={"detail": exc.message})

@app.get("/")
def root():
    return {"ok": True, "name": "LiftLog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(exercises_router)
app.include_router(sessions_router)
app.include_router(dashboard_router)
app.include_router(preferences_router)
