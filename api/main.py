"""
FastAPI application for the dashboard template API.

Run from project root:
  uvicorn api.main:app --reload --host 0.0.0.0 --port 3000
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root before api.config reads the environment
PROJECT_ROOT = Path(__file__).resolve().parent.parent
env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import config
from api.errors import DashboardError
from api.routers import files, setting, statistics

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Dashboard Template API",
    description="Dashboard settings stored in a database or as JSON files, plus ESD statistics.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(setting.router)
app.include_router(statistics.router)
app.include_router(files.router)


@app.exception_handler(DashboardError)
async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    if exc.status_code < 500:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "요청 형식이 올바르지 않습니다."})


@app.on_event("startup")
def on_startup() -> None:
    from api.db import init_db

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    logger.info("Dashboard files in %s", config.DASHBOARDS_DIR)


@app.on_event("shutdown")
def on_shutdown() -> None:
    from api.db import close_db

    close_db()


@app.get("/")
def root() -> dict:
    return {"service": "Dashboard Template API", "docs": "/docs"}


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
