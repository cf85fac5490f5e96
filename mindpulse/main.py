# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from contextlib import asynccontextmanager

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pytz import timezone
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from mindpulse import config
from mindpulse.models import database
from mindpulse.models import *  # registers all models
from mindpulse.routers import auth_router, entry_router, group_router, ai_router, healthz_router
from mindpulse.utils.rate_limit_utils import limiter
from mindpulse.utils.schedulers.vibe_history_cleaner import clean_old_vibe_logs

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create DB tables in one go
database.Base.metadata.create_all(bind=database.engine)

# Scheduler setup
scheduler = BackgroundScheduler(job_defaults={"misfire_grace_time": 60})


def log_ai_key_status():
    if config.has_api_key():
        logger.info(f"✅ AI Service: key detected ({config.masked_api_key()}). AI features ready.")
    else:
        logger.error("❌ AI Service: API_KEY missing or invalid. Add API_KEY=sk-... to .env")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_ai_key_status()

    # 🕛 Prune vibe history every day at 2 AM
    scheduler.add_job(
        clean_old_vibe_logs, "cron", hour=2, minute=0,
        timezone=timezone(config.SCHEDULER_TIMEZONE),
        id="vibe_history_cleanup", replace_existing=True,
    )

    scheduler.start()
    yield
    scheduler.shutdown()


# Create FastAPI app with lifespan
app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="MindPulse API",
    description="Team wellness check-ins with AI sentiment analysis",
    version="1.0"
)

app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router.router)
app.include_router(entry_router.router)
app.include_router(group_router.router)
app.include_router(ai_router.router)
app.include_router(healthz_router.router)


# ---------------------- EXCEPTION HANDLERS ----------------------
# Every error body is {"error": "..."}

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query"))
        message = f"Invalid request: {field} {first.get('msg', '')}".strip()
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests. Please slow down."}
    )


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.exception(f"🛑 Unhandled error on {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Server error"})


@app.get("/")
def read_root():
    return {"message": "Welcome to MindPulse - team wellness backend Live"}


def run():
    import uvicorn
    uvicorn.run("mindpulse.main:app", host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    run()
