import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.api.daily_progress import router as daily_progress_router
from app.api.progress import router as progress_router
from app.core.logging import setup_logging
from app.db import Base, engine
from app.models.daily_progress import DailyProgress  # noqa: F401  (import ensures table is registered)
from app.models.progress import Progress  # noqa: F401

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Study Tracker")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (daily_progress, progress) on startup
Base.metadata.create_all(bind=engine)
logger.info("Database tables ready")

app.include_router(daily_progress_router)
app.include_router(progress_router)

# Failure messages per endpoint; anything else is a daily-progress read
FAILURE_MESSAGES = {
    ("POST", "/daily-progress"): "Failed to update daily progress",
    ("GET", "/progress"): "Failed to fetch progress",
    ("POST", "/progress"): "Failed to update progress",
}


@app.exception_handler(RequestValidationError)
async def validation_failure(request: Request, exc: RequestValidationError):
    """Bad request bodies get the same generic failure document as storage faults."""
    path = request.url.path.rstrip("/") or "/"
    message = FAILURE_MESSAGES.get((request.method, path), "Failed to fetch daily progress")
    logger.error("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": message})


@app.get("/")
def root():
    return {"message": "Study tracker backend is running"}
