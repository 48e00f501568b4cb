"""
FastAPI application for the YouTube Tutorial Generator.
"""

import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import config
from app.api.routes import router
from app.utils.logger import logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration problems once at startup."""
    settings = config.tutorial_settings()
    if not settings.youtube_api_key or not settings.gemini_api_key:
        logging.warning("YOUTUBE_API_KEY or GEMINI_API_KEY is not set; tutorial requests will fail.")
    logging.info(f"{config.APP_NAME} v{config.APP_VERSION} started with model {settings.gemini_model}")
    yield
    logging.info(f"{config.APP_NAME} shutting down")


# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for turning YouTube videos into written Markdown tutorials",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time to response headers."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": config.APP_VERSION}
