"""Demo App: single-route HTTP responder."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from app.config import settings

GREETING = "🚀 Node.js Demo App running with CI/CD Pipeline!"

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Demo App starting up...")
    yield
    logger.info("Demo App shutting down...")


app = FastAPI(
    title="Demo App",
    description="Static greeting service deployed by the CI/CD pipeline.",
    version="1.0.0",
    lifespan=lifespan,
    # Only "/" is served; no interactive docs or schema endpoints
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return GREETING
