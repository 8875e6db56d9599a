"""FastAPI application exposing the recommendation service over HTTP."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from api import routes
from providers import list_providers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    available = [name for name, info in list_providers().items() if info["available"]]
    if available:
        logger.info("LLM providers available: %s", ", ".join(available))
    else:
        logger.warning("No LLM API keys configured, every request will use the rule engine")
    yield


app = FastAPI(
    title="Stack Advisor",
    description="Technology stack recommendations from project requirements",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router, prefix="/api/ai", tags=["recommendations"])


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "stack-advisor"}
