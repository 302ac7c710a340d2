"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hoardgen import __version__
from hoardgen.api.routes import hoard
from hoardgen.core.config import settings
from hoardgen.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    configure_logging("DEBUG" if settings.debug else None)
    yield


app = FastAPI(
    title="Treasure Hoard Generator",
    description="Random OSE treasure hoards drawn from weighted roll tables",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(hoard.router, prefix="/api", tags=["Hoard"])


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "Treasure Hoard Generator",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "components": {
            "api": "ok",
            "packs_dir": "found" if settings.packs_dir.exists() else "missing",
        },
    }


if __name__ == "__main__":
    uvicorn.run(
        "hoardgen.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
