"""FastAPI app entry point for Playground Server."""

from fastapi import FastAPI

from api.playground import router as playground_router
from logging_utils import configure_logging

configure_logging()

app = FastAPI(
    title="Playground Server",
    description="Turn-based mini-games served as pure state transitions",
    version="0.1.0",
)

app.state.sessions = {}

app.include_router(playground_router, prefix="/playground", tags=["Playground"])


@app.get("/")
def root() -> dict:
    """Root endpoint returning server info."""
    return {"name": "Playground Server", "version": "0.1.0", "status": "running"}


@app.get("/health")
def health() -> dict:
    """Health check endpoint."""
    return {"healthy": True}
