"""Main FastAPI application."""
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
import os

import uvicorn

from cupcake_corner.core.config import settings
from cupcake_corner.core.logging import setup_logging
from cupcake_corner.api import health, order, cupcakes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    yield


app = FastAPI(
    title=settings.store_name,
    description="Cupcake order form with an echoing order endpoint",
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers (must be before static file mounting to take precedence)
app.include_router(health.router, tags=["health"])
app.include_router(order.router, tags=["order"])
app.include_router(cupcakes.router, tags=["cupcakes"])

# Mount static files (stylesheet for the order page)
static_dir = os.path.join(os.path.dirname(__file__), "static")
assets_dir = os.path.join(static_dir, "assets")
if os.path.exists(assets_dir):
    app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")


def run() -> None:
    """Serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
