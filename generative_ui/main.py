"""
Generative UI Service - FastAPI Application

Two-phase UI generation: a design model analyzes content and a design brief,
then a UI model turns content + design specification into a themed UI tree.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from generative_ui import __version__
from generative_ui.config import settings, log_settings
from generative_ui.api.routes import generate, health

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration on startup"""
    logger.info("=" * 60)
    logger.info("Starting Generative UI Service")
    logger.info("=" * 60)

    log_settings()

    logger.info(f"Service ready on port {settings.SERVICE_PORT}")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="Generative UI Service",
    description="""
Turns free-text content and an optional design brief into a structured,
themed UI description.

## Pipeline

| Phase | Model | Output |
|-------|-------|--------|
| design-analysis | Design model (default Gemini) | Design specification text |
| gen-ui | UI model (default Claude) | Theme + UI tree JSON |

## Endpoints

- **generate**: One-shot generation with execution context
- **generate/stream**: SSE progress events
- **generate/raw**: SSE stream of the UI model's raw output
- **analyze**: Design analysis only
""",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/genui/docs",
    redoc_url="/api/genui/redoc",
    openapi_url="/api/genui/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/genui"

app.include_router(health.router, prefix=API_PREFIX, tags=["Health"])
app.include_router(generate.router, prefix=API_PREFIX, tags=["Generation"])


# Root health check (for direct container health checks)
@app.get("/health")
async def root_health():
    """Root health check for container/load balancer"""
    return {"status": "UP", "service": settings.SERVICE_NAME}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Generative UI Service",
        "version": __version__,
        "port": settings.SERVICE_PORT,
        "endpoints": {
            "health": f"{API_PREFIX}/health",
            "generate": f"{API_PREFIX}/generate",
            "generate_stream": f"{API_PREFIX}/generate/stream",
            "generate_raw": f"{API_PREFIX}/generate/raw",
            "analyze": f"{API_PREFIX}/analyze",
            "docs": f"{API_PREFIX}/docs"
        }
    }


def run():
    import uvicorn
    uvicorn.run(
        "generative_ui.main:app",
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        reload=True
    )


if __name__ == "__main__":
    run()
