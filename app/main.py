"""
Resume Analytics Backend - Main FastAPI Application

Scores resumes and explains how to improve them: action verb usage,
quantified achievements, impact words, section completeness and length.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.config import get_settings
from app.services.cache import is_cache_enabled

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Analytics cache enabled: {is_cache_enabled()}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
## Resume Analytics API

Deterministic quality analysis for resumes built in the editor.

### Features

- **Quality Score**: 0-100 score from completeness (40%) and three bullet metrics (20% each)
- **Action Verbs**: Share of bullets using recognized action verbs, with top verbs
- **Quantifiable Results**: Share of bullets with numbers, percentages or metrics
- **Impact Words**: Share of bullets using result-oriented vocabulary, with top words
- **Completeness**: Per-section and overall completeness
- **Suggestions**: Prioritized improvement advice

### Quick Start

1. Send your resume data to `/api/analytics` to get the full report
2. Use `/api/analytics/export` to download the report as JSON
3. Map any score to its rating with `/api/analytics/rating?score=80`

### Data Format

The API accepts resume data in JSON format matching the frontend structure:
- `personalInfo`: Name, email, phone, location, links
- `summary`: Professional summary
- `experience`: Work experience entries with `description` bullets
- `education`: Education entries with `achievements`
- `skills`: Skill categories
- `projects`: Project entries with `highlights` bullets
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An internal error occurred",
                "detail": str(exc) if settings.debug else "Please try again later"
            }
        )

    # Include API routes
    app.include_router(router, prefix="/api")

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "api": "/api"
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
