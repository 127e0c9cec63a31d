"""FastAPI application entry point for the FitSync Personalization API."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fitsync.config import get_settings
from fitsync.exceptions import EngineValidationError
from fitsync.routers import fitness, nutrition, plans

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Personalization engine for FitSync - workout plans, nutrition targets and difficulty adjustment",
    version=settings.APP_VERSION,
)

# Configure CORS - allow the app frontend and local development servers
cors_origins = [
    settings.FRONTEND_URL,
    "http://localhost:8081",
    "http://localhost:19006",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EngineValidationError)
async def engine_validation_error_handler(request: Request, exc: EngineValidationError) -> JSONResponse:
    """Report malformed collaborator data with the offending field."""
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "field": exc.field},
    )


# Include routers
app.include_router(fitness.router, prefix="/api/fitness", tags=["Fitness Score"])
app.include_router(plans.router, prefix="/api/plans", tags=["Workout Plans"])
app.include_router(nutrition.router, prefix="/api/nutrition", tags=["Nutrition"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
    }


@app.get("/health", tags=["Health"])
@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
