"""
S.A.F.E. School Scan - FastAPI Application Entry Point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from safe_scan.config import settings
from safe_scan.api.v1.endpoints import assessments, checklist, health
from safe_scan.logger import logger

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="School room safety checklist with automatic risk scoring, status and recommendations",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(checklist.router, prefix="/api/v1")
app.include_router(assessments.router, prefix="/api/v1/assessments")


@app.on_event("startup")
async def startup():
    """Initialize on startup."""
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Assessment store: {settings.STORE_PATH}")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }
