import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from monarch.config.settings import settings
from monarch.config.database import Base, engine
from monarch.core.middleware import setup_middleware
from monarch.api.v1.router import api_router
from monarch.shared.database import models  # noqa: F401  (registers tables)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    Base.metadata.create_all(bind=engine)
    logger.info(f"🚀 {settings.app_name} starting")
    logger.info(f"📍 Version: {settings.version}")
    logger.info(f"🌍 Environment: {'Development' if settings.debug else 'Production'}")

    yield

    # Shutdown
    logger.info(f"🛑 {settings.app_name} shutting down")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Order capture and sales reporting for route sales reps",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "🚀 Monarch Pro API - Route sales orders",
        "version": settings.version,
        "status": "running",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "api": "/api/v1"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "monarch.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
