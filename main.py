"""
MyCosmo - FastAPI Application Entry Point

This is the main entry point for the MyCosmo API.
Run with: python main.py or uvicorn main:app --reload

Features:
- REST API with OpenAPI documentation
- CORS support for web clients
- Structured logging
- Environment-based configuration
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables
load_dotenv()

# Configure logging
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


# Import routes after logging is configured
from api.routes import router, get_observations_coordinator
from store.database import StoreInitializationError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Open the observation store on startup (fatal if it fails)
    - Log shutdown
    """
    # Startup
    logger.info("=" * 60)
    logger.info("MyCosmo Starting...")
    logger.info("=" * 60)

    try:
        get_observations_coordinator()
        logger.info("Observation store initialized successfully")
    except StoreInitializationError as e:
        logger.critical(f"Failed to initialize observation store: {str(e)}")
        raise

    logger.info(f"Log level: {log_level}")
    logger.info(f"API Documentation: http://localhost:{os.getenv('PORT', 8000)}/docs")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("MyCosmo Shutting down...")


# Create FastAPI application
app = FastAPI(
    title="MyCosmo",
    description="""
## 🔭 MyCosmo

Space news, NASA's Astronomy Picture of the Day, the solar system and
your own astronomical observations.

### Features
- **NASA APOD**: Astronomy Picture of the Day (requires a free NASA API key)
- **Space News**: Articles, blogs, reports and launches
- **Solar System**: Physical and orbital data for the eight planets
- **Observations**: Record, filter and delete personal observations

### Data Sources
- [NASA APOD](https://api.nasa.gov/) - Astronomy Picture of the Day
- [Spaceflight News API](https://api.spaceflightnewsapi.net/v4/docs/) - Space news

### Attribution
- Image from NASA Astronomy Picture of the Day
- News by Spaceflight News API
""",
    version="1.0.0",
    license_info={
        "name": "MIT",
    },
    lifespan=lifespan,
)

# Configure CORS for web clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests."""
    start_time = datetime.utcnow()

    response = await call_next(request)

    duration = (datetime.utcnow() - start_time).total_seconds() * 1000
    logger.info(
        f"{request.method} {request.url.path} "
        f"- {response.status_code} "
        f"- {duration:.0f}ms"
    )

    return response


# Include API routes
app.include_router(router, prefix="/api/v1")

# Also mount at root for convenience
app.include_router(router)


@app.get("/", include_in_schema=False)
async def root():
    """API entry point."""
    return JSONResponse({
        "message": "MyCosmo API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    })


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8000))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=log_level.lower(),
    )
