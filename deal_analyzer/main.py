"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI

from deal_analyzer.config import get_settings
from deal_analyzer.api import router as api_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Real estate deal analysis: rental, wholesale, subject-to, "
    "seller financing and BRRRR calculators",
    version="0.1.0",
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")

logger.info(f"{settings.app_name} started ({settings.app_env})")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
