"""FastAPI application entry point for the Parametric Foot form bot."""

import logging

import uvicorn
from fastapi import FastAPI

from footform.app.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.debug else logging.WARNING,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
)

# ---------------------------------------------------------------------------
# Route includes
# ---------------------------------------------------------------------------
from footform.app.routes.whatsapp import router as whatsapp_router
from footform.app.routes.messages import router as messages_router

app.include_router(whatsapp_router)
app.include_router(messages_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Return service health status."""
    return {"status": "ok", "service": "footform"}


def run() -> None:
    """Run the application with uvicorn (used by project.scripts entry point)."""
    logger.info("WhatsApp bot listening on port %d", settings.port)
    uvicorn.run(
        "footform.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
