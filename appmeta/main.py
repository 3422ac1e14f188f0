import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from appmeta.core.config import get_config
from appmeta.core.dependencies import get_store
from appmeta.domain.entities import ApplicationStore
from appmeta.api.applications import router as applications_router

config = get_config()

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the in-memory store before the first request is served.
    """
    get_store()
    logger.info("Starting up the server.")
    yield
    logger.info("Shutting down the server.")


app = FastAPI(
    title="Application Metadata Service",
    version="0.1.0",
    description="In-memory store of application metadata with partial-match YAML search.",
    lifespan=lifespan,
)


@app.get("/health")
async def health(store: ApplicationStore = Depends(get_store)) -> dict:
    """
    Lightweight health check endpoint.
    """
    return {"status": "ok", "applications": len(store)}


app.include_router(applications_router, tags=["applications"])


if __name__ == "__main__":
    """
    Allow running `python -m appmeta.main` to start the Uvicorn server.
    """
    import uvicorn

    uvicorn.run(
        "appmeta.main:app",
        host=config.host,
        port=config.port,
    )
