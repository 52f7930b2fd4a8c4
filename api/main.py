import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from ufc_scraper.config import Config
from .dependencies import create_event_service
from .routers import events

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = create_event_service(Config())
    app.state.event_service = service

    # Warm the cache; the API still starts if this fails
    try:
        logger.info("🚀 Loading latest UFC events on startup")
        await service.load_latest()
    except Exception as e:
        logger.error(f"❌ Failed to load events on startup: {str(e)}")

    yield
    await service.cache.close()


app = FastAPI(
    title="UFC Events API",
    version="1.0.0",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.include_router(events.router)

@app.get("/")
def health_check():
    return {"status": "running", "version": app.version}
