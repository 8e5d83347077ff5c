import asyncio
import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from hotdesk.core.config import settings
from hotdesk.db.session import store
from hotdesk.services.engine import BookingEngine
from hotdesk.api.errors import register_exception_handlers
from hotdesk.api.v1.router import api_router

logger = logging.getLogger(__name__)


async def _lock_sweep_loop(engine: BookingEngine) -> None:
    """Background task: delete lapsed seat locks every LOCK_SWEEP_INTERVAL_SECONDS."""
    while True:
        try:
            count = engine.purge_expired_locks()
            if count:
                logger.info("Purged %d expired seat lock(s).", count)
        except Exception:
            logger.exception("Error during seat lock sweep.")
        await asyncio.sleep(settings.LOCK_SWEEP_INTERVAL_SECONDS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables and load the default layout
    store.init()

    sweep_task = asyncio.create_task(_lock_sweep_loop(BookingEngine(store)))
    yield

    # Shutdown: cancel background task
    sweep_task.cancel()
    try:
        await sweep_task
    except asyncio.CancelledError:
        pass
    store.dispose()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/")
def read_root():
    return {"Hello": "Hotdesk"}
