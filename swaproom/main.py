import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import close_db, get_db, init_db
from swaproom.exceptions import RoomServiceError
from swaproom.routers.messages import router as messages_router
from swaproom.routers.participants import router as participants_router
from swaproom.routers.rooms import router as rooms_router
from swaproom.routers.session_summaries import router as session_summaries_router
from swaproom.routers.swaps import router as swaps_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    await init_db()
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title="Swap Room Service",
    description="Rooms, readiness and view-swap coordination for polling clients",
    version=config.COMMIT_HASH or "dev",
    lifespan=lifespan,
)

# Include routers
app.include_router(rooms_router, prefix="/api/rooms", tags=["rooms"])
app.include_router(swaps_router, prefix="/api/rooms", tags=["swaps"])
app.include_router(messages_router, prefix="/api/rooms", tags=["messages"])
app.include_router(
    session_summaries_router, prefix="/api/rooms", tags=["session summaries"]
)
app.include_router(
    participants_router, prefix="/api/participants", tags=["participants"]
)


@app.exception_handler(RoomServiceError)
async def room_service_exception_handler(
    request: Request, exc: RoomServiceError
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health")
async def health_check(
    db: AsyncSession = Depends(get_db),
) -> Dict[str, Optional[str]]:
    """Health check endpoint with database connectivity."""
    try:
        # Test database connection
        result = await db.execute(text("SELECT 1"))
        db_status = "connected" if result.scalar() == 1 else "error"
    except Exception:
        logger.warning("Health check could not reach the database", exc_info=True)
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "database": db_status,
        "environment": config.ENV,
        "version": config.COMMIT_HASH,
    }


# If run directly, start the server
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.APP_ADDR, port=config.APP_PORT)
