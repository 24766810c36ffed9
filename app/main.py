# app/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.routes import server_router, client_router
from app.config import get_settings

settings = get_settings()

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logger.info("Employee stream demo started, proxying to %s", settings.UPSTREAM_BASE_URL)
    yield
    # Shutdown
    logger.info("Employee stream demo stopped")

app = FastAPI(title="Employee Stream Demo", lifespan=lifespan)

app.include_router(server_router, prefix="/server", tags=["server"])
app.include_router(client_router, prefix="/client", tags=["client"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Stream Demo"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
