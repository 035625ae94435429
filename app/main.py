# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from app.api import api_router
from app.api.errors import register_exception_handlers
from app.data.database import init_db
from app.utils.logging import get_logger
from app.utils.settings import APP_HOST, APP_PORT

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_db()
        logger.info("Database tables created")
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shop Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(api_router)
    register_exception_handlers(app)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
