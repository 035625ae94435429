# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.exceptions import ShopError
from app.utils.logging import get_logger

logger = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ShopError)
    async def shop_error_handler(request: Request, exc: ShopError):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc!r}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "message": exc.message, "details": exc.details},
        )
