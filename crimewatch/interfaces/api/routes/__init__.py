import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .notifications import router as notifications_router
from .reports import router as reports_router

logger = logging.getLogger(__name__)


async def _handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Store failure while handling %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error interno del servidor"},
    )


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(reports_router)
    app.include_router(notifications_router)
    app.add_exception_handler(SQLAlchemyError, _handle_store_error)
