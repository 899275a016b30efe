"""
Gestionnaires d'exceptions.
- AppError (MissingFields, InvalidURL, MissingSessionId, GatewayError, MailError) -> JSON {"error": message}.
- Toute autre exception -> 500 générique, détail uniquement dans les logs.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from autocheck.errors import AppError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
