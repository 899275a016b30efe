"""
Lifespan FastAPI: logs de démarrage/arrêt.
Les clients Stripe/SMTP sont construits par la factory (create_app), pas ici.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    settings = app.state.settings
    logger.info("Server running on port %s (frontend: %s)", settings.port, settings.frontend_url)
    yield
    logger.info("Server shutting down")
