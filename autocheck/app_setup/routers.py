"""
Registre central des routers (API payments, health).
"""
from fastapi import FastAPI

from autocheck.health.router import router as health_router
from autocheck.payments import views as payments_views


def register_routers(app: FastAPI) -> None:
    # API
    app.include_router(payments_views.router)
    # Health & monitoring
    app.include_router(health_router)
