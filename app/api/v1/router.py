"""
API v1 router - aggregates all endpoint routers.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    clients,
    patterns,
    orders,
    dashboard,
    portal,
    workshop,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    clients.router,
    prefix="/clients",
    tags=["Clients"],
)

api_router.include_router(
    patterns.router,
    prefix="/patterns",
    tags=["Patrons"],
)

api_router.include_router(
    orders.router,
    prefix="/orders",
    tags=["Commandes"],
)

api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"],
)

api_router.include_router(
    portal.router,
    prefix="/portal",
    tags=["Espace client"],
)

api_router.include_router(
    workshop.router,
    prefix="/workshop",
    tags=["Atelier"],
)
