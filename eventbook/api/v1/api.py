# eventbook/api/v1/api.py

from fastapi import APIRouter
from eventbook.api.v1.endpoints import (
    confirmations,
    events,
    health,
    reminders,
)

# This is the main router for the v1 API.
api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(events.router)
api_router.include_router(reminders.router)
api_router.include_router(confirmations.router)
