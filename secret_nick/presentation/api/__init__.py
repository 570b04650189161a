"""
API Routers - FastAPI endpoint definitions.
"""

from secret_nick.presentation.api.users import router as users_router
from secret_nick.presentation.api.rooms import router as rooms_router
from secret_nick.presentation.api.metrics import router as metrics_router

__all__ = [
    "users_router",
    "rooms_router",
    "metrics_router",
]
