# Routers package
from . import auth_router
from . import notifications_router

__all__ = [
    "auth_router",
    "notifications_router",
]
