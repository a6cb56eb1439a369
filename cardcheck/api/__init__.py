from cardcheck.api.check import router as check_router
from cardcheck.api.health import router as health_router

__all__ = [
    "check_router",
    "health_router",
]
