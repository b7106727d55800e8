"""API routers for the charter backend."""

from .system import router as system_router
from .airports import router as airports_router
from .planes import router as planes_router
from .pilots import router as pilots_router
from .trips import router as trips_router

__all__ = [
    'system_router',
    'airports_router',
    'planes_router',
    'pilots_router',
    'trips_router',
]
