"""API routers for the REST API."""

from storerooms.web.routers.allocations import router as allocations_router
from storerooms.web.routers.consignments import router as consignments_router
from storerooms.web.routers.history import router as history_router
from storerooms.web.routers.rooms import router as rooms_router
from storerooms.web.routers.slots import router as slots_router

__all__ = [
    "allocations_router",
    "consignments_router",
    "history_router",
    "rooms_router",
    "slots_router",
]
