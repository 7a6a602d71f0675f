"""Application layer - configuration and operator use cases."""

from .factory import ServiceFactory, get_factory
from .session import WarehouseSession

__all__ = [
    "ServiceFactory",
    "WarehouseSession",
    "get_factory",
]
