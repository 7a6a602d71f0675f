"""FastAPI dependency injection for warehouse services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from storerooms.application import ServiceFactory, WarehouseSession, get_factory


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance for the built-in rooms."""
    return get_factory()


def get_session(request: Request) -> WarehouseSession:
    """Dependency for the process-wide operator session."""
    return request.app.state.session


SessionDep = Annotated[WarehouseSession, Depends(get_session)]
