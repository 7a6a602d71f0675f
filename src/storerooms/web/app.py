"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storerooms import __version__
from storerooms.application import ServiceFactory
from storerooms.contracts import PendingItemSource
from storerooms.web.dependencies import get_service_factory
from storerooms.web.exceptions import register_exception_handlers
from storerooms.web.routers import (
    allocations_router,
    consignments_router,
    history_router,
    rooms_router,
    slots_router,
)


def create_app(
    factory: ServiceFactory | None = None,
    item_source: PendingItemSource | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns one in-memory operator session; its state is lost
    when the process exits.

    Args:
        factory: Service factory to build the session from. Defaults to the
            built-in three-room warehouse.
        item_source: Optional source used when a consignment is loaded
            without explicit items.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Warehouse Slot Allocation API",
        description="REST API for allocating consignment items to storage slots",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure as needed for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.state.session = (factory or get_service_factory()).create_session(
        item_source=item_source
    )

    app.include_router(rooms_router, prefix="/api/v1")
    app.include_router(slots_router, prefix="/api/v1")
    app.include_router(consignments_router, prefix="/api/v1")
    app.include_router(allocations_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
