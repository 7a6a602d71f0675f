"""Error handlers mapping domain exceptions to REST responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storerooms.domain.errors import CapacityError, ConfigError

NOT_FOUND_ERROR_TYPES = frozenset({"unknown_room", "unknown_slot"})


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        status_code = 404 if exc.error_type in NOT_FOUND_ERROR_TYPES else 422
        return JSONResponse(
            status_code=status_code,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(CapacityError)
    async def capacity_error_handler(
        request: Request, exc: CapacityError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": str(exc),
                "error_type": "capacity",
                "details": {
                    "needed": exc.needed,
                    "available": exc.available,
                    "room_id": exc.room_id,
                },
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"error": str(exc), "error_type": "invalid_request", "details": None},
        )
