"""FastAPI REST API for warehouse slot allocation.

Usage:
    uvicorn storerooms.web:app --reload
"""

from storerooms.web.app import create_app

# Application instance for ASGI servers (uvicorn)
app = create_app()

__all__ = ["app", "create_app"]
