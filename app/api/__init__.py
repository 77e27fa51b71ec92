"""
API module - FastAPI routers and endpoint definitions.

Usage:
    from app.api import api_router, site_router
    app.include_router(api_router, prefix="/api")
    app.include_router(site_router)
"""
from app.api.routes import api_router, site_router

__all__ = ["api_router", "site_router"]
