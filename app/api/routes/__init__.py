"""
API Routes - Combines all route modules into two routers.

api_router:  JSON API, mounted under /api
site_router: browser-facing routes at the root (/submit, /download/{id})
"""

from fastapi import APIRouter

from app.api.routes.notice_routes import router as notice_router
from app.api.routes.applicant_routes import router as applicant_router
from app.api.routes.applicant_routes import submit_router
from app.api.routes.inquiry_routes import router as inquiry_router
from app.api.routes.download_routes import router as download_router

# Main API router
api_router = APIRouter()

api_router.include_router(notice_router)
api_router.include_router(applicant_router)
api_router.include_router(inquiry_router)

site_router = APIRouter()

site_router.include_router(submit_router)
site_router.include_router(download_router)
