"""
Inquiry Routes (admin, read-only)

GET /admin/inquiries - All inquiries, newest first
GET /admin/inquiries/{inquiry_id} - Inquiry detail
"""

from fastapi import APIRouter, Depends
from loguru import logger
from typing import List

from app.api.deps import get_inquiry_service
from app.core.exceptions import StoreError
from app.services.inquiry_service import InquiryService
from app.schemas.schemas import ErrorResponse

router = APIRouter(prefix="/admin/inquiries", tags=["Inquiries"])


@router.get("", response_model=List[dict])
async def list_inquiries(service: InquiryService = Depends(get_inquiry_service)):
    """
    List inquiries.

    The inquiries table is owned by the public site and may not exist yet,
    so a store failure yields an empty list rather than an error.
    """
    try:
        return service.list_all()
    except StoreError as e:
        logger.warning(f"Inquiry list unavailable: {e.message}")
        return []


@router.get("/{inquiry_id}", response_model=dict, responses={404: {"model": ErrorResponse}})
async def get_inquiry(inquiry_id: int, service: InquiryService = Depends(get_inquiry_service)):
    """Inquiry detail. 404 {"error": "없음"} when the id does not exist."""
    return service.get(inquiry_id)
