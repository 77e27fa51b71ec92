"""
Notice Routes (admin)

POST /admin/notices - Create notice
GET /admin/notices - Latest 5 notices, newest first
DELETE /admin/notices/{notice_id} - Delete notice (idempotent)
"""

from fastapi import APIRouter, Depends
from typing import List

from app.api.deps import get_notice_service
from app.services.notice_service import NoticeService
from app.schemas.schemas import NoticeCreate, NoticeResponse, MessageResponse

router = APIRouter(prefix="/admin/notices", tags=["Notices"])


@router.post("", response_model=MessageResponse)
async def create_notice(notice: NoticeCreate, service: NoticeService = Depends(get_notice_service)):
    """Create a notice. Store failures surface as 500 {"error": ...}."""
    service.create(notice.title, notice.content)
    return MessageResponse(message="등록 완료")


@router.get("", response_model=List[NoticeResponse])
async def list_notices(service: NoticeService = Depends(get_notice_service)):
    """Latest notices for the admin main screen."""
    return service.list_recent()


@router.delete("/{notice_id}", response_model=MessageResponse)
async def delete_notice(notice_id: int, service: NoticeService = Depends(get_notice_service)):
    """Delete a notice. Same response whether or not the id existed."""
    service.delete(notice_id)
    return MessageResponse(message="삭제 완료")
