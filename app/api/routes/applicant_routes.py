"""
Applicant Routes

GET /api/applicants - All applicants, newest first (admin)
POST /submit - Public application form (multipart, optional resume file)
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import HTMLResponse
from loguru import logger
from typing import List, Optional

from app.api.deps import get_app_settings, get_applicant_service
from app.core.config import Settings
from app.core.exceptions import StoreError
from app.services.applicant_service import ApplicantService
from app.utils.file_upload import read_upload
from app.schemas.schemas import ApplicantResponse

router = APIRouter(prefix="/applicants", tags=["Applicants"])
submit_router = APIRouter(tags=["Applicants"])

SUBMIT_OK_SCRIPT = "<script>alert('지원이 완료되었습니다.'); location.href='/';</script>"
SUBMIT_FAILED_SCRIPT = "<script>alert('지원 처리 중 오류가 발생했습니다.'); history.back();</script>"


@router.get("", response_model=List[ApplicantResponse])
async def list_applicants(service: ApplicantService = Depends(get_applicant_service)):
    """List every applicant. No pagination."""
    return service.list_all()


@submit_router.post("/submit", response_class=HTMLResponse)
async def submit_application(
    name: Optional[str] = Form(None),
    age: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    resume: Optional[UploadFile] = File(None, description="Resume file (any type)"),
    service: ApplicantService = Depends(get_applicant_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Submit a job application.

    Process:
    1. Buffer the resume file in memory (if attached)
    2. Store it in MongoDB
    3. Insert the applicant with the resume id, or "no_file"

    Answers with an alert script for the browser form.
    """
    upload = await read_upload(resume, settings.max_upload_bytes)
    try:
        service.submit(name, age, gender, phone, address, upload)
    except StoreError as e:
        logger.error(f"Application submit failed: {e.message}")
        return HTMLResponse(SUBMIT_FAILED_SCRIPT, status_code=500)
    return HTMLResponse(SUBMIT_OK_SCRIPT)
