"""
Download Routes

GET /download/{resume_id} - Stream a stored resume file as an attachment
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from loguru import logger

from app.api.deps import get_resume_service
from app.core.exceptions import NotFoundError, StoreError
from app.services.resume_service import ResumeImageService

router = APIRouter(tags=["Download"])

# Characters encodeURIComponent leaves alone besides alphanumerics and _.-~
FILENAME_SAFE = "!*'()"


def content_disposition(filename: str) -> str:
    """RFC 5987 attachment header so non-ASCII (Korean) names survive."""
    return f"attachment; filename*=UTF-8''{quote(filename, safe=FILENAME_SAFE)}"


@router.get("/download/{resume_id}")
async def download_resume(resume_id: str, service: ResumeImageService = Depends(get_resume_service)):
    """Send the stored file back with its original name and content type."""
    try:
        resume = service.get(resume_id)
    except NotFoundError:
        return PlainTextResponse("파일 없음", status_code=404)
    except StoreError as e:
        logger.error(f"Download failed for {resume_id}: {e.message}")
        return PlainTextResponse("다운로드 오류", status_code=500)

    return Response(
        content=resume.data,
        media_type=resume.content_type,
        headers={"Content-Disposition": content_disposition(resume.filename)},
    )
