"""
File Upload Utility - buffer a single resume file from a multipart form.

The whole file is held in memory. There is no size limit unless
MAX_UPLOAD_MB is configured.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, UploadFile

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class UploadedFile:
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


async def read_upload(file: Optional[UploadFile], max_bytes: Optional[int] = None) -> Optional[UploadedFile]:
    """
    Read an uploaded file into memory.

    Args:
        file: FastAPI UploadFile, or None when the field was not sent
        max_bytes: optional size limit

    Returns:
        UploadedFile, or None if no file was attached (browsers send an empty
        part with no filename for an untouched file input)

    Raises:
        HTTPException(413) if max_bytes is set and exceeded
    """
    if file is None or not file.filename:
        return None

    content = await file.read()

    if max_bytes is not None and len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {max_bytes // (1024 * 1024)}MB"
        )

    return UploadedFile(
        filename=file.filename,
        content_type=file.content_type or DEFAULT_CONTENT_TYPE,
        data=content,
    )
