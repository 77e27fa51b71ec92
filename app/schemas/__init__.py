"""
Schemas module - Request/Response schemas for API endpoints.

Inquiries have no schema: the table belongs to the public site and rows
are returned as stored.
"""
from app.schemas.schemas import (
    MessageResponse,
    ErrorResponse,
    NoticeCreate,
    NoticeResponse,
    ApplicantResponse,
    HealthResponse,
)

__all__ = [
    "MessageResponse",
    "ErrorResponse",
    "NoticeCreate",
    "NoticeResponse",
    "ApplicantResponse",
    "HealthResponse",
]
