"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Response models allow extra fields so columns added to the tables later
still reach the admin UI.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
from datetime import datetime


# ============================================================
# COMMON
# ============================================================

class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


# ============================================================
# NOTICE SCHEMAS
# ============================================================

class NoticeCreate(BaseModel):
    # Not required here: a missing value is rejected by the NOT NULL column
    title: Optional[str] = None
    content: Optional[str] = None


class NoticeResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    created_at: Optional[datetime] = None


# ============================================================
# APPLICANT SCHEMAS
# ============================================================

class ApplicantResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[str] = None
    age: Optional[Union[int, str]] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    resume_id: Optional[str] = None
    created_at: Optional[datetime] = None


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    relational: str
    documents: str
