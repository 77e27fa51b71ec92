"""
FastAPI dependencies - hand the app-owned stores to route handlers.

The stores are created once in create_app() and kept on app.state.
Tests build the app with their own stores instead of patching globals.
"""
from fastapi import Depends, Request

from app.core.config import Settings
from app.db.mongodb import DocumentStore
from app.db.relational import RelationalStore
from app.services.applicant_service import ApplicantService
from app.services.inquiry_service import InquiryService
from app.services.notice_service import NoticeService
from app.services.resume_service import ResumeImageService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_relational_store(request: Request) -> RelationalStore:
    return request.app.state.relational


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.documents


def get_notice_service(store: RelationalStore = Depends(get_relational_store)) -> NoticeService:
    return NoticeService(store)


def get_inquiry_service(store: RelationalStore = Depends(get_relational_store)) -> InquiryService:
    return InquiryService(store)


def get_resume_service(store: DocumentStore = Depends(get_document_store)) -> ResumeImageService:
    return ResumeImageService(store)


def get_applicant_service(
    store: RelationalStore = Depends(get_relational_store),
    resumes: ResumeImageService = Depends(get_resume_service),
) -> ApplicantService:
    return ApplicantService(store, resumes)
