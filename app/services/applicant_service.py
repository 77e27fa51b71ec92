"""
Applicant Service - job applications in the applicants table.

A submission with a resume file is stored in two steps:
1. the file goes to MongoDB (ResumeImageService) -> ObjectId string
2. the applicant row is inserted with that id in resume_id

Without a file, resume_id is the NO_FILE sentinel and MongoDB is not touched.
The two steps are not transactional: if step 2 fails the document from
step 1 stays behind unreferenced. It is logged, not deleted.
"""
from typing import List, Optional

from loguru import logger

from app.core.exceptions import StoreError
from app.db.relational import RelationalStore
from app.services.resume_service import ResumeImageService
from app.utils.file_upload import UploadedFile

NO_FILE = "no_file"


class ApplicantService:

    def __init__(self, store: RelationalStore, resumes: Optional[ResumeImageService] = None):
        self.store = store
        self.resumes = resumes

    def list_all(self) -> List[dict]:
        """All applicants, newest first. No pagination."""
        return self.store.fetch_all("SELECT * FROM applicants ORDER BY id DESC")

    def create(self, name, age, gender, phone, address, resume_id: str = NO_FILE) -> None:
        """Insert one applicant row. Malformed values are rejected by the database."""
        self.store.execute(
            """
            INSERT INTO applicants (name, age, gender, phone, address, resume_id)
            VALUES (:name, :age, :gender, :phone, :address, :resume_id)
            """,
            {
                "name": name,
                "age": age,
                "gender": gender,
                "phone": phone,
                "address": address,
                "resume_id": resume_id,
            },
        )

    def submit(
        self,
        name: Optional[str],
        age: Optional[str],
        gender: Optional[str],
        phone: Optional[str],
        address: Optional[str],
        resume: Optional[UploadedFile] = None,
    ) -> str:
        """
        Store the resume (if any) then the applicant.

        Returns:
            the resume reference written to the row (ObjectId string or NO_FILE)
        """
        resume_id = NO_FILE
        if resume is not None:
            resume_id = self.resumes.create(resume.filename, resume.content_type, resume.data)
            logger.info(f"Resume stored: {resume_id} ({resume.filename}, {resume.size} bytes)")

        try:
            self.create(name, age, gender, phone, address, resume_id)
        except StoreError:
            if resume_id != NO_FILE:
                logger.warning(f"Orphaned resume document {resume_id}: applicant insert failed")
            raise
        return resume_id
