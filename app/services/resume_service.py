"""
Resume Image Service - write-once, read-many storage of resume files.

Document shape (collection: resumeimages):
{
    "_id": ObjectId,
    "filename": "홍길동_이력서.pdf",
    "contentType": "application/pdf",
    "imageBase64": "JVBERi0xLjQK...",
    "uploadDate": datetime
}

The ObjectId string is what gets stored in applicants.resume_id and what
/download/{id} takes. There is no update or delete.
"""

import base64
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from app.core.exceptions import NotFoundError
from app.db.mongodb import DocumentStore, translate_mongo_error


@dataclass
class ResumeImage:
    id: str
    filename: str
    content_type: str
    data: bytes
    upload_date: Optional[datetime] = None


class ResumeImageService:

    def __init__(self, store: DocumentStore):
        self.store = store

    def create(self, filename: str, content_type: str, data: bytes) -> str:
        """
        Store a resume file.

        Returns:
            MongoDB ObjectId as string (store this in the applicants table)
        """
        collection = self.store.get_collection()
        doc = {
            "filename": filename,
            "contentType": content_type,
            "imageBase64": base64.b64encode(data).decode("ascii"),
            "uploadDate": datetime.utcnow(),
        }
        try:
            result = collection.insert_one(doc)
        except PyMongoError as e:
            raise translate_mongo_error(e) from e
        return str(result.inserted_id)

    def get(self, resume_id: str) -> ResumeImage:
        """Fetch a resume by ObjectId string. Raises NotFoundError if missing."""
        if not ObjectId.is_valid(resume_id):
            raise NotFoundError("파일 없음")

        collection = self.store.get_collection()
        try:
            doc = collection.find_one({"_id": ObjectId(resume_id)})
        except PyMongoError as e:
            raise translate_mongo_error(e) from e
        if doc is None:
            raise NotFoundError("파일 없음")

        return ResumeImage(
            id=str(doc["_id"]),
            filename=doc.get("filename") or "resume",
            content_type=doc.get("contentType") or "application/octet-stream",
            data=base64.b64decode(doc.get("imageBase64") or ""),
            upload_date=doc.get("uploadDate"),
        )
