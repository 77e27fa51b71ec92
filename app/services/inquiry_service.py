"""
Inquiry Service - read-only access to the inquiries table.

The table is created by the public site, not here; rows are returned as-is.
"""
from typing import List

from app.core.exceptions import NotFoundError
from app.db.relational import RelationalStore


class InquiryService:

    def __init__(self, store: RelationalStore):
        self.store = store

    def list_all(self) -> List[dict]:
        return self.store.fetch_all("SELECT * FROM inquiries ORDER BY id DESC")

    def get(self, inquiry_id: int) -> dict:
        row = self.store.fetch_one(
            "SELECT * FROM inquiries WHERE id = :id",
            {"id": inquiry_id},
        )
        if row is None:
            raise NotFoundError("없음")
        return row
