"""
Notice Service - admin announcements in the notices table.
"""
from typing import List, Optional

from app.db.relational import RelationalStore

RECENT_NOTICES_LIMIT = 5


class NoticeService:

    def __init__(self, store: RelationalStore):
        self.store = store

    def create(self, title: Optional[str], content: Optional[str]) -> None:
        """Insert a notice. NULL title/content is rejected by the table, not here."""
        self.store.execute(
            "INSERT INTO notices (title, content) VALUES (:title, :content)",
            {"title": title, "content": content},
        )

    def list_recent(self, limit: int = RECENT_NOTICES_LIMIT) -> List[dict]:
        """Newest first (highest id first)."""
        return self.store.fetch_all(
            "SELECT * FROM notices ORDER BY id DESC LIMIT :limit",
            {"limit": limit},
        )

    def delete(self, notice_id: int) -> int:
        """Delete by id. Deleting a missing id is not an error; returns rows removed."""
        return self.store.execute(
            "DELETE FROM notices WHERE id = :id",
            {"id": notice_id},
        )
