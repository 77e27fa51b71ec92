"""
MongoDB Connection - document store for uploaded resume files.

Only one collection is used (resumeimages). Each document holds the
original filename, content type, upload date and the file bytes as a
base64 string.

The connection is attempted once at startup. If MONGO_URI is missing or the
server can't be reached, the failure is logged and the store stays
disconnected: uploads and downloads then fail with ConnectivityError while
the rest of the API keeps working.
"""
from typing import Optional

from loguru import logger
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure, PyMongoError

from app.core.config import Settings
from app.core.exceptions import ConnectivityError, StoreError


def translate_mongo_error(exc: PyMongoError) -> StoreError:
    """Map a pymongo error onto the store error taxonomy."""
    logger.error(f"MongoDB operation failed: {exc}")
    if isinstance(exc, ConnectionFailure):
        return ConnectivityError()
    return StoreError()


class DocumentStore:

    def __init__(
        self,
        uri: Optional[str],
        db_name: str = "recruit",
        collection_name: str = "resumeimages",
        collection: Optional[Collection] = None,
        server_selection_timeout_ms: int = 5000,
    ):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.collection = collection
        self._client: Optional[MongoClient] = None
        self._timeout_ms = server_selection_timeout_ms

    @property
    def is_connected(self) -> bool:
        return self.collection is not None

    def connect(self) -> bool:
        """
        Open the client and ping the server.
        Returns True if connected, False otherwise (never raises).
        """
        if self.collection is not None:
            return True
        if not self.uri:
            logger.warning("⚠️ MONGO_URI not set - resume upload/download disabled")
            return False

        try:
            client = MongoClient(self.uri, serverSelectionTimeoutMS=self._timeout_ms)
            # ping command checks connection
            client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"❌ MongoDB 실패: {e}")
            return False

        self._client = client
        self.collection = client[self.db_name][self.collection_name]
        logger.info("✅ MongoDB 성공")
        return True

    def get_collection(self) -> Collection:
        if self.collection is None:
            raise ConnectivityError("파일 저장소 연결 없음")
        return self.collection

    def ping(self) -> bool:
        if self._client is None:
            return self.collection is not None
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self.collection = None


def create_document_store(settings: Settings) -> DocumentStore:
    return DocumentStore(
        settings.mongo_uri,
        db_name=settings.mongo_db,
        collection_name=settings.mongo_collection,
    )
