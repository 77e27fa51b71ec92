"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.

Variable names match the deployment environment (DB_HOST, DB_PASS, MONGO_URI, PORT, ...).
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

DRIVERS = {
    "mysql": "mysql+pymysql",
    "postgresql": "postgresql+psycopg2",
}


class Settings(BaseSettings):
    # Relational store (MySQL or PostgreSQL)
    db_driver: str = "mysql"
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_user: str = ""
    db_pass: str = ""
    db_name: str = ""
    db_ssl: bool = False
    db_url: Optional[str] = None  # full SQLAlchemy URL, overrides the parts above
    db_reconnect_delay: float = 5.0

    # MongoDB (resume files). Optional: without it downloads/uploads fail.
    mongo_uri: Optional[str] = None
    mongo_db: str = "recruit"
    mongo_collection: str = "resumeimages"

    # App
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: Path = PROJECT_ROOT / "admin_public"
    max_upload_mb: Optional[float] = None
    log_level: str = "INFO"
    debug: bool = False

    @property
    def database_url(self) -> str:
        """Construct the SQLAlchemy connection URL"""
        if self.db_url:
            return self.db_url
        if self.db_driver not in DRIVERS:
            raise ValueError(f"Unsupported DB_DRIVER '{self.db_driver}'. Use mysql or postgresql")
        url = URL.create(
            DRIVERS[self.db_driver],
            username=self.db_user or None,
            password=self.db_pass or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name or None,
        )
        return url.render_as_string(hide_password=False)

    @property
    def connect_args(self) -> dict:
        """Driver-specific arguments (TLS)."""
        if not self.db_ssl:
            return {}
        if self.db_driver == "postgresql":
            return {"sslmode": "require"}
        return {"ssl": {}}

    @property
    def max_upload_bytes(self) -> Optional[int]:
        if self.max_upload_mb is None:
            return None
        return int(self.max_upload_mb * 1024 * 1024)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
