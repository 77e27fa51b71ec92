"""
Recruitment Admin - Main Application

FastAPI backend with:
- MySQL or PostgreSQL for notices, applicants, inquiries
- MongoDB for uploaded resume files
- Static admin UI served from /admin_public

Run: python run.py  (or: uvicorn app.main:app --reload)
"""

import os
import signal
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app import __version__
from app.api import api_router, site_router
from app.api.deps import get_document_store, get_relational_store
from app.core.config import Settings, get_settings
from app.core.exceptions import StoreError, store_error_handler
from app.core.logging_config import setup_logging
from app.db.mongodb import DocumentStore, create_document_store
from app.db.relational import RelationalStore, create_relational_store
from app.schemas.schemas import HealthResponse


def terminate_process(exc: Exception) -> None:
    """Unrecoverable relational connection error: stop the server."""
    logger.critical(f"Shutting down: {exc!r}")
    os.kill(os.getpid(), signal.SIGTERM)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect both stores on startup, release them on shutdown.

    The relational store connects in the background (retrying every
    DB_RECONNECT_DELAY seconds); requests made before it is up get a 500.
    """
    relational: RelationalStore = app.state.relational
    documents: DocumentStore = app.state.documents

    relational.supervisor.start()
    documents.connect()
    logger.info(f"🕵️ 관리자 서버 가동: Port {app.state.settings.port}")

    yield

    relational.supervisor.stop()
    documents.close()
    logger.info("관리자 서버 종료")


def create_app(
    settings: Optional[Settings] = None,
    relational: Optional[RelationalStore] = None,
    documents: Optional[DocumentStore] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Stores can be passed in (tests); otherwise they are built from settings.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Recruitment Admin",
        description="""
        Admin backend for the recruitment site.

        ## Features
        - **Notices**: post, list latest 5, delete
        - **Applicants**: public submission with resume upload, admin list
        - **Inquiries**: list and detail (read-only)
        - **Download**: stream stored resume files

        ## Databases
        - MySQL/PostgreSQL: notices, applicants, inquiries
        - MongoDB: resume files (base64)
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.relational = relational or create_relational_store(settings, on_fatal=terminate_process)
    app.state.documents = documents or create_document_store(settings)

    # CORS middleware (allow all, the admin UI may be hosted elsewhere)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)

    # Include routes
    app.include_router(api_router, prefix="/api")
    app.include_router(site_router)

    static_dir = str(settings.static_dir)
    if os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    @app.get("/", tags=["Frontend"])
    async def serve_frontend():
        """Serve the admin UI."""
        index_path = os.path.join(static_dir, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return JSONResponse(status_code=404, content={"error": "index.html not found"})

    @app.get("/health", tags=["Health"], response_model=HealthResponse)
    async def health_check(
        relational: RelationalStore = Depends(get_relational_store),
        documents: DocumentStore = Depends(get_document_store),
    ):
        """Connection status of both stores."""
        return HealthResponse(
            status="healthy",
            relational=relational.supervisor.state.value,
            documents="connected" if documents.is_connected and documents.ping() else "disconnected",
        )

    return app


app = create_app()
