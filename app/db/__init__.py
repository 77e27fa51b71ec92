"""
Database module - relational store (MySQL/PostgreSQL) and MongoDB document store.
"""
from app.db.relational import RelationalStore, create_relational_store
from app.db.mongodb import DocumentStore, create_document_store
from app.db.supervisor import ConnectionState, ConnectionSupervisor, RetryPolicy

__all__ = [
    "RelationalStore",
    "create_relational_store",
    "DocumentStore",
    "create_document_store",
    "ConnectionState",
    "ConnectionSupervisor",
    "RetryPolicy",
]
