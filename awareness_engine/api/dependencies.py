"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from awareness_engine.infrastructure.clients.snapshot import SnapshotClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_snapshot_client() -> SnapshotClient:
    """Provide upstream data source client instance"""
    return SnapshotClient()
