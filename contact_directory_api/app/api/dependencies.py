"""Shared dependencies for API routers.

Usage in routers:
    from contact_directory_api.app.api.dependencies import get_contact_store
"""

from typing import List

from fastapi import Request

from contact_directory_api.app.services.contact_service import ContactStore


def get_contact_store(request: Request) -> ContactStore:
    """Return the store created by ``create_app`` for this application."""
    return request.app.state.contact_store


def path_segments(path: str) -> List[str]:
    """Split a request path into segments, ignoring outer slashes.

    ``"/contact/a@x.com/"`` becomes ``["contact", "a@x.com"]``.
    """
    return path.strip("/").split("/")
