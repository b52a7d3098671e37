"""
Top‑level router for version 1 of the API.

This router aggregates the route families (contacts and the
creation‑date filter).  The application mounts it without a prefix
because clients address ``/contact/`` and ``/createdAt/`` directly.

``method_not_allowed`` builds the error for a request whose path
belongs to a route family but whose method does not.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from .endpoints import contacts, created_at

router = APIRouter()

router.include_router(contacts.router, tags=["contacts"])
router.include_router(created_at.router, tags=["contacts"])


def method_not_allowed(request: Request) -> Optional[HTTPException]:
    """Return the route family's error for an unsupported method.

    Returns ``None`` for paths outside the families served here.
    """
    path = request.url.path
    if path == "/contact/":
        return contacts.collection_method_not_allowed(request)
    if path.startswith("/contact/"):
        return contacts.item_method_not_allowed(request)
    if path.startswith("/createdAt/"):
        return created_at.created_at_method_not_allowed(request)
    return None
