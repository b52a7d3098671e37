"""
Creation‑date endpoint for API v1.

``GET /createdAt/<year>/<month>/<day>`` returns the contacts created
on that calendar date, regardless of the time of day.  Every
malformed path (wrong number of segments, a non‑integer segment or a
month outside 1–12) gets the same 400 response.
"""

import logging
import re
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, status

from contact_directory_api.app.api.dependencies import get_contact_store, path_segments
from contact_directory_api.app.schemas.contact import Contact
from contact_directory_api.app.services.contact_service import ContactStore

logger = logging.getLogger(__name__)

router = APIRouter()

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f"invalid integer {value!r}")
    return int(value)


def _bad_request(path: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"expect /createdAt/<year>/<month>/<day>, got {quote(path, safe='/')}",
    )


@router.get("/createdAt/{date_path:path}", response_model=List[Contact])
def get_contacts_by_created_date(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> List[Contact]:
    """Return contacts whose creation date matches the path."""
    path = request.url.path
    logger.info("handling contacts by creation date at %s", path)

    segments = path_segments(path)
    if len(segments) != 4:
        raise _bad_request(path)
    try:
        year, month, day = (_parse_int(segment) for segment in segments[1:])
    except ValueError as e:
        raise _bad_request(path) from e
    if not 1 <= month <= 12:
        raise _bad_request(path)

    return store.get_contacts_by_created_date(year, month, day)


def created_at_method_not_allowed(request: Request) -> HTTPException:
    """Build the 405 error for any method other than ``GET``."""
    return HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=f"expect method GET /createdAt/<year>/<month>/<day>, got {request.method}",
        headers={"Allow": "GET"},
    )
