"""
Contact endpoints for API v1.

Two route families are served here:

* ``/contact/``: ``POST`` creates (or replaces) a contact, ``GET``
  lists all contacts and ``DELETE`` removes every contact.
* ``/contact/<email>``: ``GET`` fetches one contact and ``DELETE``
  removes it.  The email is the path segment following ``contact``;
  further segments are ignored.

Any other method on these paths is answered with 405.  Error bodies
are plain text (see ``main.create_app``).
"""

import logging
import re
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from contact_directory_api.app.api.dependencies import get_contact_store, path_segments
from contact_directory_api.app.schemas.contact import Contact, ContactCreate, ContactCreated
from contact_directory_api.app.services.contact_service import ContactNotFoundError, ContactStore

logger = logging.getLogger(__name__)

router = APIRouter()

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9a-z]+"
_MEDIA_TYPE_RE = re.compile(rf"{_TOKEN}(/{_TOKEN})?")


def parse_media_type(header: Optional[str]) -> str:
    """Return the lower‑cased media type of a ``Content-Type`` header.

    Parameters such as ``charset`` are dropped.  Raises ``ValueError``
    when the header is missing, empty or not a valid media type.
    """
    media_type = (header or "").split(";", 1)[0].strip().lower()
    if not media_type:
        raise ValueError("mime: no media type")
    if not _MEDIA_TYPE_RE.fullmatch(media_type):
        raise ValueError(f"mime: invalid media type {media_type!r}")
    return media_type


def _describe_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(messages)


def _email_from_path(path: str) -> str:
    segments = path_segments(path)
    if len(segments) < 2 or not segments[1]:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="expect /contact/<emailid> in contact handler",
        )
    return segments[1]


@router.post("/contact/", response_model=ContactCreated)
async def create_contact(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> ContactCreated:
    """Create a contact from a JSON body.

    The body must be sent as ``application/json`` and may only contain
    ``name``, ``email``, ``address``, ``mobile`` and ``createdAt``.  The
    client's ``createdAt`` is ignored; the contact is stamped with the
    current time.  A contact with the same email is replaced.
    """
    logger.info("handling contact create at %s", request.url.path)

    try:
        media_type = parse_media_type(request.headers.get("content-type"))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if media_type != "application/json":
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="expect application/json Content-Type",
        )

    body = await request.body()
    try:
        contact_in = ContactCreate.model_validate_json(body)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_describe_validation_error(e),
        ) from e

    email = await run_in_threadpool(
        store.create_contact,
        contact_in.name,
        contact_in.email,
        contact_in.address,
        contact_in.mobile,
        datetime.now().astimezone(),
    )
    return ContactCreated(email=email)


@router.get("/contact/", response_model=List[Contact])
def list_contacts(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> List[Contact]:
    """Return all contacts in no particular order."""
    logger.info("handling get all contacts at %s", request.url.path)
    return store.get_all_contacts()


@router.delete("/contact/")
def delete_all_contacts(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> Response:
    logger.info("handling delete all contacts at %s", request.url.path)
    store.delete_all_contacts()
    return Response(status_code=status.HTTP_200_OK)


@router.get("/contact/{email_path:path}", response_model=Contact)
def get_contact(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> Contact:
    """Retrieve a single contact by email.

    Returns HTTP 404 if no contact is stored under that email.
    """
    logger.info("handling get contact at %s", request.url.path)
    email = _email_from_path(request.url.path)
    try:
        return store.get_contact(email)
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/contact/{email_path:path}")
def delete_contact(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> Response:
    """Delete a single contact by email.

    Returns HTTP 404 if no contact is stored under that email.
    """
    logger.info("handling delete contact at %s", request.url.path)
    email = _email_from_path(request.url.path)
    try:
        store.delete_contact(email)
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)


def collection_method_not_allowed(request: Request) -> HTTPException:
    """Build the 405 error for an unsupported method on ``/contact/``."""
    return HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=f"expect method GET, DELETE or POST at /contact/, got {request.method}",
        headers={"Allow": "GET, DELETE, POST"},
    )


def item_method_not_allowed(request: Request) -> HTTPException:
    """Build the error for an unsupported method on ``/contact/<email>``.

    A malformed item path is reported as 400 before the method is
    considered.
    """
    try:
        _email_from_path(request.url.path)
    except HTTPException as e:
        return e
    return HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=f"expect method GET or DELETE at /contact/<emailid>, got {request.method}",
        headers={"Allow": "GET, DELETE"},
    )
