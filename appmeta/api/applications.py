"""
HTTP endpoints for creating and searching application metadata.

Both endpoints take a YAML document in the request body:
- PUT  /create  validates the record and adds it to the store
- POST /search  treats the record as a partial-match query

Any other method on these paths is answered with 400 and a hint naming the
expected method.
"""

from __future__ import annotations

import logging
import threading

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from appmeta.api.codec import YAML_MEDIA_TYPE, decode_application, encode_applications
from appmeta.core.dependencies import get_store, get_store_lock
from appmeta.domain.entities import ApplicationStore
from appmeta.domain.errors import ApplicationConflictError, ApplicationDecodeError
from appmeta.domain.validation import find_validation_issues

logger = logging.getLogger(__name__)
router = APIRouter()

PARSE_ERROR_MESSAGE = (
    "Failed to parse YAML input. This likely indicates malformed request body. "
    "Verify the payload fields and parameter types are correct.\n"
)
VALIDATION_ERROR_HEADER = "Failed to validate input of the following parameters:\n"
CREATE_METHOD_MESSAGE = "Please use a PUT request to create an application.\n"
SEARCH_METHOD_MESSAGE = "Please use a POST request to search for an application.\n"

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# ---------------------------------------------------------------------------
# 1. PUT /create
# ---------------------------------------------------------------------------

@router.api_route("/create", methods=ANY_METHOD)
async def create_application(
    request: Request,
    store: ApplicationStore = Depends(get_store),
    lock: threading.Lock = Depends(get_store_lock),
) -> Response:
    if request.method != "PUT":
        return PlainTextResponse(CREATE_METHOD_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        app = decode_application(await request.body())
    except ApplicationDecodeError:
        return PlainTextResponse(PARSE_ERROR_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

    issues = find_validation_issues(app)
    if issues:
        logger.info(f"Rejected invalid input: {[issue.namespace for issue in issues]}")
        body = VALIDATION_ERROR_HEADER + "".join(f"{issue.describe()}\n" for issue in issues)
        return PlainTextResponse(body, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        with lock:
            store.insert(app)
    except ApplicationConflictError as e:
        logger.info(f"Rejected duplicate title: {e.title}")
        return PlainTextResponse(
            f"An application with title {e.title} already exists, please use a unique title.",
            status_code=status.HTTP_409_CONFLICT,
        )

    return Response(status_code=status.HTTP_201_CREATED)


# ---------------------------------------------------------------------------
# 2. POST /search
# ---------------------------------------------------------------------------

@router.api_route("/search", methods=ANY_METHOD)
async def search_applications(
    request: Request,
    store: ApplicationStore = Depends(get_store),
    lock: threading.Lock = Depends(get_store_lock),
) -> Response:
    if request.method != "POST":
        return PlainTextResponse(SEARCH_METHOD_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

    # Queries are decoded but never validated; empty fields are wildcards.
    try:
        query = decode_application(await request.body())
    except ApplicationDecodeError:
        return PlainTextResponse(PARSE_ERROR_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

    logger.debug(f"Received search query: {query.model_dump(exclude_defaults=True)}")
    with lock:
        matches = store.search(query)

    return Response(
        content=encode_applications(matches),
        status_code=status.HTTP_200_OK,
        media_type=YAML_MEDIA_TYPE,
    )
