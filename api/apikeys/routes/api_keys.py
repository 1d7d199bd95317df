"""API keys list endpoint."""

import logging
import re
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from ..db.api_keys import get_api_key_store
from ..errors.http_errors import BadRequestError, InternalServerError
from ..models.api_keys import ApiKeyListResponse
from ..pagination import OrderedStore, paginate, create_link_header


logger = logging.getLogger(__name__)

INVALID_LIMIT_MESSAGE = "Limit must be a positive integer."
RETRIEVAL_FAILED_MESSAGE = "Failed to retrieve API keys."

_INTEGER_RE = re.compile(r"([+-]?)0*([0-9]*)")

# Largest page size whose over-fetch (limit + 1) still fits a bigint LIMIT
MAX_LIMIT = 2 ** 63 - 2

router = APIRouter(
    prefix="/api-keys",
    tags=["API Keys"],
    responses={
        400: {"description": "Bad Request"},
        500: {"description": "Internal Server Error"}
    }
)


def parse_limit(limit: Optional[str]) -> Optional[int]:
    """Parse the ``limit`` query parameter.

    Args:
        limit: Raw query string value, or None when absent

    Returns:
        The positive page size clamped to ``MAX_LIMIT``, or None when the
        parameter was absent

    Raises:
        BadRequestError: If the value is not a strictly positive base-10 integer
    """
    if limit is None:
        return None

    value = limit.strip()
    match = _INTEGER_RE.fullmatch(value)
    if not match:
        raise BadRequestError(INVALID_LIMIT_MESSAGE)

    # Leading zeros are consumed by the pattern, so "0" and "000" leave no digits
    sign, digits = match.groups()
    if sign == "-" or not digits:
        raise BadRequestError(INVALID_LIMIT_MESSAGE)

    # Too long to be below MAX_LIMIT; skip the int() conversion entirely
    if len(digits) > len(str(MAX_LIMIT)):
        return MAX_LIMIT
    return min(int(digits, 10), MAX_LIMIT)


@router.get(
    "",
    response_model=ApiKeyListResponse,
    summary="List API keys",
    description="List API keys ascending by id with cursor-based pagination.",
    responses={
        200: {"description": "API keys retrieved successfully"}
    }
)
async def list_api_keys(
    request: Request,
    store: Annotated[OrderedStore, Depends(get_api_key_store)],
    cursor: Annotated[Optional[str], Query(description="nextCursor from the previous page")] = None,
    limit: Annotated[Optional[str], Query(description="Number of API keys per page")] = None
) -> JSONResponse:
    """List API keys with pagination.

    The limit is validated before any data access. Failures from the store
    are logged and reported with a fixed message; their details never
    reach the caller.
    """
    parsed_limit = parse_limit(limit)

    try:
        page = await paginate(store, cursor=cursor, limit=parsed_limit)
    except Exception:
        logger.error("Error fetching API keys", exc_info=True)
        raise InternalServerError(RETRIEVAL_FAILED_MESSAGE)

    body = ApiKeyListResponse(api_keys=page.items, next_cursor=page.next_cursor).to_body()
    response = JSONResponse(content=body)

    # Add Link header for pagination (RFC 8288)
    if page.next_cursor:
        base_url = str(request.url).split('?')[0]
        params = {"limit": str(parsed_limit)} if parsed_limit is not None else {}
        link_header = create_link_header(base_url, params, page.next_cursor)
        if link_header:
            response.headers["Link"] = link_header

    logger.info(f"Retrieved {len(page.items)} API keys")
    return response
