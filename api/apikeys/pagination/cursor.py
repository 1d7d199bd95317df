"""Cursor-based pagination over an ordered key space.

Pages are fetched with a single range scan that asks for one row more than
the page size. The presence of that extra row is the "more data exists"
signal; it is dropped from the page and its ``id`` becomes the next cursor.
The next page therefore starts at the cursor, inclusive.

A cursor is a resume point, not an existence check: if the record it names
has since been deleted, the scan continues from the next greater key.
"""

import logging
from typing import Optional, Dict, Any, List, Tuple, Protocol, runtime_checkable
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from ..config import get_settings
from ..models.api_keys import ApiKey


logger = logging.getLogger(__name__)


class RangeScan(BaseModel):
    """A bounded, ascending-by-id fetch request."""

    take: int = Field(ge=1, description="Maximum number of rows to return")
    cursor: Optional[str] = Field(default=None, description="Key to start the scan from")
    skip: int = Field(default=0, ge=0, le=1, description="1 to exclude the cursor row itself, 0 to include it")


@runtime_checkable
class OrderedStore(Protocol):
    """Anything offering an ordered range scan by primary key."""

    async def range_scan(
        self,
        take: int,
        cursor: Optional[str] = None,
        skip: int = 0
    ) -> List[ApiKey]:
        ...


class Page(BaseModel):
    """One page of records and the cursor for the next one."""

    items: List[ApiKey] = Field(description="Records ascending by id")
    next_cursor: Optional[str] = Field(default=None, description="Cursor for next page")

    @property
    def has_more(self) -> bool:
        return self.next_cursor is not None


def build_range_scan(cursor: Optional[str], limit: int) -> RangeScan:
    """Build the over-fetching range scan for a page.

    Args:
        cursor: ``next_cursor`` of the previous page, if any
        limit: Requested page size

    Returns:
        Range scan asking for ``limit + 1`` rows starting at ``cursor``
    """
    if cursor:
        return RangeScan(take=limit + 1, cursor=cursor, skip=0)
    return RangeScan(take=limit + 1)


def paginate_query_results(
    items: List[ApiKey],
    limit: int
) -> Tuple[List[ApiKey], Optional[str]]:
    """Process over-fetched results for pagination.

    Args:
        items: Rows returned by the range scan, at most ``limit + 1``
        limit: Requested page size

    Returns:
        Tuple of (page_items, next_cursor)
    """
    if len(items) > limit:
        return list(items[:limit]), items[limit].id
    return list(items), None


async def paginate(
    store: OrderedStore,
    cursor: Optional[str] = None,
    limit: Optional[int] = None
) -> Page:
    """Fetch one page of records from an ordered store.

    Args:
        store: Collaborator providing ``range_scan``
        cursor: ``next_cursor`` from a previous page
        limit: Page size, defaults to the configured page size

    Returns:
        The page and the cursor for the next one

    Raises:
        ValueError: If ``limit`` is not positive
    """
    if limit is None:
        limit = get_settings().default_page_size
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")

    scan = build_range_scan(cursor, limit)
    logger.debug(f"Range scan take={scan.take} cursor={scan.cursor!r} skip={scan.skip}")

    rows = await store.range_scan(take=scan.take, cursor=scan.cursor, skip=scan.skip)

    page_items, next_cursor = paginate_query_results(rows, limit)
    return Page(items=page_items, next_cursor=next_cursor)


def create_link_header(
    base_url: str,
    params: Dict[str, Any],
    next_cursor: Optional[str] = None
) -> Optional[str]:
    """Create Link header for pagination as per RFC 8288.

    Args:
        base_url: Base URL for the resource
        params: Current query parameters
        next_cursor: Cursor for next page

    Returns:
        Link header value or None if there is no next page
    """
    if not next_cursor:
        return None

    next_params = {**params, "cursor": next_cursor}
    return f'<{base_url}?{urlencode(next_params)}>; rel="next"'
