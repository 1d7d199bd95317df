"""Pagination module for cursor-based pagination."""

from .cursor import (
    RangeScan,
    OrderedStore,
    Page,
    build_range_scan,
    paginate_query_results,
    paginate,
    create_link_header
)

__all__ = [
    "RangeScan",
    "OrderedStore",
    "Page",
    "build_range_scan",
    "paginate_query_results",
    "paginate",
    "create_link_header"
]
