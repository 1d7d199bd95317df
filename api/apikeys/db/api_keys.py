"""Database operations for API keys."""

import logging
from typing import Optional, List

from ..models.api_keys import ApiKey, ApiKeyRow
from .connection import get_db_pool


logger = logging.getLogger(__name__)

_SELECT = 'SELECT id, key, usage_count FROM api_keys'
_ORDER = 'ORDER BY id COLLATE "C" ASC'


def build_range_scan_query(
    take: int,
    cursor: Optional[str] = None,
    skip: int = 0
) -> tuple[str, list]:
    """Build the SQL for an ascending range scan over ``api_keys.id``.

    Args:
        take: Maximum number of rows
        cursor: Key to start from
        skip: 1 to start strictly after ``cursor``, 0 to include it

    Returns:
        Tuple of (query, parameters)
    """
    if cursor is None:
        return f"{_SELECT} {_ORDER} LIMIT $1", [take]

    op = ">" if skip else ">="
    query = f'{_SELECT} WHERE id COLLATE "C" {op} $1 {_ORDER} LIMIT $2'
    return query, [cursor, take]


class PostgresApiKeyStore:
    """Ordered API key store backed by the asyncpg pool."""

    async def range_scan(
        self,
        take: int,
        cursor: Optional[str] = None,
        skip: int = 0
    ) -> List[ApiKey]:
        """Return up to ``take`` API keys ascending by id.

        Errors from the database propagate unchanged.
        """
        query, params = build_range_scan_query(take, cursor, skip)

        pool = await get_db_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(query, *params)

        logger.debug(f"Range scan returned {len(rows)} rows")
        return [ApiKeyRow.model_validate(dict(row)).to_api_key() for row in rows]


def get_api_key_store() -> PostgresApiKeyStore:
    """Dependency returning the API key store."""
    return PostgresApiKeyStore()
