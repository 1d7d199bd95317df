"""Unit tests for API key stores."""

import importlib
import importlib.util

import pytest
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

from apikeys.db.api_keys import (
    PostgresApiKeyStore, build_range_scan_query, get_api_key_store
)
from apikeys.models.api_keys import ApiKey

from memory_store import InMemoryApiKeyStore


def mock_pool_with(rows=None, error=None):
    """Create a mock pool whose connection fetch returns rows or raises."""
    conn = AsyncMock()
    if error is not None:
        conn.fetch.side_effect = error
    else:
        conn.fetch.return_value = rows or []

    @asynccontextmanager
    async def acquire():
        yield conn

    pool = MagicMock()
    pool.acquire = acquire
    return pool, conn


class TestRangeScanQuery:
    """Test SQL generation for range scans."""

    def test_first_page(self):
        query, params = build_range_scan_query(11)

        assert "WHERE" not in query
        assert 'ORDER BY id COLLATE "C" ASC' in query
        assert query.endswith("LIMIT $1")
        assert params == [11]

    def test_after_cursor(self):
        query, params = build_range_scan_query(3, cursor="key2", skip=1)

        assert 'WHERE id COLLATE "C" > $1' in query
        assert query.endswith("LIMIT $2")
        assert params == ["key2", 3]

    def test_from_cursor_inclusive(self):
        query, params = build_range_scan_query(3, cursor="key2", skip=0)

        assert 'WHERE id COLLATE "C" >= $1' in query
        assert params == ["key2", 3]


class TestPostgresApiKeyStore:
    """Test the asyncpg-backed store."""

    @pytest.mark.asyncio
    async def test_range_scan_maps_rows(self):
        rows = [
            {"id": "key1", "key": "api-key-1", "usage_count": 10},
            {"id": "key2", "key": "api-key-2", "usage_count": 20},
        ]
        pool, conn = mock_pool_with(rows)

        with patch("apikeys.db.api_keys.get_db_pool", AsyncMock(return_value=pool)):
            result = await PostgresApiKeyStore().range_scan(take=3, cursor="key0", skip=1)

        assert result == [
            ApiKey(id="key1", key="api-key-1", usage_count=10),
            ApiKey(id="key2", key="api-key-2", usage_count=20),
        ]
        query, *params = conn.fetch.call_args.args
        assert params == ["key0", 3]

    @pytest.mark.asyncio
    async def test_range_scan_propagates_errors(self):
        pool, _ = mock_pool_with(error=OSError("connection refused"))

        with patch("apikeys.db.api_keys.get_db_pool", AsyncMock(return_value=pool)):
            with pytest.raises(OSError):
                await PostgresApiKeyStore().range_scan(take=11)

    def test_dependency_returns_store(self):
        assert isinstance(get_api_key_store(), PostgresApiKeyStore)


class TestInMemoryApiKeyStore:
    """Test the in-memory ordered store."""

    def test_not_shipped_with_package(self):
        assert importlib.util.find_spec("apikeys.db.memory") is None
        assert not hasattr(importlib.import_module("apikeys.db"), "InMemoryApiKeyStore")

    @pytest.fixture
    def populated(self, make_api_keys):
        return InMemoryApiKeyStore(make_api_keys(3, 1, 5, 2, 4))

    @pytest.mark.asyncio
    async def test_scan_is_ascending(self, populated):
        result = await populated.range_scan(take=10)

        assert [k.id for k in result] == ["key1", "key2", "key3", "key4", "key5"]

    @pytest.mark.asyncio
    async def test_scan_respects_take(self, populated):
        result = await populated.range_scan(take=2)

        assert [k.id for k in result] == ["key1", "key2"]

    @pytest.mark.asyncio
    async def test_skip_excludes_cursor(self, populated):
        result = await populated.range_scan(take=2, cursor="key2", skip=1)

        assert [k.id for k in result] == ["key3", "key4"]

    @pytest.mark.asyncio
    async def test_no_skip_includes_cursor(self, populated):
        result = await populated.range_scan(take=2, cursor="key2")

        assert [k.id for k in result] == ["key2", "key3"]

    @pytest.mark.asyncio
    async def test_missing_cursor_resumes_at_next_key(self, populated):
        populated.remove("key3")

        result = await populated.range_scan(take=5, cursor="key3", skip=1)

        assert [k.id for k in result] == ["key4", "key5"]

    def test_add_replaces_existing_id(self, populated):
        populated.add(ApiKey(id="key1", key="rotated", usage_count=0))

        assert len(populated) == 5

    @pytest.mark.asyncio
    async def test_records_calls(self, populated):
        await populated.range_scan(take=4, cursor="key1", skip=1)

        assert populated.calls == [{"take": 4, "cursor": "key1", "skip": 1}]
