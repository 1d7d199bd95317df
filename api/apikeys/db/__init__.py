"""Database access for the API Key Directory service."""

from .connection import db_manager, get_db_pool
from .api_keys import PostgresApiKeyStore, get_api_key_store

__all__ = [
    "db_manager",
    "get_db_pool",
    "PostgresApiKeyStore",
    "get_api_key_store"
]
