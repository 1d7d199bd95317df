"""Data models for the API Key Directory service."""

from .api_keys import (
    ApiKey,
    ApiKeyRow,
    ApiKeyListResponse
)

__all__ = [
    "ApiKey",
    "ApiKeyRow",
    "ApiKeyListResponse"
]
