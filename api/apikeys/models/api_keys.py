"""Pydantic models for API key records and list responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict


class ApiKey(BaseModel):
    """An API key record as exposed by the list endpoint."""

    id: str = Field(..., min_length=1, description="Primary key, ordered lexicographically")
    key: str = Field(..., description="The API key value")
    usage_count: int = Field(
        default=0,
        alias="usageCount",
        description="Number of times the key has been used"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "key1",
                "key": "api-key-1",
                "usageCount": 10
            }
        }
    )


class ApiKeyRow(BaseModel):
    """Database row representation of an API key."""

    id: str
    key: str
    usage_count: int

    def to_api_key(self) -> ApiKey:
        """Convert database row to API model."""
        return ApiKey(id=self.id, key=self.key, usage_count=self.usage_count)


class ApiKeyListResponse(BaseModel):
    """Response model for the paginated API key list."""

    api_keys: List[ApiKey] = Field(alias="apiKeys", description="API keys on this page")
    next_cursor: Optional[str] = Field(
        default=None,
        alias="nextCursor",
        description="Cursor for the next page; absent on the last page"
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_body(self) -> Dict[str, Any]:
        """Serialize for the wire, omitting ``nextCursor`` on the last page."""
        body = self.model_dump(by_alias=True)
        if self.next_cursor is None:
            del body["nextCursor"]
        return body
