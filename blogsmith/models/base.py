"""Base model class for all database models."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DBModel(BaseModel):
    """Base model for all database models."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = Field(None, description="Primary key (UUID text)")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Optional[str]:
        """Accept UUID objects as returned by the database driver."""
        return str(v) if v is not None else None
