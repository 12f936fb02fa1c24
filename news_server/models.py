from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NewsInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    context: str
    reporter: str
    country: str
    time: datetime


class News(BaseModel):
    """A stored news item. Frozen: nothing changes after creation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=-(2**63), lt=2**63)
    info: NewsInfo
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
