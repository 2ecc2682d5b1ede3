from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SearchResultOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: int
    kind: str
    artist_name: str
    collection_name: str
    collection_view_url: str
    image: str
    search_date: datetime


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str


class HealthResponse(BaseModel):
    status: Literal["ok"]
    timestamp: datetime


class HealthDetailsResponse(BaseModel):
    status: Literal["ok"]
    timestamp: datetime
    database_ok: bool
    stored_records: int


class MetaResponse(BaseModel):
    service: str
    version: str
    catalog: str
    catalog_country: str
    catalog_limit: int
    strict_upstream_errors: bool
    timestamp: datetime
