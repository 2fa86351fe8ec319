from typing import Any, List

from pydantic import BaseModel, Field

from chartstream.schemas.metadata import ColumnMetadata


class DataUpdateRequest(BaseModel):
    metadata: ColumnMetadata = Field(..., description="Column names and types aligned with rows")
    rows: List[List[Any]] = Field(default_factory=list, description="New rows, oldest first")


class LegendToggleRequest(BaseModel):
    name: str = Field(..., description="Category key to suppress or restore")


class SelectionRequest(BaseModel):
    key: str = Field(..., description="Category key of the clicked series")
    index: int = Field(..., ge=0, description="Position of the clicked point inside the series")
