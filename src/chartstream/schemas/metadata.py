from typing import Any, List, Sequence

from pydantic import BaseModel, Field, model_validator

Row = Sequence[Any]


class ColumnMetadata(BaseModel):
    """Column names and declared types, positionally aligned with every row."""

    names: List[str] = Field(..., description="Ordered column names")
    types: List[str] = Field(..., description="Declared column type per name (linear, ordinal, time, ...)")

    @model_validator(mode="after")
    def _check_alignment(self) -> "ColumnMetadata":
        if len(self.names) != len(self.types):
            raise ValueError(
                f"metadata names/types length mismatch: {len(self.names)} names, {len(self.types)} types"
            )
        seen = set()
        duplicates = []
        for name in self.names:
            if name in seen:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise ValueError(f"duplicate column names in metadata: {', '.join(duplicates)}")
        return self

    def index_of(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            return -1
