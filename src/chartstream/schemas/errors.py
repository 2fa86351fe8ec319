from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorCode:
    MISSING_REQUIRED_FIELD = "missing_required_field"
    MISSING_OPTIONAL_FIELD = "missing_optional_field"
    UNSUPPORTED_COLUMN_TYPE = "unsupported_column_type"
    ROW_SHAPE_MISMATCH = "row_shape_mismatch"
    DATASET_TOO_LARGE = "dataset_too_large"
    INVALID_FILE_TYPE = "invalid_file_type"
    PAYLOAD_ERROR = "payload_error"
    UNKNOWN_CHART_SESSION = "unknown_chart_session"
    SESSION_LIMIT_REACHED = "session_limit_reached"
    INVALID_SELECTION = "invalid_selection"
    UNKNOWN_PALETTE = "unknown_palette"
    UNKNOWN_CATEGORY = "unknown_category"


class ErrorResponse(BaseModel):
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable description")
    details: Optional[List[str]] = Field(default=None, description="Specific field issues")
    chart_type: Optional[str] = Field(default=None, description="Chart type the error was raised for")
