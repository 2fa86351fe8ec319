from typing import List, Optional

from chartstream.schemas.errors import ErrorCode


class ChartConfigurationError(ValueError):
    """Caller configuration or contract violation detected before any state changes."""

    code = "chart_configuration_error"

    def __init__(self, chart_type: str, message: str, details: Optional[List[str]] = None):
        super().__init__(f"{chart_type}: {message}")
        self.chart_type = chart_type
        self.message = message
        self.details = details or []


class MissingRequiredFieldError(ChartConfigurationError):
    code = ErrorCode.MISSING_REQUIRED_FIELD


class MissingOptionalFieldError(ChartConfigurationError):
    code = ErrorCode.MISSING_OPTIONAL_FIELD


class UnsupportedColumnTypeError(ChartConfigurationError):
    code = ErrorCode.UNSUPPORTED_COLUMN_TYPE


class RowShapeError(ChartConfigurationError):
    code = ErrorCode.ROW_SHAPE_MISMATCH


class DatasetTooLargeError(ChartConfigurationError):
    code = ErrorCode.DATASET_TOO_LARGE


class UnknownSessionError(KeyError):
    pass


class SessionLimitError(RuntimeError):
    pass


class InvalidSelectionError(LookupError):
    pass


class UnknownPaletteError(ChartConfigurationError):
    code = ErrorCode.UNKNOWN_PALETTE


class UnknownCategoryError(LookupError):
    pass
