from chartstream.schemas.chart_config import ChartConfig, ChartDefinition
from chartstream.schemas.metadata import ColumnMetadata
from chartstream.services.chart_session import ChartSession
from chartstream.services.errors import (
    ChartConfigurationError,
    MissingOptionalFieldError,
    MissingRequiredFieldError,
    UnsupportedColumnTypeError,
)

__all__ = [
    "ChartConfig",
    "ChartDefinition",
    "ChartConfigurationError",
    "ChartSession",
    "ColumnMetadata",
    "MissingOptionalFieldError",
    "MissingRequiredFieldError",
    "UnsupportedColumnTypeError",
]
