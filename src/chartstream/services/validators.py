from typing import Sequence

from chartstream.schemas.metadata import ColumnMetadata, Row
from chartstream.schemas.state import ChartDescriptor, ClassificationMode, ResolvedColumns
from chartstream.services.errors import (
    DatasetTooLargeError,
    MissingOptionalFieldError,
    MissingRequiredFieldError,
    RowShapeError,
)
from chartstream.services.scales import ORDINAL, resolve_scale, scale_kind


def enforce_dimensions(
    row_count: int, column_count: int, max_rows: int, max_columns: int, chart_type: str = "chart"
) -> None:
    if row_count > max_rows or column_count > max_columns:
        raise DatasetTooLargeError(
            chart_type,
            "dataset too large",
            details=[
                f"rows={row_count}, cols={column_count}, limits rows<={max_rows}, cols<={max_columns}"
            ],
        )


def check_row_shapes(rows: Sequence[Row], metadata: ColumnMetadata, chart_type: str = "chart") -> None:
    width = len(metadata.names)
    issues = [
        f"row {position} has {len(row)} values, expected {width}"
        for position, row in enumerate(rows)
        if len(row) != width
    ]
    if issues:
        raise RowShapeError(chart_type, "rows are not aligned with column metadata", details=issues[:10])


def resolve_columns(chart: ChartDescriptor, metadata: ColumnMetadata) -> ResolvedColumns:
    """Resolve the column positions a chart reads and the way it is classified.

    Required fields (x, y) and configured optional fields (size, colour) must
    all be present in the metadata. Nothing is mutated, so a failure here
    leaves the chart untouched.
    """
    x_index = metadata.index_of(chart.x) if chart.x else -1
    y_index = metadata.index_of(chart.y)
    if x_index == -1:
        raise MissingRequiredFieldError(
            chart.type, f"x axis name '{chart.x}' is not found among metadata", details=[str(chart.x)]
        )
    if y_index == -1:
        raise MissingRequiredFieldError(
            chart.type, f"y axis name '{chart.y}' is not found among metadata", details=[chart.y]
        )

    size_index = None
    if chart.size:
        size_index = metadata.index_of(chart.size)
        if size_index == -1:
            raise MissingOptionalFieldError(
                chart.type, f"size dimension name '{chart.size}' is not found among metadata", details=[chart.size]
            )

    color_index = None
    mode = ClassificationMode.UNKEYED
    if chart.color_category_name:
        color_index = metadata.index_of(chart.color_category_name)
        if color_index == -1:
            raise MissingOptionalFieldError(
                chart.type,
                f"color dimension name '{chart.color_category_name}' is not found among metadata",
                details=[chart.color_category_name],
            )
        # Any colour type other than ordinal, known or not, is drawn as one continuous series.
        if scale_kind(metadata.types[color_index]) == ORDINAL:
            mode = ClassificationMode.KEYED

    return ResolvedColumns(
        x_index=x_index,
        y_index=y_index,
        size_index=size_index,
        color_index=color_index,
        x_scale=resolve_scale(metadata.types[x_index], chart.type),
        mode=mode,
    )
