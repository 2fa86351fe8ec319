from collections import deque
from typing import Deque, Dict, List, Optional, Sequence

from chartstream.schemas.metadata import Row
from chartstream.schemas.state import ChartDescriptor, ClassificationMode, Point, ResolvedColumns
from chartstream.services.color_allocator import allocate_color


def category_key(value) -> str:
    return str(value)


def _pick(row: Row, index: Optional[int]):
    return row[index] if index is not None else None


def build_points(rows: Sequence[Row], columns: ResolvedColumns, chart_index: int) -> List[Point]:
    return [
        Point(
            x=row[columns.x_index],
            y=row[columns.y_index],
            color=_pick(row, columns.color_index),
            amount=_pick(row, columns.size_index),
            chart_index=chart_index,
        )
        for row in rows
    ]


def group_points(points: Sequence[Point]) -> Dict[str, List[Point]]:
    """Group points by category key, keys and points both in arrival order."""
    groups: Dict[str, List[Point]] = {}
    for point in points:
        groups.setdefault(category_key(point.color), []).append(point)
    return groups


def classify(
    chart: ChartDescriptor,
    columns: ResolvedColumns,
    rows: Sequence[Row],
    data_sets: Dict[str, Deque[Point]],
) -> List[str]:
    """Append new rows to the chart's series and return the keys that grew.

    Keyed charts get one series per colour category, each new category
    receiving a colour before any of its points are appended. Unkeyed charts
    feed a single series named after the y field, drawn in the first palette
    colour.
    """
    if not rows:
        return []

    points = build_points(rows, columns, chart.id)

    if columns.mode is ClassificationMode.KEYED:
        groups = group_points(points)
        for key in groups:
            allocate_color(chart, key)
        for key, grouped in groups.items():
            data_sets.setdefault(key, deque()).extend(grouped)
        return list(groups)

    chart.data_set_names.setdefault(chart.y, chart.color_scale[0])
    data_sets.setdefault(chart.y, deque()).extend(points)
    return [chart.y]
