from typing import Any, Dict, Sequence

from chartstream.schemas.state import ChartDescriptor, Point


def resolve_selection(chart_array: Sequence[ChartDescriptor], point: Point) -> Dict[str, Any]:
    """Data tuple handed to click handlers for a selected point."""
    chart = chart_array[point.chart_index]
    data: Dict[str, Any] = {}
    if chart.x:
        data[chart.x] = point.x
    data[chart.y] = point.y
    data["colorCategory"] = point.color
    data["size"] = point.amount
    return data
