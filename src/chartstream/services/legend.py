from typing import Any, Collection, Deque, Dict, List, Optional, Sequence

from chartstream.schemas.state import ChartDescriptor, LegendItem, Point, RenderSeries
from chartstream.viz.palettes import IGNORED_FILL


def build_legend(chart_array: Sequence[ChartDescriptor], ignored: Collection[str]) -> List[LegendItem]:
    """One legend entry per known category; suppressed ones stay listed, greyed out."""
    items: List[LegendItem] = []
    for chart_index, chart in enumerate(chart_array):
        for name, color in chart.data_set_names.items():
            hidden = name in ignored
            items.append(
                LegendItem(
                    name=name,
                    color=color,
                    fill=IGNORED_FILL if hidden else color,
                    chart_index=chart_index,
                    ignored=hidden,
                )
            )
    return items


def gradient_domain(points: Sequence[Point]) -> Optional[List[Any]]:
    values = [point.color for point in points if point.color is not None]
    if not values:
        return None
    return [min(values), max(values)]


def gradient_range(chart: ChartDescriptor) -> List[str]:
    palette = chart.color_scale
    return [palette[0], palette[1] if len(palette) > 1 else palette[0]]


def visible_series(
    chart_array: Sequence[ChartDescriptor],
    data_sets: Dict[str, Deque[Point]],
    ignored: Collection[str],
) -> List[RenderSeries]:
    """Series the rendering layer should draw.

    Charts coloured by a continuous column also carry the gradient: the
    first two palette colours mapped over the min/max of the raw values.
    """
    series: List[RenderSeries] = []
    for chart_index, chart in enumerate(chart_array):
        for name, color in chart.data_set_names.items():
            if name in ignored:
                continue
            points = list(data_sets.get(name, ()))
            gradient = {}
            if chart.continuous_color:
                gradient = {"color_range": gradient_range(chart), "color_domain": gradient_domain(points)}
            series.append(
                RenderSeries(
                    chart_index=chart_index,
                    chart_type=chart.type,
                    name=name,
                    color=color,
                    points=points,
                    **gradient,
                )
            )
    return series
