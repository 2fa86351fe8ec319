from typing import Deque, Dict

from chartstream.schemas.state import ChartDescriptor, Point


def trim_series(series: Deque[Point], max_length: int) -> int:
    """Evict the oldest points until at most ``max_length`` remain."""
    removed = 0
    while len(series) > max_length:
        series.popleft()
        removed += 1
    return removed


def apply_window(chart: ChartDescriptor, data_sets: Dict[str, Deque[Point]]) -> int:
    if not chart.max_length:
        return 0
    removed = 0
    for key in chart.data_set_names:
        series = data_sets.get(key)
        if series is not None:
            removed += trim_series(series, chart.max_length)
    return removed
