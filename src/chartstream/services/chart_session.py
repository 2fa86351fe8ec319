import threading
from typing import Any, Callable, Deque, Dict, List, Optional, Sequence

from chartstream.config.observability import log_debug, log_error, log_event, timed
from chartstream.config.settings import settings
from chartstream.schemas.chart_config import ChartConfig
from chartstream.schemas.metadata import ColumnMetadata, Row
from chartstream.schemas.state import (
    ChartDescriptor,
    ChartState,
    ClassificationMode,
    LegendItem,
    Point,
    RenderSeries,
)
from chartstream.services.chart_definitions import build_chart_array
from chartstream.services.classifier import classify
from chartstream.services.errors import ChartConfigurationError, InvalidSelectionError, UnknownCategoryError
from chartstream.services.interaction import resolve_selection
from chartstream.services.legend import build_legend, visible_series
from chartstream.services.scales import LINEAR
from chartstream.services.validators import check_row_shapes, enforce_dimensions, resolve_columns
from chartstream.services.window import apply_window

ClickHandler = Callable[[Dict[str, Any]], Any]


class ChartSession:
    """Owns the classification state of one chart instance.

    Descriptors (with their colour assignments) and the per-category series
    live here for the lifetime of the session. Every update validates all
    charts and rows before touching any state, and updates are serialized
    so a half-applied batch is never visible to readers.
    """

    def __init__(
        self,
        config: Optional[ChartConfig] = None,
        on_click: Optional[ClickHandler] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.session_id = session_id
        self.on_click = on_click
        self._lock = threading.Lock()
        self._config = config or ChartConfig()
        self.chart_array: List[ChartDescriptor] = build_chart_array(self._config)
        self.data_sets: Dict[str, Deque[Point]] = {}
        self.x_scale = LINEAR
        self.ignored: List[str] = []

    def configure(self, config: ChartConfig) -> bool:
        """Replace the configuration; an identical one keeps all state."""
        with self._lock:
            if config.model_dump() == self._config.model_dump():
                return False
            chart_array = build_chart_array(config)
            self._config = config
            self.chart_array = chart_array
            self.data_sets = {}
            self.x_scale = LINEAR
            self.ignored = []
        log_event("chart_configured", session=self.session_id, charts=len(chart_array))
        return True

    def update(self, metadata: ColumnMetadata, rows: Sequence[Row]) -> ChartState:
        with self._lock:
            chart_type = self.chart_array[0].type if self.chart_array else "chart"
            try:
                enforce_dimensions(
                    len(rows), len(metadata.names), settings.max_rows, settings.max_columns, chart_type
                )
                check_row_shapes(rows, metadata, chart_type)
                resolved = [resolve_columns(chart, metadata) for chart in self.chart_array]
            except ChartConfigurationError as exc:
                log_error(exc.code, exc.message, session=self.session_id, chart_type=exc.chart_type)
                raise

            with timed("classify_update", session=self.session_id, rows=len(rows)):
                for chart, columns in zip(self.chart_array, resolved):
                    chart.continuous_color = (
                        columns.color_index is not None and columns.mode is ClassificationMode.UNKEYED
                    )
                    known = len(chart.data_set_names)
                    classify(chart, columns, rows, self.data_sets)
                    evicted = apply_window(chart, self.data_sets)
                    if len(chart.data_set_names) > known:
                        log_debug(
                            "categories_added",
                            chart=chart.id,
                            keys=list(chart.data_set_names)[known:],
                        )
                    if evicted:
                        log_debug("points_evicted", chart=chart.id, count=evicted)
            if resolved:
                self.x_scale = resolved[-1].x_scale

            log_event("chart_updated", session=self.session_id, rows=len(rows), series=len(self.data_sets))
            return self._snapshot()

    def state(self) -> ChartState:
        with self._lock:
            return self._snapshot()

    def legend_items(self) -> List[LegendItem]:
        with self._lock:
            return build_legend(self.chart_array, self.ignored)

    def visible_series(self) -> List[RenderSeries]:
        with self._lock:
            return visible_series(self.chart_array, self.data_sets, self.ignored)

    def toggle_ignored(self, name: str) -> bool:
        """Suppress or restore a known series; returns True when it is now suppressed."""
        with self._lock:
            if not any(name in chart.data_set_names for chart in self.chart_array):
                raise UnknownCategoryError(f"Unknown category: {name}")
            if name in self.ignored:
                self.ignored.remove(name)
                return False
            self.ignored.append(name)
            return True

    def select(self, key: str, index: int) -> Dict[str, Any]:
        with self._lock:
            series = self.data_sets.get(key)
            if series is None or not 0 <= index < len(series):
                raise InvalidSelectionError(f"No point {index} in series '{key}'")
            data = resolve_selection(self.chart_array, series[index])
        if self.on_click is not None:
            self.on_click(data)
        return data

    def _snapshot(self) -> ChartState:
        return ChartState(
            chart_array=[chart.model_copy(deep=True) for chart in self.chart_array],
            data_sets={key: list(series) for key, series in self.data_sets.items()},
            x_scale=self.x_scale,
            legend_items=build_legend(self.chart_array, self.ignored),
            ignored=list(self.ignored),
        )
