import pytest

from chartstream.schemas.chart_config import ChartConfig
from chartstream.schemas.metadata import ColumnMetadata
from chartstream.services.chart_session import ChartSession
from chartstream.services.errors import (
    InvalidSelectionError,
    MissingRequiredFieldError,
    UnknownCategoryError,
    UnsupportedColumnTypeError,
)

ROWS = [
    [1000, "alpha", 21.5, 3],
    [2000, "beta", 19.0, 5],
    [3000, "alpha", 21.7, 4],
]


def test_colour_stable_across_updates(metadata, keyed_config):
    session = ChartSession(keyed_config)
    session.update(metadata, ROWS)
    session.update(metadata, [[4000, "gamma", 18.0, 1], [5000, "alpha", 22.0, 2]])
    names = session.chart_array[0].data_set_names
    assert names == {"alpha": "red", "beta": "blue", "gamma": "green"}
    assert [p.y for p in session.data_sets["alpha"]] == [21.5, 21.7, 22.0]


def test_update_returns_state_with_scale_and_legend(metadata, keyed_config):
    state = ChartSession(keyed_config).update(metadata, ROWS)
    assert state.x_scale == "time"
    assert set(state.data_sets) == {"alpha", "beta"}
    assert [item.name for item in state.legend_items] == ["alpha", "beta"]


def test_validation_failure_leaves_state_untouched(metadata):
    config = ChartConfig.model_validate(
        {
            "x": "timestamp",
            "charts": [
                {"y": "reading", "color": "device"},
                {"type": "scatter", "y": "missing_col"},
            ],
        }
    )
    session = ChartSession(config)
    with pytest.raises(MissingRequiredFieldError):
        session.update(metadata, ROWS)
    assert session.data_sets == {}
    assert all(chart.data_set_names == {} and chart.color_index == 0 for chart in session.chart_array)


def test_unlisted_colour_column_type_is_unkeyed(keyed_config):
    metadata = ColumnMetadata(names=["timestamp", "device", "reading"], types=["time", "geo", "linear"])
    session = ChartSession(keyed_config)
    state = session.update(metadata, [[1, "a", 2], [2, "b", 3]])
    assert list(state.data_sets) == ["reading"]
    assert [p.color for p in state.data_sets["reading"]] == ["a", "b"]
    assert session.chart_array[0].data_set_names == {"reading": "red"}


def test_unknown_x_column_type_still_rejected(keyed_config):
    metadata = ColumnMetadata(names=["timestamp", "device", "reading"], types=["geo", "ordinal", "linear"])
    session = ChartSession(keyed_config)
    with pytest.raises(UnsupportedColumnTypeError):
        session.update(metadata, [[1, "a", 2]])
    assert session.data_sets == {}


def test_continuous_colour_series_carries_gradient():
    config = ChartConfig.model_validate(
        {"charts": [{"type": "scatter", "x": "t", "y": "v", "color": "c", "colorScale": ["#000", "#fff"]}]}
    )
    metadata = ColumnMetadata(names=["t", "c", "v"], types=["linear", "linear", "linear"])
    session = ChartSession(config)
    session.update(metadata, [[1, 0.5, 10], [2, 4.0, 11], [3, -1.5, 12]])

    [series] = session.visible_series()
    assert series.name == "v"
    assert series.color_range == ["#000", "#fff"]
    assert series.color_domain == [-1.5, 4.0]
    assert session.chart_array[0].continuous_color is True

    session.update(metadata, [[4, 9.0, 13]])
    assert session.visible_series()[0].color_domain == [-1.5, 9.0]


def test_categorical_series_have_no_gradient(metadata, keyed_config):
    session = ChartSession(keyed_config)
    session.update(metadata, ROWS)
    assert all(s.color_range is None and s.color_domain is None for s in session.visible_series())
    assert session.chart_array[0].continuous_color is False


def test_toggle_rejects_unknown_category(metadata, keyed_config):
    session = ChartSession(keyed_config)
    session.update(metadata, ROWS)
    with pytest.raises(UnknownCategoryError):
        session.toggle_ignored("never-seen")
    assert session.ignored == []


def test_window_keeps_most_recent_points(metadata):
    config = ChartConfig.model_validate(
        {"x": "timestamp", "charts": [{"y": "reading", "color": "device", "maxLength": 2}]}
    )
    session = ChartSession(config)
    for step in range(5):
        session.update(metadata, [[step, "alpha", float(step), 0]])
    assert [p.y for p in session.data_sets["alpha"]] == [3.0, 4.0]


def test_empty_update_consumes_nothing(metadata, keyed_config):
    session = ChartSession(keyed_config)
    state = session.update(metadata, [])
    assert state.data_sets == {}
    assert session.chart_array[0].color_index == 0


def test_configure_same_config_keeps_colours(metadata, keyed_config):
    session = ChartSession(keyed_config)
    session.update(metadata, ROWS)
    assert session.configure(ChartConfig.model_validate(keyed_config.model_dump(by_alias=True))) is False
    assert session.chart_array[0].data_set_names == {"alpha": "red", "beta": "blue"}
    assert len(session.data_sets["alpha"]) == 2


def test_configure_new_config_resets(metadata, keyed_config):
    session = ChartSession(keyed_config)
    session.update(metadata, ROWS)
    replacement = ChartConfig.model_validate({"x": "timestamp", "charts": [{"y": "load"}]})
    assert session.configure(replacement) is True
    assert session.data_sets == {}
    assert session.chart_array[0].y == "load"


def test_legend_lists_suppressed_categories(metadata, keyed_config):
    session = ChartSession(keyed_config)
    session.update(metadata, ROWS)
    assert session.toggle_ignored("beta") is True
    session.update(metadata, [[4000, "alpha", 20.0, 1]])

    legend = {item.name: item for item in session.legend_items()}
    assert set(legend) == {"alpha", "beta"}
    assert legend["beta"].ignored and legend["beta"].fill == "#d3d3d3"
    assert legend["beta"].color == "blue"
    assert [s.name for s in session.visible_series()] == ["alpha"]

    assert session.toggle_ignored("beta") is False
    assert {s.name for s in session.visible_series()} == {"alpha", "beta"}


def test_select_resolves_point_and_calls_handler(metadata):
    clicks = []
    config = ChartConfig.model_validate(
        {"charts": [{"type": "scatter", "x": "timestamp", "y": "reading", "size": "load", "color": "device"}]}
    )
    session = ChartSession(config, on_click=clicks.append)
    session.update(metadata, ROWS)
    data = session.select("alpha", 1)
    assert data == {"timestamp": 3000, "reading": 21.7, "colorCategory": "alpha", "size": 4}
    assert clicks == [data]


def test_select_out_of_range(metadata, keyed_config):
    session = ChartSession(keyed_config)
    session.update(metadata, ROWS)
    with pytest.raises(InvalidSelectionError):
        session.select("alpha", 5)
    with pytest.raises(InvalidSelectionError):
        session.select("nope", 0)


def test_snapshot_is_detached(metadata, keyed_config):
    session = ChartSession(keyed_config)
    state = session.update(metadata, ROWS)
    session.update(metadata, [[4000, "delta", 1.0, 1]])
    assert "delta" not in state.data_sets
    assert "delta" not in state.chart_array[0].data_set_names
