from collections import deque

from chartstream.schemas.state import ChartDescriptor, ClassificationMode, ResolvedColumns
from chartstream.services.classifier import classify, group_points, build_points

KEYED = ResolvedColumns(x_index=0, y_index=2, color_index=1, x_scale="linear", mode=ClassificationMode.KEYED)
UNKEYED = ResolvedColumns(x_index=0, y_index=2, x_scale="linear")


def _chart(**overrides) -> ChartDescriptor:
    fields = {"id": 0, "x": "t", "y": "v", "color_category_name": "cat", "color_scale": ["red", "blue"]}
    fields.update(overrides)
    return ChartDescriptor(**fields)


def test_grouping_keeps_arrival_order():
    chart = _chart()
    data_sets = {}
    touched = classify(chart, KEYED, [[0, "x", 1], [1, "y", 2], [2, "x", 3]], data_sets)
    assert touched == ["x", "y"]
    assert [p.y for p in data_sets["x"]] == [1, 3]
    assert [p.y for p in data_sets["y"]] == [2]
    assert chart.data_set_names == {"x": "red", "y": "blue"}


def test_new_points_append_to_existing_series():
    chart = _chart()
    data_sets = {}
    classify(chart, KEYED, [[0, "x", 1]], data_sets)
    classify(chart, KEYED, [[1, "y", 2], [2, "x", 3]], data_sets)
    assert [p.y for p in data_sets["x"]] == [1, 3]
    assert chart.data_set_names["x"] == "red"


def test_numeric_category_values_keyed_as_text():
    chart = _chart()
    data_sets = {}
    classify(chart, KEYED, [[0, 7, 1]], data_sets)
    assert list(data_sets) == ["7"]
    assert data_sets["7"][0].color == 7


def test_unkeyed_series_named_after_y_and_uses_first_colour():
    chart = _chart(color_category_name=None, color_index=1)
    data_sets = {}
    classify(chart, UNKEYED, [[0, "x", 1], [1, "y", 2]], data_sets)
    assert list(data_sets) == ["v"]
    assert chart.data_set_names == {"v": "red"}
    assert chart.color_index == 1
    assert [p.amount for p in data_sets["v"]] == [None, None]


def test_empty_rows_are_a_no_op():
    chart = _chart()
    data_sets = {}
    assert classify(chart, KEYED, [], data_sets) == []
    assert classify(chart, UNKEYED, [], data_sets) == []
    assert data_sets == {}
    assert chart.data_set_names == {}
    assert chart.color_index == 0


def test_points_carry_chart_index_and_size():
    columns = ResolvedColumns(x_index=0, y_index=2, size_index=3, color_index=1, x_scale="linear")
    points = build_points([[5, "a", 6, 9]], columns, chart_index=2)
    assert points[0].model_dump(by_alias=True) == {"x": 5, "y": 6, "color": "a", "amount": 9, "chartIndex": 2}


def test_group_points_uses_category_key():
    points = build_points([[0, "b", 1], [1, "a", 2], [2, "b", 3]], KEYED, chart_index=0)
    assert list(group_points(points)) == ["b", "a"]


def test_series_are_deques():
    data_sets = {}
    classify(_chart(), KEYED, [[0, "x", 1]], data_sets)
    assert isinstance(data_sets["x"], deque)
