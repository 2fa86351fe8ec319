from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassificationMode(str, Enum):
    KEYED = "keyed"
    UNKEYED = "unkeyed"


class Point(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    x: Any = None
    y: Any = None
    color: Any = Field(default=None, description="Raw category value, not a visual colour")
    amount: Any = Field(default=None, description="Size dimension value")
    chart_index: int = Field(0, alias="chartIndex")


class ChartDescriptor(BaseModel):
    """Normalized per-chart state carried across updates.

    ``data_set_names`` maps category key to colour in first-seen order and
    only ever grows; ``color_index`` is the next unused palette slot.
    ``continuous_color`` follows the colour column of the latest update; when
    it is continuous, points are shaded along the first two palette colours.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str = "line"
    x: Optional[str] = None
    y: str
    size: Optional[str] = None
    color_category_name: Optional[str] = Field(default=None, alias="colorCategoryName")
    color_scale: List[str] = Field(..., alias="colorScale", min_length=1)
    color_domain: List[str] = Field(default_factory=list, alias="colorDomain")
    color_index: int = Field(0, alias="colorIndex")
    data_set_names: Dict[str, str] = Field(default_factory=dict, alias="dataSetNames")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    continuous_color: bool = Field(False, alias="continuousColor")


class ResolvedColumns(BaseModel):
    x_index: int
    y_index: int
    size_index: Optional[int] = None
    color_index: Optional[int] = None
    x_scale: str
    mode: ClassificationMode = ClassificationMode.UNKEYED


class LegendItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    color: str
    fill: str = Field(..., description="Symbol fill; greyed out while the series is suppressed")
    chart_index: int = Field(..., alias="chartIndex")
    ignored: bool = False


class RenderSeries(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chart_index: int = Field(..., alias="chartIndex")
    chart_type: str = Field(..., alias="chartType")
    name: str
    color: str
    points: List[Point]
    color_range: Optional[List[str]] = Field(default=None, alias="colorRange")
    color_domain: Optional[List[Any]] = Field(default=None, alias="colorDomain")


class ChartState(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chart_array: List[ChartDescriptor] = Field(default_factory=list, alias="chartArray")
    data_sets: Dict[str, List[Point]] = Field(default_factory=dict, alias="dataSets")
    x_scale: str = Field("linear", alias="xScale")
    legend_items: List[LegendItem] = Field(default_factory=list, alias="legendItems")
    ignored: List[str] = Field(default_factory=list)
