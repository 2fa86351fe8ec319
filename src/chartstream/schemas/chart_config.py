from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ChartDefinition(BaseModel):
    """One plotted series group as declared by the user.

    Rendering-only keys (style, mode, orientation, ...) are accepted and kept
    but play no part in classification.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = Field("line", description="Chart type (line, scatter, bar, area, ...)")
    x: Optional[str] = Field(default=None, description="x field; falls back to the config-level x")
    y: str = Field(..., description="y field")
    size: Optional[str] = Field(default=None, description="Size dimension field")
    color: Optional[str] = Field(default=None, description="Colour category field")
    color_scale: Optional[Union[str, List[str]]] = Field(
        default=None, alias="colorScale", description="Palette as a list of colours or a built-in palette name"
    )
    color_domain: Optional[List[Any]] = Field(
        default=None, alias="colorDomain", description="Category keys pinned to palette positions"
    )
    max_length: Optional[int] = Field(
        default=None, alias="maxLength", gt=0, description="Points retained per series"
    )
    style: Optional[Dict[str, Any]] = None


class ChartConfig(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    x: Optional[str] = Field(default=None, description="Shared x field for chart types declaring it once")
    charts: List[ChartDefinition] = Field(default_factory=list)
    legend: bool = False
    animate: bool = False
