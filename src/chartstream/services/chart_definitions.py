from typing import List, Optional, Union

from chartstream.config.settings import settings
from chartstream.schemas.chart_config import ChartConfig, ChartDefinition
from chartstream.schemas.state import ChartDescriptor
from chartstream.services.classifier import category_key
from chartstream.services.errors import UnknownPaletteError
from chartstream.viz.palettes import get_palette


def resolve_palette(color_scale: Optional[Union[str, List[str]]], chart_type: str = "chart") -> List[str]:
    if isinstance(color_scale, list) and color_scale:
        return list(color_scale)
    name = color_scale if isinstance(color_scale, str) and color_scale else settings.default_palette
    try:
        return get_palette(name)
    except KeyError as exc:
        raise UnknownPaletteError(chart_type, str(exc.args[0]), details=[name]) from exc


def build_descriptor(definition: ChartDefinition, chart_id: int, shared_x: Optional[str] = None) -> ChartDescriptor:
    return ChartDescriptor(
        id=chart_id,
        type=definition.type,
        x=definition.x or shared_x,
        y=definition.y,
        size=definition.size,
        color_category_name=definition.color,
        color_scale=resolve_palette(definition.color_scale, definition.type),
        color_domain=[category_key(value) for value in definition.color_domain or []],
        color_index=0,
        data_set_names={},
        max_length=definition.max_length,
    )


def build_chart_array(config: ChartConfig) -> List[ChartDescriptor]:
    """Expand the declarative chart list into one fresh descriptor per entry."""
    return [
        build_descriptor(definition, chart_id, config.x)
        for chart_id, definition in enumerate(config.charts)
    ]
