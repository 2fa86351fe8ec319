from chartstream.schemas.state import ChartDescriptor


def allocate_color(chart: ChartDescriptor, key: str) -> str:
    """Return the colour for ``key``, assigning one on first sighting.

    Assignment depends only on the order keys are first seen, the fixed
    colour domain and the palette:

    - a known key keeps its colour;
    - the running palette slot wraps to 0 once it passes the last colour;
    - a key pinned by ``color_domain`` at a position inside the palette takes
      that colour, a pinned key outside the palette takes the first colour;
    - any other key takes the running slot, which then advances.
    """
    existing = chart.data_set_names.get(key)
    if existing is not None:
        return existing

    palette = chart.color_scale
    if chart.color_index >= len(palette):
        chart.color_index = 0

    domain_position = chart.color_domain.index(key) if key in chart.color_domain else -1
    if domain_position < 0:
        color = palette[chart.color_index]
        chart.color_index += 1
    elif domain_position >= len(palette):
        color = palette[0]
    else:
        color = palette[domain_position]

    chart.data_set_names[key] = color
    return color
