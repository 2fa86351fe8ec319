from typing import Dict, List

CATEGORY10 = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]

CATEGORY20 = [
    "#1f77b4",
    "#aec7e8",
    "#ff7f0e",
    "#ffbb78",
    "#2ca02c",
    "#98df8a",
    "#d62728",
    "#ff9896",
    "#9467bd",
    "#c5b0d5",
    "#8c564b",
    "#c49c94",
    "#e377c2",
    "#f7b6d2",
    "#7f7f7f",
    "#c7c7c7",
    "#bcbd22",
    "#dbdb8d",
    "#17becf",
    "#9edae5",
]

TABLEAU10 = [
    "#4e79a7",
    "#f28e2c",
    "#e15759",
    "#76b7b2",
    "#59a14f",
    "#edc949",
    "#af7aa1",
    "#ff9da7",
    "#9c755f",
    "#bab0ab",
]

PALETTES: Dict[str, List[str]] = {
    "category10": CATEGORY10,
    "category20": CATEGORY20,
    "tableau10": TABLEAU10,
}

# Legend symbol fill for suppressed series.
IGNORED_FILL = "#d3d3d3"


def get_palette(name: str) -> List[str]:
    try:
        return list(PALETTES[name.strip().lower()])
    except KeyError:
        raise KeyError(f"Unknown palette '{name}'; available: {', '.join(sorted(PALETTES))}") from None
