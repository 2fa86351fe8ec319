from chartstream.viz.palettes import IGNORED_FILL, PALETTES, get_palette

__all__ = ["IGNORED_FILL", "PALETTES", "get_palette"]
