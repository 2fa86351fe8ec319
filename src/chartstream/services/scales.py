from typing import Dict, Optional

from chartstream.services.errors import UnsupportedColumnTypeError

LINEAR = "linear"
ORDINAL = "ordinal"
TIME = "time"

# Declared column type -> axis scale kind.
SCALE_TABLE: Dict[str, str] = {
    "linear": LINEAR,
    "number": LINEAR,
    "numeric": LINEAR,
    "int": LINEAR,
    "integer": LINEAR,
    "long": LINEAR,
    "float": LINEAR,
    "double": LINEAR,
    "ordinal": ORDINAL,
    "string": ORDINAL,
    "category": ORDINAL,
    "categorical": ORDINAL,
    "bool": ORDINAL,
    "boolean": ORDINAL,
    "time": TIME,
    "date": TIME,
    "datetime": TIME,
    "timestamp": TIME,
}


def scale_kind(column_type: str) -> Optional[str]:
    return SCALE_TABLE.get(str(column_type).strip().lower())


def resolve_scale(column_type: str, chart_type: str = "chart") -> str:
    scale = scale_kind(column_type)
    if scale is None:
        raise UnsupportedColumnTypeError(
            chart_type,
            f"column type '{column_type}' is not supported",
            details=[str(column_type)],
        )
    return scale


def supported_types() -> list[str]:
    return sorted(SCALE_TABLE.keys())
