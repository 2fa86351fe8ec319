import csv
import io
import os
from typing import Any, Iterable, List, Optional, Tuple

import pandas as pd
from pandas.api import types as ptypes

from chartstream.config.settings import settings
from chartstream.schemas.metadata import ColumnMetadata
from chartstream.services.scales import LINEAR, ORDINAL, TIME
from chartstream.services.validators import enforce_dimensions


class UnsupportedFileType(ValueError):
    pass


def _detect_separator(sample: str) -> str:
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=";,|\t")
        return dialect.delimiter
    except csv.Error:
        return ","


def read_bytes_to_df(data: bytes, filename: Optional[str]) -> pd.DataFrame:
    extension = os.path.splitext(filename or "")[1].lower()
    buffer = io.BytesIO(data)
    if extension in {".xls", ".xlsx"}:
        df = pd.read_excel(buffer)
    elif extension in {".csv", ""}:
        sample = data[:1024].decode(errors="ignore")
        sep = _detect_separator(sample)
        try:
            df = pd.read_csv(io.BytesIO(data), sep=sep)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise UnsupportedFileType(f"Unreadable CSV file: {exc}") from exc
    else:
        raise UnsupportedFileType(f"Unsupported file type: {extension or 'unknown'}")
    enforce_dimensions(
        len(df.index), len(df.columns), max_rows=settings.max_rows, max_columns=settings.max_columns
    )
    return df


def infer_column_type(series: pd.Series) -> str:
    if ptypes.is_bool_dtype(series):
        return ORDINAL
    if ptypes.is_numeric_dtype(series):
        return LINEAR
    if ptypes.is_datetime64_any_dtype(series):
        return TIME
    return ORDINAL


def _epoch_millis(value: Any) -> Optional[int]:
    if pd.isna(value):
        return None
    return int(pd.Timestamp(value).timestamp() * 1000)


def frame_to_batch(
    df: pd.DataFrame, time_columns: Iterable[str] = ()
) -> Tuple[ColumnMetadata, List[List[Any]]]:
    """Turn a frame into column metadata plus positional rows.

    Columns listed in ``time_columns`` are parsed as datetimes. Time values
    are emitted as epoch milliseconds and missing values as None.
    """
    frame = df.copy()
    frame.columns = [str(col) for col in frame.columns]
    for col in time_columns:
        if col in frame.columns:
            frame[col] = pd.to_datetime(frame[col], errors="coerce")

    types = [infer_column_type(frame[col]) for col in frame.columns]
    for col, col_type in zip(frame.columns, types):
        if col_type == TIME:
            frame[col] = pd.Series([_epoch_millis(v) for v in frame[col]], index=frame.index, dtype=object)

    values = frame.astype(object).where(frame.notna(), None)
    rows = values.values.tolist()
    return ColumnMetadata(names=list(frame.columns), types=types), rows
