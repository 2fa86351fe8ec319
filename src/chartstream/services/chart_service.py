from typing import Any, Dict, Iterable

from fastapi import UploadFile

from chartstream.config.observability import log_event, timed
from chartstream.schemas.chart_config import ChartConfig
from chartstream.schemas.requests import DataUpdateRequest
from chartstream.services import data_loader
from chartstream.services.session_store import registry


async def _read_upload(file: UploadFile) -> bytes:
    return await file.read()


def state_payload(session_id: str) -> Dict[str, Any]:
    state = registry.get(session_id).state()
    return {"session_id": session_id, **state.model_dump(by_alias=True)}


def create_session(config: ChartConfig) -> str:
    session_id = registry.create(config)
    log_event("chart_session_created", session=session_id, charts=len(config.charts))
    return session_id


def push_rows(session_id: str, request: DataUpdateRequest) -> Dict[str, Any]:
    session = registry.get(session_id)
    state = session.update(request.metadata, request.rows)
    return {"session_id": session_id, **state.model_dump(by_alias=True)}


async def ingest_upload(session_id: str, file: UploadFile, time_columns: Iterable[str] = ()) -> Dict[str, Any]:
    session = registry.get(session_id)
    with timed("load_upload", session=session_id):
        raw = await _read_upload(file)
        df = data_loader.read_bytes_to_df(raw, file.filename)
        metadata, rows = data_loader.frame_to_batch(df, time_columns=time_columns)
    state = session.update(metadata, rows)
    return {"session_id": session_id, **state.model_dump(by_alias=True)}
