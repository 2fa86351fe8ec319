from typing import Any, Dict, Optional

from fastapi import APIRouter, File, Form, Response, UploadFile, status
from fastapi.responses import JSONResponse

from chartstream.config.observability import log_error
from chartstream.schemas.chart_config import ChartConfig
from chartstream.schemas.errors import ErrorCode
from chartstream.schemas.requests import DataUpdateRequest, LegendToggleRequest, SelectionRequest
from chartstream.services import chart_service
from chartstream.services.data_loader import UnsupportedFileType
from chartstream.services.error_builder import build_error
from chartstream.services.errors import (
    ChartConfigurationError,
    InvalidSelectionError,
    SessionLimitError,
    UnknownCategoryError,
    UnknownSessionError,
)
from chartstream.services.session_store import registry

router = APIRouter(tags=["charts"])


def _configuration_error(exc: ChartConfigurationError) -> JSONResponse:
    error = build_error(code=exc.code, message=exc.message, details=exc.details, chart_type=exc.chart_type)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)


def _unknown_session(exc: UnknownSessionError) -> JSONResponse:
    error = build_error(code=ErrorCode.UNKNOWN_CHART_SESSION, message=str(exc.args[0]))
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error)


@router.get("/charts", response_model=list[str])
async def list_sessions() -> list[str]:
    return registry.list_keys()


@router.post("/charts", status_code=status.HTTP_201_CREATED, response_model=Dict[str, Any])
async def create_chart(config: ChartConfig) -> Any:
    try:
        session_id = chart_service.create_session(config)
    except ChartConfigurationError as exc:
        return _configuration_error(exc)
    except SessionLimitError as exc:
        log_error("session_limit_reached", str(exc))
        error = build_error(code=ErrorCode.SESSION_LIMIT_REACHED, message=str(exc))
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=error)
    return {"session_id": session_id}


@router.get("/charts/{session_id}", response_model=Dict[str, Any])
async def get_chart(session_id: str) -> Any:
    try:
        return chart_service.state_payload(session_id)
    except UnknownSessionError as exc:
        return _unknown_session(exc)


@router.put("/charts/{session_id}/config", response_model=Dict[str, Any])
async def configure_chart(session_id: str, config: ChartConfig) -> Any:
    try:
        rebuilt = registry.get(session_id).configure(config)
    except UnknownSessionError as exc:
        return _unknown_session(exc)
    except ChartConfigurationError as exc:
        return _configuration_error(exc)
    return {"session_id": session_id, "rebuilt": rebuilt}


@router.post("/charts/{session_id}/data", response_model=Dict[str, Any])
async def push_data(session_id: str, request: DataUpdateRequest) -> Any:
    try:
        return chart_service.push_rows(session_id, request)
    except UnknownSessionError as exc:
        return _unknown_session(exc)
    except ChartConfigurationError as exc:
        return _configuration_error(exc)


@router.post("/charts/{session_id}/upload", response_model=Dict[str, Any])
async def upload_data(
    session_id: str,
    data_file: UploadFile = File(...),
    time_columns: Optional[str] = Form(None),
) -> Any:
    parsed_time_columns = [c.strip() for c in (time_columns or "").split(",") if c.strip()]
    try:
        return await chart_service.ingest_upload(session_id, data_file, time_columns=parsed_time_columns)
    except UnknownSessionError as exc:
        return _unknown_session(exc)
    except UnsupportedFileType as exc:
        error = build_error(code=ErrorCode.INVALID_FILE_TYPE, message=str(exc))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    except ChartConfigurationError as exc:
        return _configuration_error(exc)


@router.post("/charts/{session_id}/legend/toggle", response_model=Dict[str, Any])
async def toggle_legend(session_id: str, request: LegendToggleRequest) -> Any:
    try:
        ignored = registry.get(session_id).toggle_ignored(request.name)
    except UnknownSessionError as exc:
        return _unknown_session(exc)
    except UnknownCategoryError as exc:
        error = build_error(code=ErrorCode.UNKNOWN_CATEGORY, message=str(exc.args[0]), details=[request.name])
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return {"name": request.name, "ignored": ignored}


@router.post("/charts/{session_id}/select", response_model=Dict[str, Any])
async def select_point(session_id: str, request: SelectionRequest) -> Any:
    try:
        return registry.get(session_id).select(request.key, request.index)
    except UnknownSessionError as exc:
        return _unknown_session(exc)
    except InvalidSelectionError as exc:
        error = build_error(code=ErrorCode.INVALID_SELECTION, message=str(exc.args[0]))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)


@router.delete("/charts/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chart(session_id: str) -> Response:
    try:
        registry.drop(session_id)
    except UnknownSessionError as exc:
        return _unknown_session(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
