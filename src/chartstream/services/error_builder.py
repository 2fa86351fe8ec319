from typing import List, Optional

from chartstream.schemas.errors import ErrorResponse


def build_error(
    code: str,
    message: str,
    details: Optional[List[str]] = None,
    chart_type: Optional[str] = None,
) -> dict:
    return ErrorResponse(
        code=code,
        message=message,
        details=details or [],
        chart_type=chart_type,
    ).model_dump()
