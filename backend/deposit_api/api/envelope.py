from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel


def success_envelope(
    data: Any,
    pagination: Optional[BaseModel] = None,
    total: Optional[int] = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    {success: true, data, pagination? | total?, message?}

    Paginated listings carry `pagination`, flat listings carry `total`;
    a response never has both.
    """
    if pagination is not None and total is not None:
        raise ValueError("an envelope carries either pagination or total, not both")

    body = {"success": True, "data": data}
    if pagination is not None:
        body["pagination"] = pagination.model_dump(by_alias=True)
    if total is not None:
        body["total"] = total
    if message is not None:
        body["message"] = message
    return body


def error_envelope(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def error_response(status_code: int, message: str) -> JSONResponse:
    if status_code < 400:
        raise ValueError(f"error responses need a 4xx/5xx status, got {status_code}")
    return JSONResponse(status_code=status_code, content=error_envelope(message))
