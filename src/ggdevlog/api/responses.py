"""Helpers for the ``{success, message, data}`` response envelope."""

from collections.abc import Mapping

from fastapi.responses import JSONResponse


def success(message: str, data: object = None) -> dict[str, object]:
    """Return a success envelope."""
    return {"success": True, "message": message, "data": data}


def fail(
    message: str,
    status_code: int = 400,
    data: object = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Return a failure envelope with the given status code."""
    content: dict[str, object] = {"success": False, "message": message}
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=content, headers=headers)
