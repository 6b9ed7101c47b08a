from __future__ import annotations

from typing import Any, Mapping

from .exceptions import RemoteOperationFailed

FALLBACK_DETAIL = "request failed"


def api_error_message(payload: object) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    for key in ("ErrorMessage", "message", "Message", "error"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def map_error(
    operation: str,
    *,
    status_code: int | None = None,
    payload: object | None = None,
    transport_message: str | None = None,
    tracking_id: str | None = None,
) -> RemoteOperationFailed:
    detail = api_error_message(payload) or (transport_message or "").strip() or FALLBACK_DETAIL
    error_code: Any = payload.get("ErrorCode") if isinstance(payload, Mapping) else None
    payload_tracking_id = payload.get("TrackingId") if isinstance(payload, Mapping) else None
    return RemoteOperationFailed(
        operation=operation,
        message=f"Failed to {operation}: {detail}",
        status_code=status_code,
        error_code=str(error_code) if error_code is not None else None,
        tracking_id=str(payload_tracking_id) if payload_tracking_id else tracking_id,
        raw_payload=dict(payload) if isinstance(payload, Mapping) else payload,
    )
