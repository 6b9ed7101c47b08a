from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx

from .config import ClientConfig
from .error_mapper import map_error
from .logging_utils import log_operation

logger = logging.getLogger(__name__)

RequestHook = Callable[[str, dict[str, Any]], None]


@dataclass
class LastOperation:
    operation: str
    environment: str
    duration_ms: int
    result: str
    tracking_id: str | None
    status_code: int | None = None


@dataclass
class HttpClient:
    """Single-attempt JSON POST transport over an ``httpx.AsyncClient``.

    Every failure, whether raised by httpx, signalled by a non-2xx status or
    caused by an undecodable body, leaves this class as ``RemoteOperationFailed``.
    """

    config: ClientConfig = field(default_factory=ClientConfig)
    client: httpx.AsyncClient | None = None
    before_request: RequestHook | None = None
    last_operation: LastOperation | None = None
    _owns_client: bool = False

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
            )
            self._owns_client = True

    @property
    def owns_client(self) -> bool:
        return self._owns_client

    async def post(
        self,
        url: str,
        envelope: dict[str, Any],
        *,
        headers: dict[str, str],
        operation: str,
        environment: str,
    ) -> dict[str, Any]:
        if self.client is None:
            raise RuntimeError("HTTP client not initialized")
        tracking_id = envelope.get("TrackingId")
        request_headers = {"Accept": "application/json", **headers}
        if self.before_request:
            self.before_request(url, {"headers": request_headers, "json_body": envelope})

        started = time.monotonic()
        try:
            response = await self.client.post(url, json=envelope, headers=request_headers)
        except httpx.HTTPError as exc:
            self._record(operation, environment, started, "error", tracking_id, None)
            raise map_error(
                operation,
                transport_message=str(exc) or type(exc).__name__,
                tracking_id=tracking_id,
            ) from exc

        payload = _decode(response)
        if not response.is_success:
            self._record(operation, environment, started, "error", tracking_id, response.status_code)
            raise map_error(
                operation,
                status_code=response.status_code,
                payload=payload,
                transport_message=f"HTTP {response.status_code} {response.reason_phrase}".strip(),
                tracking_id=tracking_id,
            )
        if not isinstance(payload, dict):
            self._record(operation, environment, started, "error", tracking_id, response.status_code)
            raise map_error(
                operation,
                status_code=response.status_code,
                transport_message="Malformed response: expected a JSON object",
                tracking_id=tracking_id,
            )

        self._record(operation, environment, started, "success", tracking_id, response.status_code)
        return payload

    async def aclose(self) -> None:
        if self.client is not None and self._owns_client:
            await self.client.aclose()

    def _record(
        self,
        operation: str,
        environment: str,
        started: float,
        result: str,
        tracking_id: str | None,
        status_code: int | None,
    ) -> None:
        self.last_operation = LastOperation(
            operation=operation,
            environment=environment,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            tracking_id=tracking_id,
            status_code=status_code,
        )
        log_operation(
            logger,
            operation=operation,
            environment=environment,
            tracking_id=tracking_id,
            duration_ms=self.last_operation.duration_ms,
            outcome=result,
            status_code=status_code,
        )


def _decode(response: httpx.Response) -> object | None:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return {"message": response.text} if not response.is_success else None
