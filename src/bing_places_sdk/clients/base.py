from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..constants import (
    CLIENT_HEADER,
    CLIENT_REQUEST_ID_HEADER,
    CLIENT_VERSION_HEADER,
    IDENTITY_HEADER,
    SDK_CLIENT_NAME,
    SDK_VERSION,
)
from ..error_mapper import map_error
from ..http_client import HttpClient
from ..models import ApiResponse, Envelope
from ..session import PlacesSession
from ..tracking import RequestIds, new_request_ids

R = TypeVar("R", bound=ApiResponse)


@dataclass
class BaseClient:
    session: PlacesSession
    http: HttpClient

    def _headers(self, ids: RequestIds) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            CLIENT_HEADER: SDK_CLIENT_NAME,
            CLIENT_VERSION_HEADER: SDK_VERSION,
            IDENTITY_HEADER: self.session.identity_header,
            CLIENT_REQUEST_ID_HEADER: ids.client_request_id,
        }

    def _envelope(self, request_type: type[Envelope], ids: RequestIds, **payload: Any) -> dict[str, Any]:
        request = request_type(tracking_id=ids.tracking_id, identity=self.session.identity, **payload)
        return request.to_wire()

    async def _call(
        self,
        operation: str,
        path: str,
        request_type: type[Envelope],
        response_type: type[R],
        **payload: Any,
    ) -> R:
        ids = new_request_ids()
        # Identity, headers and endpoint are read together, before the first await.
        envelope = self._envelope(request_type, ids, **payload)
        headers = self._headers(ids)
        url = self.session.base_url.rstrip("/") + path
        environment = self.session.environment.value

        data = await self.http.post(url, envelope, headers=headers, operation=operation, environment=environment)
        try:
            return response_type.model_validate(data)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "body"
            raise map_error(
                operation,
                payload=None,
                transport_message=f"Malformed response: invalid {field} ({first['msg']})",
                tracking_id=ids.tracking_id,
            ) from exc
