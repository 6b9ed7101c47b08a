from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIds:
    tracking_id: str
    client_request_id: str


def new_tracking_id() -> str:
    return str(uuid.uuid4())


def new_request_ids() -> RequestIds:
    return RequestIds(tracking_id=new_tracking_id(), client_request_id=str(uuid.uuid4()))
