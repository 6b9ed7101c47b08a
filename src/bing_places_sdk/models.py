from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

WIRE_CONFIG = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="allow")


class WireModel(BaseModel):
    model_config = WIRE_CONFIG

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class Identity(WireModel):
    puid: str
    auth_provider: str
    email_id: str


class SearchCriteriaType(str, Enum):
    GET_IN_BATCHES = "GetInBatches"
    SEARCH_BY_STORE_IDS = "SearchByStoreIds"
    SEARCH_BY_QUERY = "SearchByQuery"


class SearchCriteria(WireModel):
    criteria_type: SearchCriteriaType
    store_ids: list[str] | None = None
    business_name: str | None = None
    city: str | None = None
    bp_category_id: int | None = Field(default=None, alias="BPCategoryId")
    zip: str | None = None


class ResponseOutcome(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class ApiResponse(WireModel):
    tracking_id: str | int | None = None
    operation_status: bool | None = None
    error_message: str | None = None
    error_code: int | str | None = None
    errors: dict[str, Any] | list[Any] | None = None

    @property
    def outcome(self) -> ResponseOutcome:
        if self.operation_status is False:
            return ResponseOutcome.FAILED
        if self.errors or self._has_item_failures():
            return ResponseOutcome.PARTIAL
        return ResponseOutcome.SUCCESS

    @property
    def succeeded(self) -> bool:
        return self.outcome is ResponseOutcome.SUCCESS

    def _has_item_failures(self) -> bool:
        return False


class Envelope(WireModel):
    tracking_id: str
    identity: Identity


def item_has_error(item: Any) -> bool:
    if isinstance(item, BaseModel):
        return bool(getattr(item, "error_message", None))
    if isinstance(item, dict):
        return bool(item.get("ErrorMessage"))
    return False
