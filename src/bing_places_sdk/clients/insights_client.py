from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..constants import GET_ANALYTICS_PATH, GET_BUSINESS_STATUS_INFO_PATH
from ..models import SearchCriteriaType
from ..models_insights import (
    ANALYTICS_CRITERIA,
    FetchBusinessStatusInfoRequest,
    FetchBusinessStatusInfoResponse,
    GetAnalyticsRequest,
    GetAnalyticsResponse,
)
from ..validation import validate_criteria_type, validate_paging, validate_store_ids
from .base import BaseClient


@dataclass
class InsightsClient(BaseClient):
    async def fetch_business_status_info(
        self,
        page_number: int,
        page_size: int,
        criteria_type: SearchCriteriaType | str,
        store_ids: Sequence[str] | None = None,
    ) -> FetchBusinessStatusInfoResponse:
        validate_paging(page_number, page_size)
        criteria = validate_criteria_type(criteria_type)
        payload = {"page_number": page_number, "page_size": page_size, "criteria_type": criteria}
        if store_ids is not None:
            payload["store_ids"] = validate_store_ids(store_ids)
        return await self._call(
            "fetch business status info",
            GET_BUSINESS_STATUS_INFO_PATH,
            FetchBusinessStatusInfoRequest,
            FetchBusinessStatusInfoResponse,
            **payload,
        )

    async def get_analytics(
        self,
        page_number: int,
        page_size: int,
        criteria_type: SearchCriteriaType | str,
        store_ids: Sequence[str] | None = None,
    ) -> GetAnalyticsResponse:
        validate_paging(page_number, page_size)
        criteria = validate_criteria_type(criteria_type, ANALYTICS_CRITERIA)
        payload = {"page_number": page_number, "page_size": page_size, "criteria_type": criteria}
        if store_ids is not None:
            payload["store_ids"] = validate_store_ids(store_ids)
        return await self._call(
            "get analytics",
            GET_ANALYTICS_PATH,
            GetAnalyticsRequest,
            GetAnalyticsResponse,
            **payload,
        )
