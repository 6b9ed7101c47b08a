from __future__ import annotations

from enum import Enum

from pydantic import Field

from .models import ApiResponse, Envelope, SearchCriteriaType, WireModel


class BusinessStatus(str, Enum):
    QUALITY_CHECK_IN_PROGRESS = "QualityCheckInProgress"
    QUALITY_ISSUE_FOUND = "QualityIssueFound"
    PUBLISH_IN_PROGRESS = "PublishInProgress"
    PUBLISHED = "Published"
    DROPPED = "Dropped"


class QualityIssue(WireModel):
    pass


class BusinessStatusInfo(WireModel):
    store_id: str | None = None
    business_status: str | None = None
    yp_id: str | None = Field(default=None, alias="YPId")
    yp_id_assign_date: str | None = Field(default=None, alias="YPIdAssignDate")
    publish_date: str | None = None
    last_update_date: str | None = None
    has_pending_publish: bool | None = None
    publish_link: str | None = None
    quality_issues: list[QualityIssue] | None = None

    @property
    def is_published(self) -> bool:
        return self.business_status == BusinessStatus.PUBLISHED.value


class BusinessAnalytics(WireModel):
    store_id: str | None = None


class FetchBusinessStatusInfoRequest(Envelope):
    page_number: int
    page_size: int
    criteria_type: SearchCriteriaType
    store_ids: list[str] | None = None


class GetAnalyticsRequest(Envelope):
    page_number: int
    page_size: int
    criteria_type: SearchCriteriaType
    store_ids: list[str] | None = None


class FetchBusinessStatusInfoResponse(ApiResponse):
    businesses_status_info: list[BusinessStatusInfo] | None = None


class GetAnalyticsResponse(ApiResponse):
    businesses_analytics: list[BusinessAnalytics] | None = None


ANALYTICS_CRITERIA: frozenset[SearchCriteriaType] = frozenset(
    {SearchCriteriaType.GET_IN_BATCHES, SearchCriteriaType.SEARCH_BY_STORE_IDS}
)
