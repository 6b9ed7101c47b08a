from __future__ import annotations

import pytest

from bing_places_sdk.clients import base as base_module
from bing_places_sdk.exceptions import InvalidArgumentError
from bing_places_sdk.models import ResponseOutcome, SearchCriteriaType
from bing_places_sdk.models_insights import BusinessStatus
from bing_places_sdk.tracking import RequestIds
from fakes import IDENTITY, build_client, reply

pytestmark = pytest.mark.anyio

STATUS_INFO = {
    "BusinessesStatusInfo": [
        {
            "StoreId": "Store_1",
            "BusinessStatus": "Published",
            "YPId": "YN873x123",
            "YPIdAssignDate": "2024-05-01T00:00:00",
            "PublishDate": "2024-05-02T00:00:00",
            "LastUpdateDate": "2024-05-02T00:00:00",
            "HasPendingPublish": False,
            "PublishLink": "https://www.bing.com/maps?ss=ypid.YN873x123",
            "QualityIssues": None,
        },
        {
            "StoreId": "Store_2",
            "BusinessStatus": "QualityIssueFound",
            "YPId": None,
            "YPIdAssignDate": None,
            "PublishDate": None,
            "LastUpdateDate": None,
            "HasPendingPublish": False,
            "PublishLink": None,
            "QualityIssues": [{"Category": "Address", "Message": "Address could not be verified"}],
        },
    ],
    "Errors": {},
    "TrackingId": "mocked-uuid",
    "OperationStatus": True,
    "ErrorMessage": None,
    "ErrorCode": 0,
}


@pytest.fixture(autouse=True)
def fixed_ids(monkeypatch: pytest.MonkeyPatch) -> RequestIds:
    ids = RequestIds(tracking_id="mocked-uuid", client_request_id="request-uuid")
    monkeypatch.setattr(base_module, "new_request_ids", lambda: ids)
    return ids


async def test_fetch_status_page_wise_omits_store_ids() -> None:
    client, api = build_client(reply(STATUS_INFO))

    result = await client.fetch_business_status_info(1, 100, "GetInBatches")

    assert str(api.requests[0].url).endswith("/GetBusinessStatusInfo")
    assert api.last_body == {
        "TrackingId": "mocked-uuid",
        "Identity": IDENTITY,
        "PageNumber": 1,
        "PageSize": 100,
        "CriteriaType": "GetInBatches",
    }
    assert result.to_wire() == STATUS_INFO


async def test_fetch_status_by_store_ids() -> None:
    client, api = build_client(reply(STATUS_INFO))

    result = await client.fetch_business_status_info(
        1, 100, SearchCriteriaType.SEARCH_BY_STORE_IDS, ["Store_1", "Store_2"]
    )

    assert api.last_body["CriteriaType"] == "SearchByStoreIds"
    assert api.last_body["StoreIds"] == ["Store_1", "Store_2"]
    published, flagged = result.businesses_status_info
    assert published.is_published is True
    assert published.yp_id == "YN873x123"
    assert flagged.business_status == BusinessStatus.QUALITY_ISSUE_FOUND
    assert flagged.quality_issues[0].to_wire() == {"Category": "Address", "Message": "Address could not be verified"}


@pytest.mark.parametrize(("page_number", "page_size"), [(0, 100), (1, 0), (1, 1001)])
async def test_fetch_status_paging_bounds(page_number: int, page_size: int) -> None:
    client, api = build_client(reply(STATUS_INFO))

    with pytest.raises(InvalidArgumentError):
        await client.fetch_business_status_info(page_number, page_size, "GetInBatches")

    assert api.requests == []


async def test_get_analytics() -> None:
    body = {
        "BusinessesAnalytics": [{"StoreId": "Store_1", "Impressions": 120, "Clicks": 9}],
        "Errors": {},
        "TrackingId": "mocked-uuid",
        "OperationStatus": True,
        "ErrorMessage": None,
        "ErrorCode": 0,
    }
    client, api = build_client(reply(body))

    result = await client.get_analytics(1, 50, "SearchByStoreIds", ["Store_1"])

    assert str(api.requests[0].url).endswith("/GetAnalytics")
    assert api.last_body == {
        "TrackingId": "mocked-uuid",
        "Identity": IDENTITY,
        "PageNumber": 1,
        "PageSize": 50,
        "CriteriaType": "SearchByStoreIds",
        "StoreIds": ["Store_1"],
    }
    assert result.businesses_analytics[0].store_id == "Store_1"
    assert result.to_wire() == body
    assert result.outcome is ResponseOutcome.SUCCESS


async def test_get_analytics_rejects_query_criteria() -> None:
    client, api = build_client(reply({}))

    with pytest.raises(InvalidArgumentError, match="CriteriaType"):
        await client.get_analytics(1, 50, "SearchByQuery")

    assert api.requests == []


async def test_get_analytics_paging_bounds() -> None:
    client, api = build_client(reply({}))

    with pytest.raises(InvalidArgumentError, match="PageSize"):
        await client.get_analytics(1, 1001, "GetInBatches")
    await client.get_analytics(1, 1000, "GetInBatches")

    assert len(api.requests) == 1


@pytest.mark.parametrize("operation", ["fetch_business_status_info", "get_analytics"])
@pytest.mark.parametrize("store_ids", ["Store_1", []])
async def test_store_ids_must_be_a_non_empty_list(operation: str, store_ids: object) -> None:
    client, api = build_client(reply(STATUS_INFO))

    with pytest.raises(InvalidArgumentError, match="StoreIds"):
        await getattr(client, operation)(1, 10, "SearchByStoreIds", store_ids)

    assert api.requests == []
