from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..constants import (
    CREATE_BUSINESSES_PATH,
    DELETE_BUSINESSES_PATH,
    GET_BUSINESSES_PATH,
    MAX_PAGE_SIZE,
    UPDATE_BUSINESSES_PATH,
)
from ..models import SearchCriteria, SearchCriteriaType
from ..models_businesses import (
    BusinessListing,
    CreateBusinessesRequest,
    CreateBusinessesResponse,
    DeleteBusinessesRequest,
    DeleteBusinessesResponse,
    FetchBusinessesRequest,
    FetchBusinessesResponse,
    UpdateBusinessesRequest,
    UpdateBusinessesResponse,
)
from ..validation import coerce_record, validate_batch, validate_paging, validate_store_ids
from .base import BaseClient

BusinessInput = BusinessListing | Mapping[str, Any]


@dataclass
class BusinessesClient(BaseClient):
    async def create_businesses(self, businesses: Sequence[BusinessInput]) -> CreateBusinessesResponse:
        records = validate_batch(businesses)
        return await self._call(
            "create businesses",
            CREATE_BUSINESSES_PATH,
            CreateBusinessesRequest,
            CreateBusinessesResponse,
            businesses=records,
        )

    async def create_single_business(self, business: BusinessInput) -> CreateBusinessesResponse:
        return await self.create_businesses([business])

    async def update_businesses(self, businesses: Sequence[BusinessInput]) -> UpdateBusinessesResponse:
        records = validate_batch(businesses)
        return await self._call(
            "update businesses",
            UPDATE_BUSINESSES_PATH,
            UpdateBusinessesRequest,
            UpdateBusinessesResponse,
            businesses=records,
        )

    async def fetch_businesses(
        self,
        page_number: int,
        page_size: int,
        search_criteria: SearchCriteria | Mapping[str, Any],
    ) -> FetchBusinessesResponse:
        validate_paging(page_number, page_size)
        criteria = coerce_record(search_criteria, SearchCriteria, None)
        return await self._call(
            "fetch businesses",
            GET_BUSINESSES_PATH,
            FetchBusinessesRequest,
            FetchBusinessesResponse,
            page_number=page_number,
            page_size=page_size,
            search_criteria=criteria,
        )

    async def fetch_businesses_in_batches(self, page_number: int, page_size: int) -> FetchBusinessesResponse:
        criteria = SearchCriteria(criteria_type=SearchCriteriaType.GET_IN_BATCHES)
        return await self.fetch_businesses(page_number, page_size, criteria)

    async def fetch_businesses_by_store_ids(
        self,
        store_ids: Sequence[str],
        page_number: int = 1,
        page_size: int = MAX_PAGE_SIZE,
    ) -> FetchBusinessesResponse:
        criteria = SearchCriteria(
            criteria_type=SearchCriteriaType.SEARCH_BY_STORE_IDS,
            store_ids=validate_store_ids(store_ids),
        )
        return await self.fetch_businesses(page_number, page_size, criteria)

    async def search_businesses(
        self,
        page_number: int,
        page_size: int,
        *,
        business_name: str | None = None,
        city: str | None = None,
        category_id: int | None = None,
        zip_code: str | None = None,
    ) -> FetchBusinessesResponse:
        query: dict[str, Any] = {"criteria_type": SearchCriteriaType.SEARCH_BY_QUERY}
        if business_name is not None:
            query["business_name"] = business_name
        if city is not None:
            query["city"] = city
        if category_id is not None:
            query["bp_category_id"] = category_id
        if zip_code is not None:
            query["zip"] = zip_code
        return await self.fetch_businesses(page_number, page_size, SearchCriteria(**query))

    async def delete_businesses(self, store_ids: Sequence[str]) -> DeleteBusinessesResponse:
        ids = validate_store_ids(store_ids)
        return await self._call(
            "delete businesses",
            DELETE_BUSINESSES_PATH,
            DeleteBusinessesRequest,
            DeleteBusinessesResponse,
            store_ids=ids,
        )
