from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field

from .models import ApiResponse, Envelope, SearchCriteria, WireModel, item_has_error


class BusinessCategory(WireModel):
    category_name: str
    bp_category_id: int = Field(alias="BPCategoryId")


class Categories(WireModel):
    business_categories: list[BusinessCategory] = Field(default_factory=list)
    primary_category: BusinessCategory


class HolidayHoursTimePeriod(WireModel):
    date: str
    open_time: str | None = None
    close_time: str | None = None
    is_closed: bool | None = None


class Amenity(WireModel):
    id: str
    name: str


class BusinessListing(WireModel):
    store_id: str
    business_name: str
    chain_name: str | None = None
    address_line1: str
    address_line2: str | None = None
    city: str
    state_or_province: str
    country: str
    zip_code: str
    phone_number: str | None = None
    categories: Categories
    latitude: str | float | None = None
    longitude: str | float | None = None
    business_email: str | None = None
    main_web_site: str | None = None
    facebook_address: str | None = None
    twitter_address: str | None = None
    photos: list[str] | None = None
    menu_url: str | None = Field(default=None, alias="MenuURL")
    order_url: str | None = Field(default=None, alias="OrderURL")
    restaurant_price: Literal["$", "$$", "$$$", "$$$$", "$$$$$"] | None = None
    hotel_star_rating: Literal["1 star", "2 star", "3 star", "4 star", "5 star"] | None = None
    npi: str | None = None
    offers: Any = None
    amenities: list[Amenity] | None = None
    open_24_hours: bool | None = None
    # Entries look like "Mon 08:00 AM-08:00 PM"
    operating_hours: list[str] | None = None
    holiday_hours: list[HolidayHoursTimePeriod] | None = None
    hide_address: bool | None = None
    service_areas: list[str] | None = None
    is_closed: bool | None = None


# Records the server returns may not satisfy the outbound schema
ListedBusiness = Annotated[BusinessListing | dict[str, Any], Field(union_mode="left_to_right")]


class BusinessError(WireModel):
    column_name: str | None = None
    error_message: str | None = None


class ValidationError(WireModel):
    attribute_name: str | None = None
    error_message: str | None = None
    store_id: str | None = None
    business_errors: list[BusinessError] | None = None


class CreatedBusinessStatus(WireModel):
    store_id: str | None = None
    status: str | None = None
    operation: str | None = None
    error_message: str | None = None
    warning_messages: list[Any] | None = None


class DeleteBusinessStatus(WireModel):
    store_id: str | None = None
    status: str | None = None
    error_message: str | None = None


class CreateBusinessesRequest(Envelope):
    businesses: list[BusinessListing]


class UpdateBusinessesRequest(Envelope):
    businesses: list[BusinessListing]


class FetchBusinessesRequest(Envelope):
    page_number: int
    page_size: int
    search_criteria: SearchCriteria


class DeleteBusinessesRequest(Envelope):
    store_ids: list[str]


class CreateBusinessesResponse(ApiResponse):
    # Entries that do not fit ValidationError, or an empty list, are kept as sent
    errors: Annotated[
        dict[str, ValidationError] | dict[str, Any] | list[Any] | None,
        Field(union_mode="left_to_right"),
    ] = None
    created_businesses: dict[str, CreatedBusinessStatus] | None = None

    def _has_item_failures(self) -> bool:
        return any(item_has_error(item) for item in (self.created_businesses or {}).values())


class UpdateBusinessesResponse(ApiResponse):
    updated_businesses: dict[str, Any] | None = None

    def _has_item_failures(self) -> bool:
        return any(item_has_error(item) for item in (self.updated_businesses or {}).values())


class FetchBusinessesResponse(ApiResponse):
    businesses: list[ListedBusiness] | None = None


class DeleteBusinessesResponse(ApiResponse):
    deleted_businesses: list[DeleteBusinessStatus] | None = None

    def _has_item_failures(self) -> bool:
        return any(item_has_error(item) for item in self.deleted_businesses or [])
