from __future__ import annotations

import re
from typing import Any, Mapping, NoReturn, Sequence, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .constants import (
    MAX_BATCH_SIZE,
    MAX_PAGE_SIZE,
    MIN_BATCH_SIZE,
    MIN_CHAIN_LOCATIONS,
    MIN_PAGE_NUMBER,
    MIN_PAGE_SIZE,
)
from .exceptions import InvalidArgumentError, InvalidEmailError, InvalidIdentityError, ValidationIssue
from .models import Identity, SearchCriteriaType
from .models_businesses import BusinessListing
from .models_chains import ChainInfo

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_IDENTITY_FIELDS = ("Puid", "AuthProvider", "EmailId")
M = TypeVar("M", bound=BaseModel)


def is_email_valid(email: object) -> bool:
    if not isinstance(email, str):
        return False
    return _EMAIL_RE.match(email) is not None


def validate_identity(identity: Identity | Mapping[str, Any] | None) -> Identity:
    if identity is None:
        raise InvalidIdentityError("Identity is required. Please provide a valid Identity object.")
    if isinstance(identity, Identity):
        values = identity.to_wire()
    elif isinstance(identity, Mapping):
        values = {
            wire: identity.get(wire, identity.get(python_name))
            for wire, python_name in zip(_IDENTITY_FIELDS, ("puid", "auth_provider", "email_id"))
        }
    else:
        raise InvalidIdentityError(f"Identity must be a mapping or Identity, got {type(identity).__name__}")

    # An empty EmailId surfaces as InvalidEmailError, itself an InvalidIdentityError
    missing = [name for name in _IDENTITY_FIELDS[:2] if not isinstance(values.get(name), str) or not values[name].strip()]
    if missing:
        raise InvalidIdentityError(
            f"Identity is required. Missing or empty fields: {', '.join(missing)}"
        )
    if not is_email_valid(values["EmailId"]):
        raise InvalidEmailError("EmailId is not a valid email address.")
    return Identity(puid=values["Puid"], auth_provider=values["AuthProvider"], email_id=values["EmailId"])


def validate_batch(businesses: Sequence[BusinessListing | Mapping[str, Any]]) -> list[BusinessListing]:
    if isinstance(businesses, (str, bytes, Mapping)) or not isinstance(businesses, Sequence):
        _raise_issue(None, "businesses", "businesses must be a list of business records")
    if not MIN_BATCH_SIZE <= len(businesses) <= MAX_BATCH_SIZE:
        _raise_issue(
            None,
            "businesses",
            f"Businesses array must contain between {MIN_BATCH_SIZE} and {MAX_BATCH_SIZE} items.",
        )
    return [coerce_record(item, BusinessListing, idx) for idx, item in enumerate(businesses)]


def validate_paging(page_number: int, page_size: int) -> None:
    if not _is_int(page_number) or page_number < MIN_PAGE_NUMBER:
        _raise_issue(None, "page_number", f"PageNumber must be greater than or equal to {MIN_PAGE_NUMBER}.")
    if not _is_int(page_size) or not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
        _raise_issue(None, "page_size", f"PageSize must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}.")


def validate_criteria_type(
    criteria_type: SearchCriteriaType | str,
    allowed: frozenset[SearchCriteriaType] | None = None,
) -> SearchCriteriaType:
    try:
        resolved = SearchCriteriaType(criteria_type)
    except ValueError:
        _raise_issue(None, "criteria_type", f"Unsupported CriteriaType: {criteria_type!r}")
    if allowed is not None and resolved not in allowed:
        names = ", ".join(sorted(item.value for item in allowed))
        _raise_issue(None, "criteria_type", f"CriteriaType must be one of: {names}")
    return resolved


def validate_store_ids(store_ids: Sequence[str]) -> list[str]:
    if isinstance(store_ids, (str, bytes)) or not isinstance(store_ids, Sequence) or not store_ids:
        _raise_issue(None, "store_ids", "StoreIds must contain at least one store id.")
    return list(store_ids)


def validate_chain_info(chain_info: ChainInfo | Mapping[str, Any]) -> ChainInfo:
    chain = coerce_record(chain_info, ChainInfo, None)
    if chain.locations < MIN_CHAIN_LOCATIONS:
        _raise_issue(
            None,
            "Locations",
            f"Chain must have at least {MIN_CHAIN_LOCATIONS} locations, got {chain.locations}.",
        )
    return chain


def coerce_record(value: M | Mapping[str, Any], model_type: type[M], row_index: int | None) -> M:
    if isinstance(value, model_type):
        return value
    try:
        return model_type.model_validate(value)
    except PydanticValidationError as exc:
        issue = exc.errors()[0] if exc.errors() else {"loc": ("record",), "msg": "Invalid record"}
        field = ".".join(str(part) for part in issue.get("loc", ("record",)))
        _raise_issue(row_index, field, issue.get("msg", "Invalid record"))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _raise_issue(row_index: int | None, field: str, reason: str) -> NoReturn:
    raise InvalidArgumentError([ValidationIssue(row_index=row_index, field=field, reason=reason)])
