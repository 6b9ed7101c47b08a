from __future__ import annotations

from .models import ApiResponse, Envelope, WireModel


class ChainInfo(WireModel):
    chain_name: str
    locations: int
    website: str | None = None
    client_contact_name: str | None = None
    client_contact_email: str | None = None


class CreateBulkChainRequest(Envelope):
    chain_info: ChainInfo


class UpdateBulkChainInfoRequest(Envelope):
    chain_info: ChainInfo


class BulkChainResponse(ApiResponse):
    operation: str | None = None
