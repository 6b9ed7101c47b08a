from __future__ import annotations

import pytest

from bing_places_sdk.exceptions import InvalidArgumentError, RemoteOperationFailed
from bing_places_sdk.models_chains import ChainInfo
from fakes import IDENTITY, build_client, reply

pytestmark = pytest.mark.anyio

CHAIN = {
    "ChainName": "Contoso Coffee",
    "Website": "https://contoso.example.com",
    "Locations": 10,
    "ClientContactName": "Jo Doe",
    "ClientContactEmail": "jo@contoso.example.com",
}
CHAIN_OK = {"Operation": "CHAIN_ADD", "ErrorMessage": None, "OperationStatus": True, "TrackingId": "trk"}


async def test_create_bulk_chain() -> None:
    client, api = build_client(reply(CHAIN_OK))

    result = await client.create_bulk_chain(CHAIN)

    assert str(api.requests[0].url).endswith("/CreateBulkChain")
    body = api.last_body
    assert body["ChainInfo"] == CHAIN
    assert body["Identity"] == IDENTITY
    assert set(body) == {"ChainInfo", "TrackingId", "Identity"}
    assert result.operation == "CHAIN_ADD"


async def test_update_bulk_chain_info_accepts_model() -> None:
    client, api = build_client(reply(CHAIN_OK))
    chain = ChainInfo(chain_name="Contoso Coffee", locations=25)

    await client.update_bulk_chain_info(chain)

    assert str(api.requests[0].url).endswith("/UpdateBulkChainInfo")
    assert api.last_body["ChainInfo"] == {"ChainName": "Contoso Coffee", "Locations": 25}


@pytest.mark.parametrize("operation", ["create_bulk_chain", "update_bulk_chain_info"])
async def test_chain_needs_ten_locations(operation: str) -> None:
    client, api = build_client(reply(CHAIN_OK))

    with pytest.raises(InvalidArgumentError, match="at least 10 locations"):
        await getattr(client, operation)(dict(CHAIN, Locations=9))

    assert api.requests == []


async def test_chain_failure_message() -> None:
    client, _ = build_client(reply({"ErrorMessage": "Chain already exists"}, status_code=409))

    with pytest.raises(RemoteOperationFailed, match="Failed to create bulk chain: Chain already exists"):
        await client.create_bulk_chain(CHAIN)
