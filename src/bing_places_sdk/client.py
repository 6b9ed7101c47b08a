from __future__ import annotations

from typing import Any, Mapping

import httpx

from .clients.businesses_client import BusinessesClient
from .clients.chains_client import ChainsClient
from .clients.insights_client import InsightsClient
from .config import ClientConfig
from .http_client import HttpClient
from .models import Identity
from .session import PlacesSession


class BingPlacesClient(BusinessesClient, InsightsClient, ChainsClient):
    """Async client for the Bing Places partner API.

    ``identity`` is validated once, here. ``use_sandbox`` accepts a bool or a
    bool-like string; anything else is reported with a warning and the client
    targets production. Pass ``http_client`` to supply the transport (its own
    timeout, proxies and TLS settings apply); the client never closes a
    transport it did not create.
    """

    def __init__(
        self,
        identity: Identity | Mapping[str, Any],
        use_sandbox: object = None,
        *,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        config = config or ClientConfig()
        session = PlacesSession.create(identity, use_sandbox, config)
        super().__init__(session=session, http=HttpClient(config=config, client=http_client))

    @property
    def base_url(self) -> str:
        return self.session.base_url

    def get_identity(self) -> Identity:
        return self.session.get_identity()

    def set_identity(self, identity: Identity | Mapping[str, Any]) -> None:
        self.session.set_identity(identity)

    def switch_to_sandbox(self) -> None:
        self.session.switch_to_sandbox()

    def switch_to_production(self) -> None:
        self.session.switch_to_production()

    def is_sandbox(self) -> bool:
        return self.session.is_sandbox()

    def is_production(self) -> bool:
        return self.session.is_production()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "BingPlacesClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
