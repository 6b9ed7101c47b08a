from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..constants import CREATE_BULK_CHAIN_PATH, UPDATE_BULK_CHAIN_INFO_PATH
from ..models_chains import BulkChainResponse, ChainInfo, CreateBulkChainRequest, UpdateBulkChainInfoRequest
from ..validation import validate_chain_info
from .base import BaseClient


@dataclass
class ChainsClient(BaseClient):
    async def create_bulk_chain(self, chain_info: ChainInfo | Mapping[str, Any]) -> BulkChainResponse:
        chain = validate_chain_info(chain_info)
        return await self._call(
            "create bulk chain",
            CREATE_BULK_CHAIN_PATH,
            CreateBulkChainRequest,
            BulkChainResponse,
            chain_info=chain,
        )

    async def update_bulk_chain_info(self, chain_info: ChainInfo | Mapping[str, Any]) -> BulkChainResponse:
        chain = validate_chain_info(chain_info)
        return await self._call(
            "update bulk chain info",
            UPDATE_BULK_CHAIN_INFO_PATH,
            UpdateBulkChainInfoRequest,
            BulkChainResponse,
            chain_info=chain,
        )
