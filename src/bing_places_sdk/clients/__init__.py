from .base import BaseClient
from .businesses_client import BusinessesClient
from .chains_client import ChainsClient
from .insights_client import InsightsClient

__all__ = [
    "BaseClient",
    "BusinessesClient",
    "ChainsClient",
    "InsightsClient",
]
