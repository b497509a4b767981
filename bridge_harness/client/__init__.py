"""
Deposit API client.

Provides:
- ApiClient: async httpx transport returning raw response text
- decode: typed decoding that keeps the raw body on failure
- collect_all: cursor-following aggregation of list endpoints
- DepositApiClient: typed deposit/withdrawal/chainstate operations
"""

from bridge_harness.client.api import DepositApiClient, base_query_from_status
from bridge_harness.client.decode import decode
from bridge_harness.client.pagination import (
    CursorExtractor,
    FieldCursor,
    FieldItems,
    ItemsExtractor,
    collect_all,
)
from bridge_harness.client.transport import ApiClient

__all__ = [
    "ApiClient",
    "CursorExtractor",
    "DepositApiClient",
    "FieldCursor",
    "FieldItems",
    "ItemsExtractor",
    "base_query_from_status",
    "collect_all",
    "decode",
]
