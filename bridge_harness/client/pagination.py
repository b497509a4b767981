"""
Cursor-following collection of list endpoints.

A list endpoint returns one page of items plus an opaque continuation
token. collect_all walks the token chain to the end and concatenates
the pages in the order the server returned them.

Pages are fetched strictly one after another. The first failing page
aborts the whole collection: callers never see a partial list. With
max_pages=None a server that never stops issuing tokens will hang the
caller; pass a bound where that matters.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from bridge_harness.client.transport import ApiClient
from bridge_harness.errors import PaginationError
from bridge_harness.logging import get_logger

logger = get_logger(__name__)

R = TypeVar("R")
I = TypeVar("I")  # noqa: E741

DEFAULT_CURSOR_KEY = "nextToken"


class CursorExtractor(ABC, Generic[R]):
    """Reads the continuation token from a decoded page."""

    @abstractmethod
    def extract(self, response: R) -> str | None:
        """
        Get the token for the next page.

        Returns:
            The token, or None when this was the last page.
        """
        pass


class ItemsExtractor(ABC, Generic[R, I]):
    """Reads the items carried by a decoded page."""

    @abstractmethod
    def extract(self, response: R) -> list[I]:
        """Get this page's items in server order."""
        pass


class FieldCursor(CursorExtractor[Any]):
    """Token stored in a named attribute of the response model."""

    def __init__(self, field: str = "next_token") -> None:
        self.field = field

    def extract(self, response: Any) -> str | None:
        return getattr(response, self.field)


class FieldItems(ItemsExtractor[Any, Any]):
    """Items stored in a named list attribute of the response model."""

    def __init__(self, field: str) -> None:
        self.field = field

    def extract(self, response: Any) -> list[Any]:
        return list(getattr(response, self.field))


async def collect_all(
    client: ApiClient,
    endpoint: str,
    base_query: Mapping[str, str],
    response_type: type[R],
    extract_cursor: CursorExtractor[R],
    extract_items: ItemsExtractor[R, I],
    *,
    cursor_key: str = DEFAULT_CURSOR_KEY,
    max_pages: int | None = None,
) -> list[I]:
    """
    Fetch every page of a list endpoint.

    Args:
        client: Transport used for each page request
        endpoint: List endpoint URL
        base_query: Query sent with every page
        response_type: Model each page decodes into
        extract_cursor: Reads the continuation token of a page
        extract_items: Reads the items of a page
        cursor_key: Query parameter carrying the token on follow-up pages
        max_pages: Optional bound on the number of pages (None = unbounded)

    Returns:
        All items, page by page, in server order.

    Raises:
        TransportError: A page request failed
        DecodeError: A page could not be decoded
        PaginationError: More than max_pages pages were returned
    """
    all_items: list[I] = []
    query = dict(base_query)
    pages = 0

    while True:
        if max_pages is not None and pages >= max_pages:
            raise PaginationError(endpoint, max_pages)

        response = await client.request("GET", endpoint, response_type, query=query)
        pages += 1
        all_items.extend(extract_items.extract(response))

        next_token = extract_cursor.extract(response)
        if next_token is None:
            break
        query = {**base_query, cursor_key: next_token}

    logger.debug("Collected %d items from %s in %d pages", len(all_items), endpoint, pages)
    return all_items
