"""
Tests for cursor-following collection of list endpoints.

Uses respx to mock HTTP responses.
"""

from typing import Any

import httpx
import pytest
import respx
from pydantic import BaseModel

from bridge_harness.client import (
    ApiClient,
    DepositApiClient,
    FieldCursor,
    FieldItems,
    collect_all,
)
from bridge_harness.domain import GetDepositsResponse, Status
from bridge_harness.errors import (
    DecodeError,
    HttpStatusError,
    PaginationError,
    TransportError,
)
from tests.conftest import API_BASE_URL

ITEMS_URL = f"{API_BASE_URL}/items"


class Page(BaseModel):
    """Minimal list endpoint page."""

    items: list[int]
    next_token: str | None = None


def page(items: list[int], next_token: str | None) -> httpx.Response:
    return httpx.Response(200, json={"items": items, "next_token": next_token})


def paged_responder(pages: dict[str | None, httpx.Response], key: str = "nextToken") -> Any:
    """Serve the page registered under the request's token (None = first page)."""

    def respond(request: httpx.Request) -> httpx.Response:
        return pages[request.url.params.get(key)]

    return respond


async def collect_items(client: ApiClient, **kwargs: Any) -> list[int]:
    return await collect_all(
        client,
        ITEMS_URL,
        {"status": "pending"},
        Page,
        FieldCursor(),
        FieldItems("items"),
        **kwargs,
    )


class TestCollectAll:
    """Tests for collect_all."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_follows_cursor_chain(self, api_client: ApiClient) -> None:
        """Pages are concatenated in server order until the token runs out."""
        route = respx.get(ITEMS_URL).mock(
            side_effect=paged_responder(
                {
                    None: page([1, 2], "T1"),
                    "T1": page([3, 4], "T2"),
                    "T2": page([5], None),
                }
            )
        )

        items = await collect_items(api_client)

        assert items == [1, 2, 3, 4, 5]
        assert route.call_count == 3

        first, second, third = (call.request.url.params for call in route.calls)
        assert "nextToken" not in first
        assert first["status"] == "pending"
        assert second["nextToken"] == "T1"
        assert third["nextToken"] == "T2"
        assert third["status"] == "pending"

    @respx.mock
    @pytest.mark.asyncio
    async def test_single_page(self, api_client: ApiClient) -> None:
        """A first page without a token ends the collection."""
        route = respx.get(ITEMS_URL).mock(return_value=page([7, 8], None))

        assert await collect_items(api_client) == [7, 8]
        assert route.call_count == 1

    @respx.mock
    @pytest.mark.asyncio
    async def test_empty_pages_are_followed(self, api_client: ApiClient) -> None:
        """An empty page with a token still leads to the next page."""
        respx.get(ITEMS_URL).mock(
            side_effect=paged_responder({None: page([], "T1"), "T1": page([9], None)})
        )

        assert await collect_items(api_client) == [9]

    @respx.mock
    @pytest.mark.asyncio
    async def test_decode_failure_aborts(self, api_client: ApiClient) -> None:
        """A malformed page fails the whole collection and keeps the raw body."""
        route = respx.get(ITEMS_URL).mock(
            side_effect=paged_responder(
                {
                    None: page([1, 2], "T1"),
                    "T1": httpx.Response(200, text="<html>bad gateway</html>"),
                    "T2": page([5], None),
                }
            )
        )

        with pytest.raises(DecodeError) as exc_info:
            await collect_items(api_client)

        assert exc_info.value.response_text == "<html>bad gateway</html>"
        assert "Response text: <html>bad gateway</html>" in str(exc_info.value)
        assert exc_info.value.endpoint == ITEMS_URL
        assert route.call_count == 2

    @respx.mock
    @pytest.mark.asyncio
    async def test_error_status_aborts(self, api_client: ApiClient) -> None:
        """A server error on a later page fails the collection instead of ending it."""
        route = respx.get(ITEMS_URL).mock(
            side_effect=paged_responder(
                {
                    None: page([1, 2], "T1"),
                    "T1": httpx.Response(500, json={"message": "Internal server error"}),
                }
            )
        )

        with pytest.raises(HttpStatusError) as exc_info:
            await collect_items(api_client)

        assert exc_info.value.status_code == 500
        assert exc_info.value.endpoint == ITEMS_URL
        assert "Internal server error" in exc_info.value.response_text
        assert route.call_count == 2

    @respx.mock
    @pytest.mark.asyncio
    async def test_wrong_shape_is_decode_error(self, api_client: ApiClient) -> None:
        """Valid JSON with the wrong structure is also a decode failure."""
        respx.get(ITEMS_URL).mock(return_value=httpx.Response(200, json={"rows": []}))

        with pytest.raises(DecodeError):
            await collect_items(api_client)

    @respx.mock
    @pytest.mark.asyncio
    async def test_transport_failure(self, api_client: ApiClient) -> None:
        """Connection errors surface as TransportError."""
        respx.get(ITEMS_URL).mock(side_effect=httpx.ConnectError("Connection refused"))

        with pytest.raises(TransportError) as exc_info:
            await collect_items(api_client)

        assert isinstance(exc_info.value.source, httpx.ConnectError)

    @respx.mock
    @pytest.mark.asyncio
    async def test_custom_cursor_key(self, api_client: ApiClient) -> None:
        """The token can travel under another query parameter."""
        route = respx.get(ITEMS_URL).mock(
            side_effect=paged_responder(
                {None: page([1], "abc"), "abc": page([2], None)}, key="cursor"
            )
        )

        assert await collect_items(api_client, cursor_key="cursor") == [1, 2]
        assert route.calls[1].request.url.params["cursor"] == "abc"
        assert "nextToken" not in route.calls[1].request.url.params

    @respx.mock
    @pytest.mark.asyncio
    async def test_max_pages_bound(self, api_client: ApiClient) -> None:
        """A server that keeps issuing tokens is cut off at max_pages."""
        route = respx.get(ITEMS_URL).mock(return_value=page([1], "again"))

        with pytest.raises(PaginationError) as exc_info:
            await collect_items(api_client, max_pages=3)

        assert exc_info.value.pages == 3
        assert route.call_count == 3

    @respx.mock
    @pytest.mark.asyncio
    async def test_max_pages_not_reached(self, api_client: ApiClient) -> None:
        """A bound equal to the page count is not an error."""
        respx.get(ITEMS_URL).mock(
            side_effect=paged_responder({None: page([1], "T1"), "T1": page([2], None)})
        )

        assert await collect_items(api_client, max_pages=2) == [1, 2]


class TestExtractors:
    """Tests for the field-based extraction strategies."""

    def test_field_cursor(self) -> None:
        response = GetDepositsResponse(next_token="T9", deposits=[])
        assert FieldCursor().extract(response) == "T9"
        assert FieldCursor().extract(GetDepositsResponse(deposits=[])) is None

    def test_field_items_returns_list(self) -> None:
        response = Page(items=[3, 1, 2])
        items = FieldItems("items").extract(response)

        assert items == [3, 1, 2]
        items.append(4)
        assert response.items == [3, 1, 2]


class TestDepositListing:
    """Tests for collecting deposit pages through the API client."""

    @staticmethod
    def deposit(txid: str) -> dict:
        return {"bitcoinTxid": txid, "bitcoinTxOutputIndex": 0, "status": "pending"}

    @respx.mock
    @pytest.mark.asyncio
    async def test_server_error_page_is_not_an_empty_last_page(
        self, api_client: ApiClient
    ) -> None:
        """An error page after a full page never yields a partial listing."""
        deposit_url = f"{API_BASE_URL}/deposit"
        route = respx.get(deposit_url).mock(
            side_effect=paged_responder(
                {
                    None: httpx.Response(
                        200,
                        json={
                            "deposits": [self.deposit("a"), self.deposit("b")],
                            "nextToken": "T1",
                        },
                    ),
                    "T1": httpx.Response(500, json={"message": "Internal server error"}),
                }
            )
        )

        with pytest.raises(HttpStatusError) as exc_info:
            await DepositApiClient(api_client).get_all_deposits_with_status(Status.PENDING)

        assert exc_info.value.status_code == 500
        assert route.call_count == 2

    @respx.mock
    @pytest.mark.asyncio
    async def test_page_without_item_list_is_decode_error(self, api_client: ApiClient) -> None:
        """A successful body lacking the item list does not pass as an empty page."""
        respx.get(f"{API_BASE_URL}/deposit").mock(
            return_value=httpx.Response(200, json={"message": "maintenance"})
        )

        with pytest.raises(DecodeError):
            await DepositApiClient(api_client).get_all_deposits_with_status(Status.PENDING)
