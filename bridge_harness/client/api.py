"""
Typed client for the deposit API used by integration tests.

Wraps the deposit, withdrawal and chainstate endpoints and the
"all items with a given status" listings built on collect_all.
"""

from bridge_harness.client.pagination import FieldCursor, FieldItems, collect_all
from bridge_harness.client.transport import ApiClient
from bridge_harness.domain import (
    ALL_STATUSES,
    Chainstate,
    CreateDepositRequest,
    CreateWithdrawalRequest,
    Deposit,
    DepositInfo,
    GetDepositsResponse,
    GetWithdrawalsResponse,
    Status,
    UpdateDepositsRequest,
    UpdateDepositsResponse,
    UpdateWithdrawalsRequest,
    UpdateWithdrawalsResponse,
    Withdrawal,
    WithdrawalInfo,
)

DEPOSIT_PATH = "/deposit"
WITHDRAWAL_PATH = "/withdrawal"
CHAINSTATE_PATH = "/chainstate"


def base_query_from_status(status: Status) -> dict[str, str]:
    """Query selecting one status; the value is the enum's wire form."""
    return {"status": status.value}


class DepositApiClient:
    """
    Deposit API operations over an ApiClient.

    Usage:
        async with ApiClient(settings, logger) as transport:
            api = DepositApiClient(transport)
            deposits = await api.get_all_deposits()
    """

    def __init__(self, client: ApiClient, base_url: str | None = None) -> None:
        self._client = client
        self._base_url = (base_url or client.settings.api_base_url).rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    # =========================================================================
    # Deposits
    # =========================================================================

    async def create_deposit(self, request: CreateDepositRequest) -> Deposit:
        return await self._client.request("POST", self._url(DEPOSIT_PATH), Deposit, body=request)

    async def get_deposit(self, bitcoin_txid: str, bitcoin_tx_output_index: int) -> Deposit:
        url = self._url(f"{DEPOSIT_PATH}/{bitcoin_txid}/{bitcoin_tx_output_index}")
        return await self._client.request("GET", url, Deposit)

    async def update_deposits(self, request: UpdateDepositsRequest) -> UpdateDepositsResponse:
        return await self._client.request(
            "PUT", self._url(DEPOSIT_PATH), UpdateDepositsResponse, body=request
        )

    async def get_all_deposits_with_status(self, status: Status) -> list[DepositInfo]:
        """All deposits with ``status``, following every page."""
        settings = self._client.settings
        return await collect_all(
            self._client,
            self._url(DEPOSIT_PATH),
            base_query_from_status(status),
            GetDepositsResponse,
            FieldCursor("next_token"),
            FieldItems("deposits"),
            cursor_key=settings.page_token_key,
            max_pages=settings.max_pages,
        )

    async def get_all_deposits(self) -> list[DepositInfo]:
        """All deposits, grouped by status in ALL_STATUSES order."""
        all_deposits: list[DepositInfo] = []
        for status in ALL_STATUSES:
            all_deposits.extend(await self.get_all_deposits_with_status(status))
        return all_deposits

    # =========================================================================
    # Withdrawals
    # =========================================================================

    async def create_withdrawal(self, request: CreateWithdrawalRequest) -> Withdrawal:
        return await self._client.request(
            "POST", self._url(WITHDRAWAL_PATH), Withdrawal, body=request
        )

    async def get_withdrawal(self, request_id: int) -> Withdrawal:
        url = self._url(f"{WITHDRAWAL_PATH}/{request_id}")
        return await self._client.request("GET", url, Withdrawal)

    async def update_withdrawals(
        self, request: UpdateWithdrawalsRequest
    ) -> UpdateWithdrawalsResponse:
        return await self._client.request(
            "PUT", self._url(WITHDRAWAL_PATH), UpdateWithdrawalsResponse, body=request
        )

    async def get_all_withdrawals_with_status(self, status: Status) -> list[WithdrawalInfo]:
        """All withdrawals with ``status``, following every page."""
        settings = self._client.settings
        return await collect_all(
            self._client,
            self._url(WITHDRAWAL_PATH),
            base_query_from_status(status),
            GetWithdrawalsResponse,
            FieldCursor("next_token"),
            FieldItems("withdrawals"),
            cursor_key=settings.page_token_key,
            max_pages=settings.max_pages,
        )

    async def get_all_withdrawals(self) -> list[WithdrawalInfo]:
        """All withdrawals, grouped by status in ALL_STATUSES order."""
        all_withdrawals: list[WithdrawalInfo] = []
        for status in ALL_STATUSES:
            all_withdrawals.extend(await self.get_all_withdrawals_with_status(status))
        return all_withdrawals

    # =========================================================================
    # Chainstate
    # =========================================================================

    async def create_chainstate(self, chainstate: Chainstate) -> Chainstate:
        return await self._client.request(
            "POST", self._url(CHAINSTATE_PATH), Chainstate, body=chainstate
        )

    async def get_chaintip(self) -> Chainstate:
        return await self._client.request("GET", self._url(CHAINSTATE_PATH), Chainstate)

    async def update_chainstate(self, chainstate: Chainstate) -> Chainstate:
        return await self._client.request(
            "PUT", self._url(CHAINSTATE_PATH), Chainstate, body=chainstate
        )
