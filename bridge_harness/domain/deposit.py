"""
Deposit, withdrawal and chainstate payloads of the deposit API.

Field names are snake_case in Python and camelCase on the wire.
Serialize with ``model_dump(by_alias=True)`` when building request bodies.
"""

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for API payloads: camelCase aliases, populate by either name."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class Status(str, Enum):
    """Lifecycle status of a deposit or withdrawal request."""

    PENDING = "pending"
    REPROCESSING = "reprocessing"
    ACCEPTED = "accepted"
    CONFIRMED = "confirmed"
    FAILED = "failed"


ALL_STATUSES: tuple[Status, ...] = (
    Status.PENDING,
    Status.REPROCESSING,
    Status.ACCEPTED,
    Status.CONFIRMED,
    Status.FAILED,
)


class Chainstate(ApiModel):
    """An execution chain tip as tracked by the deposit API."""

    stacks_block_hash: str
    stacks_block_height: int = Field(..., ge=0)


# =============================================================================
# Deposits
# =============================================================================


class CreateDepositRequest(ApiModel):
    """
    A deposit observed on the settlement chain.

    Doubles as the pending deposit notice held by the chain fixture and
    as the body of a create-deposit call.
    """

    bitcoin_txid: str
    bitcoin_tx_output_index: int = Field(..., ge=0)
    reclaim: str = Field(..., description="Reclaim script (hex or label)")
    deposit: str = Field(..., description="Deposit script (hex or label)")

    model_config = {"frozen": True}


class DepositInfo(ApiModel):
    """Summary entry returned when listing deposits."""

    bitcoin_txid: str
    bitcoin_tx_output_index: int
    recipient: str = ""
    amount: int = 0
    last_update_height: int = 0
    last_update_block_hash: str = ""
    status: Status
    reclaim_script: str = ""
    deposit_script: str = ""


class Deposit(DepositInfo):
    """Full deposit record."""

    status_message: str = ""


class GetDepositsResponse(ApiModel):
    """One page of deposits."""

    next_token: str | None = None
    deposits: list[DepositInfo]


class DepositUpdate(ApiModel):
    bitcoin_txid: str
    bitcoin_tx_output_index: int
    last_update_height: int
    last_update_block_hash: str
    status: Status
    status_message: str = ""


class UpdateDepositsRequest(ApiModel):
    deposits: list[DepositUpdate]


class UpdateDepositsResponse(ApiModel):
    deposits: list[Deposit] = Field(default_factory=list)


# =============================================================================
# Withdrawals
# =============================================================================


class CreateWithdrawalRequest(ApiModel):
    """Body of a create-withdrawal call."""

    request_id: int = Field(..., ge=0)
    stacks_block_hash: str
    stacks_block_height: int = Field(..., ge=0)
    recipient: str
    amount: int = Field(..., ge=0)
    max_fee: int = Field(default=0, ge=0)


class WithdrawalInfo(ApiModel):
    """Summary entry returned when listing withdrawals."""

    request_id: int
    stacks_block_hash: str
    stacks_block_height: int
    recipient: str = ""
    amount: int = 0
    last_update_height: int = 0
    last_update_block_hash: str = ""
    status: Status


class Withdrawal(WithdrawalInfo):
    """Full withdrawal record."""

    status_message: str = ""


class GetWithdrawalsResponse(ApiModel):
    """One page of withdrawals."""

    next_token: str | None = None
    withdrawals: list[WithdrawalInfo]


class WithdrawalUpdate(ApiModel):
    request_id: int
    last_update_height: int
    last_update_block_hash: str
    status: Status
    status_message: str = ""


class UpdateWithdrawalsRequest(ApiModel):
    withdrawals: list[WithdrawalUpdate]


class UpdateWithdrawalsResponse(ApiModel):
    withdrawals: list[Withdrawal] = Field(default_factory=list)
