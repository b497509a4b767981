"""
Domain models for the bridge test harness.

- Settlement chain: blocks linked by header hash, transaction lookups
- Execution chain: tenure-grouped blocks and node RPC payloads
- Deposit API: deposits, withdrawals and chainstate
"""

from bridge_harness.domain.deposit import (
    ALL_STATUSES,
    Chainstate,
    CreateDepositRequest,
    CreateWithdrawalRequest,
    Deposit,
    DepositInfo,
    DepositUpdate,
    GetDepositsResponse,
    GetWithdrawalsResponse,
    Status,
    UpdateDepositsRequest,
    UpdateDepositsResponse,
    UpdateWithdrawalsRequest,
    UpdateWithdrawalsResponse,
    Withdrawal,
    WithdrawalInfo,
    WithdrawalUpdate,
)
from bridge_harness.domain.execution import (
    GENESIS_BLOCK_ID,
    AccountInfo,
    ExecutionBlock,
    ExecutionBlockHeader,
    ExecutionCost,
    FeePriority,
    NodeInfo,
    ProtocolEpoch,
    ProtocolInfo,
    SubmitTxResponse,
    TenureBlock,
    TenureInfo,
)
from bridge_harness.domain.settlement import (
    GENESIS_PREVIOUS_HASH,
    GetTxResponse,
    SettlementBlock,
    SettlementBlockHeader,
    Transaction,
    TxOutput,
)

__all__ = [
    "ALL_STATUSES",
    "GENESIS_BLOCK_ID",
    "GENESIS_PREVIOUS_HASH",
    "AccountInfo",
    "Chainstate",
    "CreateDepositRequest",
    "CreateWithdrawalRequest",
    "Deposit",
    "DepositInfo",
    "DepositUpdate",
    "ExecutionBlock",
    "ExecutionBlockHeader",
    "ExecutionCost",
    "FeePriority",
    "GetDepositsResponse",
    "GetTxResponse",
    "GetWithdrawalsResponse",
    "NodeInfo",
    "ProtocolEpoch",
    "ProtocolInfo",
    "SettlementBlock",
    "SettlementBlockHeader",
    "Status",
    "SubmitTxResponse",
    "TenureBlock",
    "TenureInfo",
    "Transaction",
    "TxOutput",
    "UpdateDepositsRequest",
    "UpdateDepositsResponse",
    "UpdateWithdrawalsRequest",
    "UpdateWithdrawalsResponse",
    "Withdrawal",
    "WithdrawalInfo",
    "WithdrawalUpdate",
]
