"""
Interfaces (abstract base classes) for the bridge test harness.

These define the capability sets consumed by code under test:
- SettlementChainQuery: Settlement chain node lookups
- ExecutionChainQuery: Execution chain node lookups
- DepositNoticeSource: Pending cross-chain deposit notices
"""

from bridge_harness.interfaces.deposit_notices import DepositNoticeSource
from bridge_harness.interfaces.execution_chain import ExecutionChainQuery
from bridge_harness.interfaces.settlement_chain import SettlementChainQuery

__all__ = [
    "DepositNoticeSource",
    "ExecutionChainQuery",
    "SettlementChainQuery",
]
