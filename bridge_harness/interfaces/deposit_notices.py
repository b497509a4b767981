"""
DepositNoticeSource interface.

Defines the contract for fetching deposits observed but not yet processed.
"""

from abc import ABC, abstractmethod

from bridge_harness.domain import CreateDepositRequest


class DepositNoticeSource(ABC):
    """Abstract base class for cross-chain deposit notices."""

    @abstractmethod
    async def list_pending_deposits(self) -> list[CreateDepositRequest]:
        """
        Get pending deposit notices.

        Returns:
            Notices in the order they were received.
        """
        pass
