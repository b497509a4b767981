"""
ExecutionChainQuery interface.

Defines the contract for execution chain node lookups.
"""

from abc import ABC, abstractmethod
from typing import Any

from bridge_harness.domain import (
    AccountInfo,
    ExecutionBlock,
    FeePriority,
    NodeInfo,
    ProtocolInfo,
    SubmitTxResponse,
    TenureInfo,
)


class ExecutionChainQuery(ABC):
    """
    Abstract base class for execution chain access.

    Implementations raise MissingBlockError when a requested block
    does not exist.
    """

    # =========================================================================
    # Blocks and Tenures
    # =========================================================================

    @abstractmethod
    async def get_block(self, block_id: str) -> ExecutionBlock:
        """
        Get a block by id.

        Args:
            block_id: Execution block id (hex)

        Returns:
            The block.

        Raises:
            MissingBlockError: If no block has this id.
        """
        pass

    @abstractmethod
    async def get_tenure(self, block_id: str) -> list[ExecutionBlock]:
        """
        Get the blocks of a tenure up to and including the given block.

        Args:
            block_id: Id of the last block to return

        Returns:
            Blocks of the tenure containing ``block_id``, oldest first,
            ending with that block.

        Raises:
            MissingBlockError: If no block has this id.
        """
        pass

    @abstractmethod
    async def get_tenure_info(self) -> TenureInfo:
        """Get metadata about the tenure of the current chain tip."""
        pass

    # =========================================================================
    # Node Information
    # =========================================================================

    @abstractmethod
    async def get_node_info(self) -> NodeInfo:
        """Get node and network summary information."""
        pass

    @abstractmethod
    async def get_protocol_info(self) -> ProtocolInfo:
        """Get stacking cycle and epoch information."""
        pass

    # =========================================================================
    # Accounts and Transactions
    # =========================================================================

    @abstractmethod
    async def get_account(self, address: str) -> AccountInfo:
        """
        Get account state.

        Args:
            address: Account address
        """
        pass

    @abstractmethod
    async def submit_transaction(self, tx: Any) -> SubmitTxResponse:
        """
        Submit a transaction to the node.

        Args:
            tx: Serialized or structured transaction
        """
        pass

    @abstractmethod
    async def estimate_fee(self, payload: Any, priority: FeePriority) -> int:
        """
        Estimate the fee for a transaction payload.

        Args:
            payload: Transaction payload
            priority: Fee priority tier

        Returns:
            Fee in micro units.
        """
        pass

    @abstractmethod
    async def get_signer_set(self, contract_principal: str) -> list[str]:
        """
        Get the current signer public keys.

        Args:
            contract_principal: Address of the registry contract deployer

        Returns:
            Signer public keys (hex).
        """
        pass
