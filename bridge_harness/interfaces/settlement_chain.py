"""
SettlementChainQuery interface.

Defines the contract for settlement chain node lookups.
"""

from abc import ABC, abstractmethod

from bridge_harness.domain import GetTxResponse, SettlementBlock, Transaction


class SettlementChainQuery(ABC):
    """
    Abstract base class for settlement chain access.

    Absence of a transaction or block is a normal outcome and is
    reported as None rather than raised.
    """

    @abstractmethod
    async def get_transaction(self, txid: str) -> GetTxResponse | None:
        """
        Look up a transaction by id.

        Args:
            txid: Transaction id (hex)

        Returns:
            The lookup response, or None if the node does not know the tx.
        """
        pass

    @abstractmethod
    async def get_transaction_info(self, txid: str, block_hash: str) -> GetTxResponse | None:
        """
        Look up a transaction within a specific block.

        Args:
            txid: Transaction id (hex)
            block_hash: Hash of the block expected to contain it

        Returns:
            The lookup response, or None if not found.
        """
        pass

    @abstractmethod
    async def get_block(self, block_hash: str) -> SettlementBlock | None:
        """
        Look up a block by hash.

        Args:
            block_hash: Block hash (hex)

        Returns:
            The block, or None if unknown.
        """
        pass

    @abstractmethod
    async def estimate_fee_rate(self) -> float:
        """Estimate the current fee rate (sats per vbyte)."""
        pass

    @abstractmethod
    async def get_last_fee(self, txid: str, vout: int) -> int | None:
        """
        Get the fee paid by the transaction that created an output.

        Args:
            txid: Transaction id of the output
            vout: Output index

        Returns:
            Fee in satoshis, or None if the output is unknown.
        """
        pass

    @abstractmethod
    async def broadcast_transaction(self, tx: Transaction) -> None:
        """Broadcast a transaction to the network."""
        pass
