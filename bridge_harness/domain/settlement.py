"""
Settlement chain domain models.

Blocks are identified by the double SHA-256 of their header and linked
through ``previous_block_hash``. Immutable once generated.
"""

import hashlib

from pydantic import BaseModel, Field

# Back-link carried by the first generated block.
GENESIS_PREVIOUS_HASH = "00" * 32


def double_sha256(data: bytes) -> str:
    """Hex digest of SHA-256 applied twice."""
    return hashlib.sha256(hashlib.sha256(data).digest()).hexdigest()


class SettlementBlockHeader(BaseModel):
    """Settlement block header."""

    version: int = Field(..., description="Block version")
    previous_block_hash: str = Field(..., description="Hash of the previous block")
    merkle_root: str = Field(..., description="Transaction merkle root")
    time: int = Field(..., description="Block timestamp (unix seconds)", ge=0)
    bits: int = Field(..., description="Compact difficulty target", ge=0)
    nonce: int = Field(..., description="Proof-of-work nonce", ge=0)
    height: int = Field(..., description="Ordinal position in the chain", ge=0)

    model_config = {"frozen": True}

    def block_hash(self) -> str:
        """Identifying hash of the block carrying this header."""
        return double_sha256(self.model_dump_json().encode("utf-8"))


class SettlementBlock(BaseModel):
    """A settlement chain block: header plus the ids of its transactions."""

    header: SettlementBlockHeader
    txids: tuple[str, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    def block_hash(self) -> str:
        return self.header.block_hash()

    def with_previous(self, previous_block_hash: str) -> "SettlementBlock":
        """Return a copy of this block linked to ``previous_block_hash``."""
        header = self.header.model_copy(update={"previous_block_hash": previous_block_hash})
        return self.model_copy(update={"header": header})


class TxOutput(BaseModel):
    """Transaction output."""

    value: int = Field(..., description="Amount in satoshis", ge=0)
    script_pubkey: str = Field(..., description="Locking script (hex)")

    model_config = {"frozen": True}


class Transaction(BaseModel):
    """Settlement chain transaction (inputs are not modelled)."""

    txid: str
    version: int = 2
    lock_time: int = 0
    outputs: tuple[TxOutput, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}


class GetTxResponse(BaseModel):
    """Response of a transaction lookup against a settlement node."""

    tx: Transaction
    block_hash: str | None = Field(default=None, description="Containing block, if confirmed")
    confirmations: int | None = Field(default=None, ge=0)

    model_config = {"frozen": True}
