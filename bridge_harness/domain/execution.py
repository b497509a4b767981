"""
Execution chain domain models.

Execution blocks are grouped into tenures; every block of a tenure is
anchored to the same settlement block hash. Also holds the node RPC
payload shapes (tenure info, node info, protocol info) the fixture serves.
"""

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

ZERO_CONSENSUS_HASH = "00" * 20


class ExecutionBlockHeader(BaseModel):
    """Execution block header."""

    version: int = Field(default=0, ge=0)
    chain_length: int = Field(default=0, description="Blocks since genesis", ge=0)
    burn_spent: int = Field(default=0, ge=0)
    consensus_hash: str = Field(default=ZERO_CONSENSUS_HASH)
    parent_block_id: str = Field(default="00" * 32)
    tx_merkle_root: str = Field(default="00" * 32)
    state_index_root: str = Field(default="00" * 32)
    timestamp: int = Field(default=0, ge=0)
    miner_signature: str = Field(default="00" * 65)

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> "ExecutionBlockHeader":
        """The all-zero header that precedes the first block ever produced."""
        return cls()

    def block_id(self) -> str:
        """Block id: SHA-512 of the header truncated to 32 bytes."""
        digest = hashlib.sha512(self.model_dump_json().encode("utf-8")).digest()
        return digest[:32].hex()


# Parent id of the first execution block.
GENESIS_BLOCK_ID = ExecutionBlockHeader.empty().block_id()


class ExecutionBlock(BaseModel):
    """An execution chain block: header plus opaque transaction payloads."""

    header: ExecutionBlockHeader
    txs: tuple[str, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    def block_id(self) -> str:
        return self.header.block_id()


@dataclass(frozen=True)
class TenureBlock:
    """An execution block as stored by the fixture, with its tenure anchor."""

    block_id: str
    block: ExecutionBlock
    settlement_block_hash: str


class TenureInfo(BaseModel):
    """Tenure metadata for the current chain tip."""

    consensus_hash: str
    tenure_start_block_id: str
    parent_consensus_hash: str
    parent_tenure_start_block_id: str
    tip_block_id: str
    tip_height: int = Field(..., ge=0)
    reward_cycle: int = Field(..., ge=0)


class NodeInfo(BaseModel):
    """Node and network summary."""

    peer_version: int
    pox_consensus: str
    burn_block_height: int
    stable_pox_consensus: str
    stable_burn_block_height: int
    server_version: str
    network_id: int
    parent_network_id: int
    stacks_tip_height: int
    stacks_tip: str
    stacks_tip_consensus_hash: str
    genesis_chainstate_hash: str
    unanchored_tip: str | None = None
    unanchored_seq: int | None = None
    exit_at_block_height: int | None = None
    is_fully_synced: bool = True
    node_public_key: str | None = None
    node_public_key_hash: str | None = None
    affirmations: dict[str, str] | None = None
    last_pox_anchor: dict[str, str] | None = None
    stackerdbs: list[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class ExecutionCost(BaseModel):
    """Per-block execution budget."""

    write_length: int
    write_count: int
    read_length: int
    read_count: int
    runtime: int


class ProtocolEpoch(BaseModel):
    """One protocol epoch and the heights it spans."""

    epoch_id: str
    start_height: int
    end_height: int
    network_epoch: int
    block_limit: ExecutionCost


class ProtocolInfo(BaseModel):
    """Stacking/epoch information reported by the node."""

    contract_id: str
    pox_activation_threshold_ustx: int
    first_burnchain_block_height: int
    current_burnchain_block_height: int
    prepare_phase_block_length: int
    reward_phase_block_length: int
    reward_slots: int
    rejection_fraction: int | None = None
    total_liquid_supply_ustx: int
    current_cycle: dict[str, Any]
    next_cycle: dict[str, Any]
    epochs: list[ProtocolEpoch] = Field(default_factory=list)
    min_amount_ustx: int
    prepare_cycle_length: int
    reward_cycle_id: int
    reward_cycle_length: int
    rejection_votes_left_required: int | None = None
    next_reward_cycle_in: int
    contract_versions: list[dict[str, Any]] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class FeePriority(str, Enum):
    """Fee priority tiers for transaction fee estimation."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AccountInfo(BaseModel):
    """Account state on the execution chain."""

    balance: int
    locked: int
    unlock_height: int
    nonce: int


class SubmitTxResponse(BaseModel):
    """Result of submitting a transaction."""

    txid: str
    accepted: bool
    reason: str | None = None
