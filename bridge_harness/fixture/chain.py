"""
In-memory dual-chain fixture.

Holds a linear settlement chain, a tenure-partitioned execution chain,
known settlement transactions and pending deposit notices, and answers
the node queries code under test would send to live chain nodes.

The fixture is single-owner: it does no locking. Clone it with copy()
if several tasks need independent state.
"""

import asyncio
import copy
import random
from collections.abc import AsyncIterator, Iterable, Mapping, Sequence
from itertools import accumulate
from types import MappingProxyType
from typing import Any, NamedTuple

from bridge_harness.config import get_settings
from bridge_harness.domain import (
    GENESIS_BLOCK_ID,
    GENESIS_PREVIOUS_HASH,
    AccountInfo,
    CreateDepositRequest,
    ExecutionBlock,
    ExecutionBlockHeader,
    FeePriority,
    GetTxResponse,
    NodeInfo,
    ProtocolInfo,
    SettlementBlock,
    SubmitTxResponse,
    TenureBlock,
    TenureInfo,
    Transaction,
)
from bridge_harness.domain.execution import ZERO_CONSENSUS_HASH
from bridge_harness.errors import CapabilityNotImplementedError, MissingBlockError
from bridge_harness.fixture import canned, dummy
from bridge_harness.interfaces import (
    DepositNoticeSource,
    ExecutionChainQuery,
    SettlementChainQuery,
)
from bridge_harness.logging import get_logger

logger = get_logger(__name__)


class _ChainCursor(NamedTuple):
    """Fold state: the last execution header produced and the tenure that produced it."""

    last_header: ExecutionBlockHeader
    tenure: tuple[TenureBlock, ...]


def _tenure_size(rng: random.Random, blocks_per_tenure: Sequence[int]) -> int:
    if len(blocks_per_tenure) == 0:
        return 0
    return max(0, rng.choice(blocks_per_tenure))


def _link_settlement_blocks(blocks: Iterable[SettlementBlock]) -> list[SettlementBlock]:
    linked: list[SettlementBlock] = []
    for block in blocks:
        previous = linked[-1].block_hash() if linked else GENESIS_PREVIOUS_HASH
        linked.append(block.with_previous(previous))
    return linked


def _chain_block(
    rng: random.Random, parent: ExecutionBlockHeader, settlement_block_hash: str
) -> TenureBlock:
    """One random block, child of ``parent``."""
    block = dummy.execution_block(rng)
    header = block.header.model_copy(
        update={
            "parent_block_id": parent.block_id(),
            "chain_length": parent.chain_length + 1,
        }
    )
    block = block.model_copy(update={"header": header})
    return TenureBlock(
        block_id=block.block_id(),
        block=block,
        settlement_block_hash=settlement_block_hash,
    )


def _build_execution_chain(
    rng: random.Random,
    settlement_blocks: Sequence[SettlementBlock],
    blocks_per_tenure: Sequence[int],
) -> list[TenureBlock]:
    def extend_with_tenure(cursor: _ChainCursor, anchor: SettlementBlock) -> _ChainCursor:
        anchor_hash = anchor.block_hash()
        last_header = cursor.last_header
        tenure: list[TenureBlock] = []
        for _ in range(_tenure_size(rng, blocks_per_tenure)):
            entry = _chain_block(rng, last_header, anchor_hash)
            tenure.append(entry)
            last_header = entry.block.header
        # An empty tenure carries the last header over untouched.
        return _ChainCursor(last_header, tuple(tenure))

    start = _ChainCursor(ExecutionBlockHeader.empty(), ())
    cursors = accumulate(settlement_blocks, extend_with_tenure, initial=start)
    return [entry for cursor in cursors for entry in cursor.tenure]


class ChainFixture(DepositNoticeSource):
    """
    Synthetic settlement and execution chains for tests.

    Usage:
        fixture = ChainFixture.generate(random.Random(42), 10, range(0, 3))
        block = await fixture.execution.get_block(block_id)
        tx = await fixture.settlement.get_transaction(txid)

    ``settlement`` and ``execution`` expose the two query capability
    sets; the fixture itself serves pending deposit notices.
    """

    def __init__(
        self,
        settlement_blocks: Sequence[SettlementBlock] = (),
        execution_blocks: Sequence[TenureBlock] = (),
        *,
        node_info: NodeInfo | None = None,
        protocol_info: ProtocolInfo | None = None,
    ) -> None:
        """
        Initialize a fixture from existing chain data.

        Args:
            settlement_blocks: Settlement chain, oldest first
            execution_blocks: Execution chain in generation order
            node_info: Node info baseline (default: packaged or configured file)
            protocol_info: Protocol info baseline (default: packaged or configured file)
        """
        self._settlement_blocks: list[SettlementBlock] = list(settlement_blocks)
        self._execution_blocks: list[TenureBlock] = list(execution_blocks)
        self._known_transactions: dict[str, GetTxResponse] = {}
        self._pending_deposits: list[CreateDepositRequest] = []
        # Settings are only consulted for baselines that were not passed in.
        if node_info is None:
            node_info = canned.load_node_info(get_settings().node_info_path)
        if protocol_info is None:
            protocol_info = canned.load_protocol_info(get_settings().protocol_info_path)
        self._node_info = node_info
        self._protocol_info = protocol_info
        self.settlement = FixtureSettlementChain(self)
        self.execution = FixtureExecutionChain(self)

    @classmethod
    def generate(
        cls,
        rng: random.Random,
        settlement_block_count: int,
        blocks_per_tenure: Sequence[int],
        **baselines: Any,
    ) -> "ChainFixture":
        """
        Generate linked chains with random payloads.

        Args:
            rng: Random source; a seeded one gives a reproducible fixture
            settlement_block_count: Number of settlement blocks
            blocks_per_tenure: Candidate tenure sizes, typically a range;
                one is drawn per settlement block (0 if empty)
            **baselines: node_info / protocol_info overrides

        Returns:
            Fixture with no known transactions or pending deposits.
        """
        settlement_blocks = _link_settlement_blocks(
            [dummy.settlement_block(rng, height) for height in range(settlement_block_count)]
        )
        execution_blocks = _build_execution_chain(rng, settlement_blocks, blocks_per_tenure)

        logger.debug(
            "Generated fixture: %d settlement blocks, %d execution blocks",
            len(settlement_blocks),
            len(execution_blocks),
        )
        return cls(settlement_blocks, execution_blocks, **baselines)

    # =========================================================================
    # Chain Data
    # =========================================================================

    @property
    def settlement_blocks(self) -> tuple[SettlementBlock, ...]:
        return tuple(self._settlement_blocks)

    @property
    def execution_blocks(self) -> tuple[TenureBlock, ...]:
        return tuple(self._execution_blocks)

    @property
    def known_transactions(self) -> Mapping[str, GetTxResponse]:
        return MappingProxyType(self._known_transactions)

    @property
    def node_info_baseline(self) -> NodeInfo:
        return self._node_info

    @property
    def protocol_info_baseline(self) -> ProtocolInfo:
        return self._protocol_info

    @property
    def pending_deposits(self) -> tuple[CreateDepositRequest, ...]:
        return tuple(self._pending_deposits)

    def tenures(self) -> list[tuple[str, list[TenureBlock]]]:
        """Execution blocks grouped by settlement block, empty tenures included."""
        grouped: dict[str, list[TenureBlock]] = {
            block.block_hash(): [] for block in self._settlement_blocks
        }
        for entry in self._execution_blocks:
            grouped.setdefault(entry.settlement_block_hash, []).append(entry)
        return list(grouped.items())

    def find_execution_block(self, block_id: str) -> tuple[int, TenureBlock]:
        """
        Locate an execution block in generation order.

        Raises:
            MissingBlockError: If no block has this id.
        """
        for index, entry in enumerate(self._execution_blocks):
            if entry.block_id == block_id:
                return index, entry
        raise MissingBlockError(block_id)

    def copy(self) -> "ChainFixture":
        """Independent clone; chain data is immutable and shared."""
        clone = copy.copy(self)
        clone._settlement_blocks = list(self._settlement_blocks)
        clone._execution_blocks = list(self._execution_blocks)
        clone._known_transactions = dict(self._known_transactions)
        clone._pending_deposits = list(self._pending_deposits)
        clone.settlement = FixtureSettlementChain(clone)
        clone.execution = FixtureExecutionChain(clone)
        return clone

    async def block_hash_stream(self) -> AsyncIterator[str]:
        """Yield settlement block hashes in chain order, like a new-block feed."""
        for block in list(self._settlement_blocks):
            yield block.block_hash()
            await asyncio.sleep(0)

    # =========================================================================
    # Known Transactions and Pending Deposits
    # =========================================================================

    def add_known_transaction(self, txid: str, response: GetTxResponse) -> None:
        """Store a transaction lookup response; replaces any earlier one."""
        self._known_transactions[txid] = response

    def add_known_transactions(self, transactions: Iterable[tuple[str, GetTxResponse]]) -> None:
        for txid, response in transactions:
            self.add_known_transaction(txid, response)

    def add_pending_deposit(self, deposit: CreateDepositRequest) -> None:
        self._pending_deposits.append(deposit)

    def add_pending_deposits(self, deposits: Iterable[CreateDepositRequest]) -> None:
        self._pending_deposits.extend(deposits)

    async def list_pending_deposits(self) -> list[CreateDepositRequest]:
        return list(self._pending_deposits)


class FixtureSettlementChain(SettlementChainQuery):
    """Settlement chain queries answered from a ChainFixture."""

    def __init__(self, fixture: ChainFixture) -> None:
        self._fixture = fixture

    async def get_transaction(self, txid: str) -> GetTxResponse | None:
        return self._fixture.known_transactions.get(txid)

    async def get_transaction_info(self, txid: str, block_hash: str) -> GetTxResponse | None:
        raise CapabilityNotImplementedError("get_transaction_info")

    async def get_block(self, block_hash: str) -> SettlementBlock | None:
        return next(
            (
                block
                for block in self._fixture.settlement_blocks
                if block.block_hash() == block_hash
            ),
            None,
        )

    async def estimate_fee_rate(self) -> float:
        raise CapabilityNotImplementedError("estimate_fee_rate")

    async def get_last_fee(self, txid: str, vout: int) -> int | None:
        raise CapabilityNotImplementedError("get_last_fee")

    async def broadcast_transaction(self, tx: Transaction) -> None:
        raise CapabilityNotImplementedError("broadcast_transaction")


class FixtureExecutionChain(ExecutionChainQuery):
    """Execution chain queries answered from a ChainFixture."""

    def __init__(self, fixture: ChainFixture) -> None:
        self._fixture = fixture

    async def get_block(self, block_id: str) -> ExecutionBlock:
        _, entry = self._fixture.find_execution_block(block_id)
        return entry.block

    async def get_tenure(self, block_id: str) -> list[ExecutionBlock]:
        index, target = self._fixture.find_execution_block(block_id)
        # Tenures are contiguous, so filtering the prefix by anchor
        # yields the tenure's blocks up to and including the target.
        return [
            entry.block
            for entry in self._fixture.execution_blocks[: index + 1]
            if entry.settlement_block_hash == target.settlement_block_hash
        ]

    async def get_tenure_info(self) -> TenureInfo:
        settlement_blocks = self._fixture.settlement_blocks
        if not settlement_blocks:
            raise MissingBlockError()

        execution_blocks = self._fixture.execution_blocks
        anchor_hash = settlement_blocks[-1].block_hash()
        tip_block_id = execution_blocks[-1].block_id if execution_blocks else GENESIS_BLOCK_ID
        # An empty last tenure starts at the block the chain carried over.
        tenure_start_block_id = next(
            (
                entry.block_id
                for entry in execution_blocks
                if entry.settlement_block_hash == anchor_hash
            ),
            tip_block_id,
        )
        return TenureInfo(
            consensus_hash=ZERO_CONSENSUS_HASH,
            tenure_start_block_id=tenure_start_block_id,
            parent_consensus_hash=ZERO_CONSENSUS_HASH,
            parent_tenure_start_block_id=GENESIS_BLOCK_ID,
            tip_block_id=tip_block_id,
            tip_height=len(execution_blocks),
            reward_cycle=0,
        )

    async def get_node_info(self) -> NodeInfo:
        return self._fixture.node_info_baseline.model_copy(
            update={
                "burn_block_height": len(self._fixture.settlement_blocks),
                "stacks_tip_height": len(self._fixture.execution_blocks),
            }
        )

    async def get_protocol_info(self) -> ProtocolInfo:
        execution_blocks = self._fixture.execution_blocks
        start_height = execution_blocks[0].block.header.chain_length if execution_blocks else 0
        return self._fixture.protocol_info_baseline.model_copy(
            update={"epochs": [canned.modeled_epoch(start_height)]}
        )

    async def get_account(self, address: str) -> AccountInfo:
        raise CapabilityNotImplementedError("get_account")

    async def submit_transaction(self, tx: Any) -> SubmitTxResponse:
        raise CapabilityNotImplementedError("submit_transaction")

    async def estimate_fee(self, payload: Any, priority: FeePriority) -> int:
        raise CapabilityNotImplementedError("estimate_fee")

    async def get_signer_set(self, contract_principal: str) -> list[str]:
        raise CapabilityNotImplementedError("get_signer_set")
