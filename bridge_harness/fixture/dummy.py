"""Random chain data generators driven by a caller-supplied random.Random."""

import random

from bridge_harness.domain import (
    CreateDepositRequest,
    ExecutionBlock,
    ExecutionBlockHeader,
    GetTxResponse,
    SettlementBlock,
    SettlementBlockHeader,
    Transaction,
    TxOutput,
)

# Earliest plausible settlement block time (unix seconds).
MIN_BLOCK_TIME = 1_231_006_505
MAX_BLOCK_TIME = 2_000_000_000


def hex_bytes(rng: random.Random, size: int) -> str:
    return rng.randbytes(size).hex()


def txid(rng: random.Random) -> str:
    return hex_bytes(rng, 32)


def settlement_block(rng: random.Random, height: int = 0) -> SettlementBlock:
    """A settlement block with random header fields and 1-4 txids."""
    header = SettlementBlockHeader(
        version=rng.choice((1, 2, 0x20000000)),
        previous_block_hash=hex_bytes(rng, 32),
        merkle_root=hex_bytes(rng, 32),
        time=rng.randint(MIN_BLOCK_TIME, MAX_BLOCK_TIME),
        bits=rng.getrandbits(32),
        nonce=rng.getrandbits(32),
        height=height,
    )
    txids = tuple(txid(rng) for _ in range(rng.randint(1, 4)))
    return SettlementBlock(header=header, txids=txids)


def execution_block(rng: random.Random) -> ExecutionBlock:
    """
    An execution block with random header fields.

    ``parent_block_id`` and ``chain_length`` are placeholders; the
    generator overwrites them when linking the chain.
    """
    header = ExecutionBlockHeader(
        version=rng.randint(0, 3),
        chain_length=rng.randint(0, 1_000_000),
        burn_spent=rng.randint(0, 1_000_000),
        consensus_hash=hex_bytes(rng, 20),
        parent_block_id=hex_bytes(rng, 32),
        tx_merkle_root=hex_bytes(rng, 32),
        state_index_root=hex_bytes(rng, 32),
        timestamp=rng.randint(MIN_BLOCK_TIME, MAX_BLOCK_TIME),
        miner_signature=hex_bytes(rng, 65),
    )
    txs = tuple(hex_bytes(rng, rng.randint(16, 64)) for _ in range(rng.randint(0, 3)))
    return ExecutionBlock(header=header, txs=txs)


def tx_output(rng: random.Random) -> TxOutput:
    return TxOutput(value=rng.randint(546, 2_100_000_000), script_pubkey=hex_bytes(rng, 34))


def get_tx_response(
    rng: random.Random,
    tx_id: str | None = None,
    block_hash: str | None = None,
) -> GetTxResponse:
    """A transaction lookup response with 1-3 random outputs."""
    tx = Transaction(
        txid=tx_id if tx_id is not None else txid(rng),
        version=2,
        lock_time=0,
        outputs=tuple(tx_output(rng) for _ in range(rng.randint(1, 3))),
    )
    confirmations = rng.randint(1, 100) if block_hash is not None else None
    return GetTxResponse(tx=tx, block_hash=block_hash, confirmations=confirmations)


def deposit_request(rng: random.Random) -> CreateDepositRequest:
    """A pending deposit notice with random outpoint and scripts."""
    return CreateDepositRequest(
        bitcoin_txid=txid(rng),
        bitcoin_tx_output_index=rng.randint(0, 3),
        reclaim=hex_bytes(rng, 40),
        deposit=hex_bytes(rng, 60),
    )
