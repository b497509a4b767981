"""
Deterministic, human-readable test payloads.

Values embed their inputs so a failing assertion shows where a record
came from, e.g. ``stacks-block-12-hash-fork-1``.
"""

from bridge_harness.domain import Chainstate, CreateDepositRequest


def labelled_chainstate(height: int, fork_id: int) -> Chainstate:
    """A chainstate whose block hash names its height and fork."""
    return Chainstate(
        stacks_block_hash=f"stacks-block-{height}-hash-fork-{fork_id}",
        stacks_block_height=height,
    )


def labelled_deposit_request(id_num: int, output_index: int) -> CreateDepositRequest:
    """A create-deposit body whose txid and scripts name their inputs."""
    return CreateDepositRequest(
        bitcoin_txid=f"deposit-txid-{id_num}",
        bitcoin_tx_output_index=output_index,
        reclaim=f"deposit-txid-{id_num}:{output_index}-reclaim-script",
        deposit=f"deposit-txid-{id_num}:{output_index}-deposit-script",
    )
