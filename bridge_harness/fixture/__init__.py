"""
Synthetic chain fixture.

Provides:
- ChainFixture: generated dual-chain state answering node queries
- dummy: random chain data generators
- labels: deterministic, readable test payloads
- canned: node payload baselines
"""

from bridge_harness.fixture.chain import (
    ChainFixture,
    FixtureExecutionChain,
    FixtureSettlementChain,
)
from bridge_harness.fixture.labels import labelled_chainstate, labelled_deposit_request

__all__ = [
    "ChainFixture",
    "FixtureExecutionChain",
    "FixtureSettlementChain",
    "labelled_chainstate",
    "labelled_deposit_request",
]
