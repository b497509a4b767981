"""
Canned node payloads served by the chain fixture.

The baselines are plain JSON test data shipped with the package. Tests can
point at alternate files or pass their own models to the fixture.
"""

from importlib import resources
from pathlib import Path

from bridge_harness.domain import ExecutionCost, NodeInfo, ProtocolEpoch, ProtocolInfo

NODE_INFO_FILE = "node_info.json"
PROTOCOL_INFO_FILE = "protocol_info.json"

# The single epoch reported by get_protocol_info.
MODELED_EPOCH_ID = "Epoch30"
MODELED_NETWORK_EPOCH = 11
MODELED_EPOCH_END_HEIGHT = 9223372036854775807
MODELED_BLOCK_LIMIT = ExecutionCost(
    write_length=15_000_000,
    write_count=15_000,
    read_length=100_000_000,
    read_count=15_000,
    runtime=5_000_000_000,
)


def _read(name: str, path: Path | None) -> str:
    if path is not None:
        return path.read_text(encoding="utf-8")
    return resources.files("bridge_harness.fixture").joinpath("data", name).read_text(
        encoding="utf-8"
    )


def load_node_info(path: Path | None = None) -> NodeInfo:
    """Load the node info baseline, from ``path`` or the packaged default."""
    return NodeInfo.model_validate_json(_read(NODE_INFO_FILE, path))


def load_protocol_info(path: Path | None = None) -> ProtocolInfo:
    """Load the protocol info baseline, from ``path`` or the packaged default."""
    return ProtocolInfo.model_validate_json(_read(PROTOCOL_INFO_FILE, path))


def modeled_epoch(start_height: int) -> ProtocolEpoch:
    """The modeled epoch, activated at ``start_height``."""
    return ProtocolEpoch(
        epoch_id=MODELED_EPOCH_ID,
        start_height=start_height,
        end_height=MODELED_EPOCH_END_HEIGHT,
        network_epoch=MODELED_NETWORK_EPOCH,
        block_limit=MODELED_BLOCK_LIMIT,
    )
