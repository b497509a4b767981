"""
Bridge test harness

Test tooling for a settlement/execution chain bridge:
- Synthetic dual-chain fixture answering chain node queries
- Cursor-following collection of the deposit API's list endpoints
- Typed async client for deposits, withdrawals and chainstate
"""

__version__ = "0.1.0"

from bridge_harness.config import Settings, get_settings

__all__ = ["__version__", "Settings", "get_settings"]
