"""Hashing primitives, minimal blocks, an orphan block pool and logging helpers for a blockchain node."""

__version__ = "0.1.0"
__all__ = ["blocks", "hashing", "logsetup", "node", "orphan_blocks"]