"""Minimal blocks for the orphan pool, with generators for random blocks."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass, field
from functools import cached_property

from chainkit.hashing import Blake2b32

__all__ = [
    "BLOCK_ID_SIZE",
    "OrphanBlock",
    "random_block_id",
    "make_block",
    "make_random_blocks",
    "make_chain",
    "make_siblings",
]

BLOCK_ID_SIZE = 32
_MAX_TIMESTAMP = 0xFFFF_FFFF


@dataclass(frozen=True)
class OrphanBlock:
    """A block known by its parent's id, a timestamp and an opaque payload."""

    prev_block_id: bytes
    timestamp: int
    payload: bytes = field(default=b"")

    def __post_init__(self) -> None:
        if not isinstance(self.prev_block_id, (bytes, bytearray)):
            raise TypeError("prev_block_id must be bytes")
        if len(self.prev_block_id) != BLOCK_ID_SIZE:
            raise ValueError(
                f"prev_block_id must be {BLOCK_ID_SIZE} bytes, got {len(self.prev_block_id)}"
            )
        if not 0 <= self.timestamp <= _MAX_TIMESTAMP:
            raise ValueError(f"timestamp out of range: {self.timestamp}")
        object.__setattr__(self, "prev_block_id", bytes(self.prev_block_id))
        object.__setattr__(self, "payload", bytes(self.payload))

    def _encode(self) -> bytes:
        return b"".join(
            (
                self.prev_block_id,
                struct.pack("<I", self.timestamp),
                struct.pack("<I", len(self.payload)),
                self.payload,
            )
        )

    @cached_property
    def _id(self) -> bytes:
        return Blake2b32.hash(self._encode())

    def block_id(self) -> bytes:
        """Return the block's 32-byte identifier."""
        return self._id


def _resolve(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_block_id(rng: random.Random | None = None) -> bytes:
    """Return an id whose low 8 bytes are random and whose high bytes are zero."""
    value = _resolve(rng).getrandbits(64)
    return value.to_bytes(BLOCK_ID_SIZE, "big")


def make_block(
    prev_block_id: bytes | None = None, rng: random.Random | None = None
) -> OrphanBlock:
    """Make a block with a random timestamp; the parent id is random if not given."""
    rng = _resolve(rng)
    if prev_block_id is None:
        prev_block_id = random_block_id(rng)
    return OrphanBlock(prev_block_id, rng.getrandbits(32))


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")


def make_random_blocks(count: int, rng: random.Random | None = None) -> list[OrphanBlock]:
    """Make ``count`` unrelated blocks with random parents."""
    _check_count(count)
    rng = _resolve(rng)
    return [make_block(None, rng) for _ in range(count)]


def make_chain(
    count: int, prev_block_id: bytes | None = None, rng: random.Random | None = None
) -> list[OrphanBlock]:
    """Make ``count`` blocks, each the child of the one before it.

    The first block's parent is ``prev_block_id``, or a random id if not given.
    """
    _check_count(count)
    rng = _resolve(rng)
    chain: list[OrphanBlock] = []
    parent = prev_block_id
    for _ in range(count):
        block = make_block(parent, rng)
        chain.append(block)
        parent = block.block_id()
    return chain


def make_siblings(
    count: int, prev_block_id: bytes | None = None, rng: random.Random | None = None
) -> list[OrphanBlock]:
    """Make ``count`` blocks that share one parent, random if not given."""
    _check_count(count)
    rng = _resolve(rng)
    parent = prev_block_id if prev_block_id is not None else random_block_id(rng)
    return [make_block(parent, rng) for _ in range(count)]