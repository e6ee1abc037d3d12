"""A bounded pool of blocks whose parents are not known yet."""

from __future__ import annotations

import random

from chainkit.blocks import OrphanBlock

__all__ = [
    "DEFAULT_MAX_ORPHAN_BLOCKS",
    "OrphanAddError",
    "BlockAlreadyInOrphanList",
    "OrphanBlocksPool",
]

DEFAULT_MAX_ORPHAN_BLOCKS = 512


class OrphanAddError(Exception):
    """A block could not be added to the orphan pool."""


class BlockAlreadyInOrphanList(OrphanAddError):
    """The block is already held by the pool."""

    def __init__(self, block: OrphanBlock) -> None:
        super().__init__(f"block {block.block_id().hex()} is already in the orphan list")
        self.block = block

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockAlreadyInOrphanList):
            return NotImplemented
        return self.block == other.block

    def __hash__(self) -> int:
        return hash((type(self), self.block))


class OrphanBlocksPool:
    """Orphan blocks indexed by id and by parent id.

    When the pool is full, adding a block first evicts one block: a random
    orphan is picked and the deepest descendant along its first-child path
    is removed.
    """

    def __init__(
        self,
        max_orphans: int = DEFAULT_MAX_ORPHAN_BLOCKS,
        rng: random.Random | None = None,
    ) -> None:
        if max_orphans < 1:
            raise ValueError(f"max_orphans must be at least 1, got {max_orphans}")
        self.max_orphans = max_orphans
        self._rng = rng if rng is not None else random.Random()
        self._orphan_ids: list[bytes] = []
        self._orphan_by_id: dict[bytes, OrphanBlock] = {}
        self._orphan_by_prev_id: dict[bytes, list[OrphanBlock]] = {}

    def __len__(self) -> int:
        return len(self._orphan_by_id)

    def _drop_block(self, block_id: bytes) -> None:
        block = self._orphan_by_id.pop(block_id)
        self._orphan_ids.remove(block_id)

        siblings = self._orphan_by_prev_id[block.prev_block_id]
        if len(siblings) == 1:
            del self._orphan_by_prev_id[block.prev_block_id]
        else:
            position = next(
                pos for pos, blk in enumerate(siblings) if blk.block_id() == block_id
            )
            del siblings[position]

    def _del_one_deepest_child(self, block_id: bytes) -> None:
        current = block_id
        while (children := self._orphan_by_prev_id.get(current)) is not None:
            current = children[0].block_id()
        self._drop_block(current)

    def _prune(self) -> None:
        if len(self._orphan_by_id) < self.max_orphans:
            return
        chosen = self._rng.choice(self._orphan_ids)
        self._del_one_deepest_child(chosen)

    def add_block(self, block: OrphanBlock) -> None:
        """Add ``block``, evicting one orphan first if the pool is full.

        Raises BlockAlreadyInOrphanList if the block is already held.
        """
        self._prune()
        block_id = block.block_id()
        if block_id in self._orphan_by_id:
            raise BlockAlreadyInOrphanList(block)
        self._orphan_by_id[block_id] = block
        self._orphan_ids.append(block_id)
        self._orphan_by_prev_id.setdefault(block.prev_block_id, []).append(block)

    def is_already_an_orphan(self, block_id: bytes) -> bool:
        """Whether a block with this id is in the pool."""
        return block_id in self._orphan_by_id

    def clear(self) -> None:
        """Remove every block."""
        self._orphan_by_id.clear()
        self._orphan_ids.clear()
        self._orphan_by_prev_id.clear()

    def take_all_children_of(self, block_id: bytes) -> list[OrphanBlock]:
        """Remove and return every block whose parent is ``block_id``, in insertion order."""
        children = list(self._orphan_by_prev_id.get(block_id, ()))
        for child in children:
            self._drop_block(child.block_id())
        return children