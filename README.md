# chainkit

Building blocks for a blockchain node:

- **Hashing** (`chainkit.hashing`): one-shot hashers (`Blake2b`, `Blake2b32`,
  `Sha1`, `Sha256`, `Sha3_512`, `Ripemd160`) and streaming counterparts
  (`Blake2bStream`, `Blake2b32Stream`, `Sha1Stream`, `Sha256Stream`,
  `Sha3_512Stream`, `Ripemd160Stream`), plus `Sha256Ripemd160Stream`, which
  computes `ripemd160(sha256(data))`.
- **Blocks** (`chainkit.blocks`): `OrphanBlock`, a minimal block identified by
  a 32-byte id, and generators for random blocks, chains and siblings.
- **Orphan block pool** (`chainkit.orphan_blocks`): `OrphanBlocksPool` keeps
  blocks whose parent is not yet known, bounded in size, and hands back all
  children of a parent once it arrives.
- **Logging helpers** (`chainkit.logsetup`): `init_logging` sets up terminal
  logging.

## Installation

```
pip install chainkit
```

## Hashing

```python
from chainkit.hashing import Sha256, Sha256Ripemd160Stream, digest

h = Sha256.hash(b"mintlayer")          # 32 bytes
same = digest(Sha256, b"mintlayer")

stream = Sha256Ripemd160Stream()
stream.write(b"bitcoin").write(b"test")
key_hash = stream.finalize()            # 20 bytes; the stream is reset afterwards
```

Every hasher class has an `output_size` in bytes. Streams support `write`
(chainable), `reset`, `finalize` (returns the digest and resets) and `copy`.
`Blake2b32` is the first 32 bytes of the 64-byte BLAKE2b digest. Avoid `Sha1`
unless you need it for legacy data.

## Blocks

```python
import random
from chainkit.blocks import OrphanBlock, make_block, make_chain, make_siblings

rng = random.Random(7)
block = make_block(rng=rng)             # random parent id and timestamp
chain = make_chain(3, rng=rng)          # each block is the child of the one before
siblings = make_siblings(4, rng=rng)    # four blocks sharing one parent

explicit = OrphanBlock(prev_block_id=bytes(32), timestamp=0, payload=b"data")
print(explicit.block_id().hex())
```

An `OrphanBlock` is frozen; its id is the `Blake2b32` hash of its parent id,
timestamp and payload. The parent id must be exactly 32 bytes and the timestamp
must fit in 32 bits, or `ValueError` is raised. `random_block_id` returns an id
whose low 8 bytes are random and whose other bytes are zero. The generators
raise `ValueError` for a negative count.

## Orphan blocks

```python
from chainkit.blocks import make_chain
from chainkit.orphan_blocks import OrphanBlocksPool, BlockAlreadyInOrphanList

pool = OrphanBlocksPool(max_orphans=512)
chain = make_chain(3)
for block in chain:
    pool.add_block(block)

try:
    pool.add_block(chain[0])
except BlockAlreadyInOrphanList as err:
    print("duplicate:", err.block.block_id().hex())

children = pool.take_all_children_of(chain[0].prev_block_id)
print(len(children), len(pool))
```

The default capacity is `DEFAULT_MAX_ORPHAN_BLOCKS` (512); a capacity below 1
raises `ValueError`. An optional `rng` (a `random.Random`) controls eviction.
When the pool is full, adding a block first evicts one: a random orphan is
picked and its deepest descendant (following first children) is removed.
`is_already_an_orphan(block_id)` tells whether a block is held, and `clear()`
empties the pool. `BlockAlreadyInOrphanList` derives from `OrphanAddError`.

## Logging

```python
from chainkit.logsetup import init_logging

init_logging(None)
```

Logs go to standard error. The level is read from the `CHAINKIT_LOG`
environment variable (for example `debug`, `info`, `warn`) and defaults to
errors only. Only terminal output is supported; a log file path is accepted
and ignored (`is_file_output_supported()` returns `False`).

## Node

```
chainkit-node
```

Starts the node entry point, which prints a greeting and exits.

## What this package does not do

There is no networking, block validation, chain state, storage or key and
signature handling here. The `chainkit-node` command does not run a node; it
only prints a greeting.