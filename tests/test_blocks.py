import random

import pytest

from chainkit.blocks import (
    BLOCK_ID_SIZE,
    OrphanBlock,
    make_block,
    make_chain,
    make_random_blocks,
    make_siblings,
    random_block_id,
)


def _rng(seed=7):
    return random.Random(seed)


def test_block_id_size_matches_h256():
    assert BLOCK_ID_SIZE == 32
    block = make_block(rng=_rng())
    assert len(block.block_id()) == BLOCK_ID_SIZE


def test_random_block_id_has_zero_high_bytes():
    for _ in range(20):
        block_id = random_block_id(_rng(random.randrange(1000)))
        assert len(block_id) == 32
        assert block_id[:24] == bytes(24)


def test_block_id_is_deterministic_and_value_based():
    parent = random_block_id(_rng())
    a = OrphanBlock(parent, 5, b"tx")
    b = OrphanBlock(parent, 5, b"tx")
    assert a == b
    assert a.block_id() == b.block_id()
    assert hash(a) == hash(b)


def test_block_id_changes_with_fields():
    parent = random_block_id(_rng())
    base = OrphanBlock(parent, 5)
    assert OrphanBlock(parent, 6).block_id() != base.block_id()
    assert OrphanBlock(parent, 5, b"x").block_id() != base.block_id()
    other_parent = random_block_id(_rng(8))
    assert OrphanBlock(other_parent, 5).block_id() != base.block_id()


def test_block_rejects_bad_parent_length():
    with pytest.raises(ValueError):
        OrphanBlock(b"short", 1)


def test_block_rejects_non_bytes_parent():
    with pytest.raises(TypeError):
        OrphanBlock("0" * 32, 1)


@pytest.mark.parametrize("timestamp", [-1, 2**32])
def test_block_rejects_out_of_range_timestamp(timestamp):
    with pytest.raises(ValueError):
        OrphanBlock(bytes(32), timestamp)


def test_make_block_uses_given_parent():
    parent = random_block_id(_rng())
    block = make_block(parent, _rng(3))
    assert block.prev_block_id == parent


def test_seeded_generation_is_reproducible():
    first_blocks = make_random_blocks(5, _rng(42))
    second_blocks = make_random_blocks(5, _rng(42))
    assert len(first_blocks) == 5
    assert [b.block_id() for b in first_blocks] == [b.block_id() for b in second_blocks]

    first_chain = make_chain(4, None, _rng(42))
    second_chain = make_chain(4, None, _rng(42))
    assert len(first_chain) == 4
    assert first_chain[-1].block_id() == second_chain[-1].block_id()
    assert first_chain[0].prev_block_id == second_chain[0].prev_block_id


def test_make_random_blocks_are_distinct():
    blocks = make_random_blocks(50, _rng())
    assert len(blocks) == 50
    assert len({b.block_id() for b in blocks}) == 50


def test_make_chain_links_each_block_to_previous():
    chain = make_chain(6, None, _rng())
    assert len(chain) == 6
    for parent, child in zip(chain, chain[1:]):
        assert child.prev_block_id == parent.block_id()


def test_make_chain_starting_from_id():
    start = random_block_id(_rng())
    chain = make_chain(3, start, _rng(11))
    assert chain[0].prev_block_id == start
    assert chain[2].prev_block_id == chain[1].block_id()


def test_make_siblings_share_parent():
    siblings = make_siblings(9, None, _rng())
    assert len(siblings) == 9
    assert len({b.prev_block_id for b in siblings}) == 1
    assert len({b.block_id() for b in siblings}) == 9


def test_make_siblings_with_given_parent():
    parent = make_block(rng=_rng()).block_id()
    siblings = make_siblings(3, parent, _rng(5))
    assert all(b.prev_block_id == parent for b in siblings)


@pytest.mark.parametrize("factory", [make_random_blocks, make_chain, make_siblings])
def test_negative_count_rejected(factory):
    with pytest.raises(ValueError):
        factory(-1)


@pytest.mark.parametrize("factory", [make_random_blocks, make_chain, make_siblings])
def test_zero_count_gives_empty_list(factory):
    assert factory(0) == []