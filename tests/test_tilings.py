import pytest

from eulersolve.tilings import (
    block_combinations,
    block_combinations_threshold,
    coin_partitions,
    coloured_tiles,
    count_summations,
    dice_game,
    dice_totals,
    mixed_tiles,
)


def test_count_summations_example():
    assert count_summations(5) == 6


def test_count_summations_negative():
    with pytest.raises(ValueError):
        count_summations(-1)


def test_coin_partitions_divisibility():
    n = coin_partitions(100, 7)
    assert (count_summations(n) + 1) % 7 == 0
    assert all((count_summations(k) + 1) % 7 for k in range(2, n))


def test_coin_partitions_none_when_too_small():
    assert coin_partitions(2, 1000000) is None


def test_block_combinations_example():
    assert block_combinations(7) == 17


def test_block_combinations_increasing():
    values = [block_combinations(n) for n in range(3, 20)]
    assert values == sorted(set(values))


def test_block_threshold_inverts_counts():
    assert block_combinations_threshold(3, block_combinations(12) - 1, 100) == 12


def test_block_threshold_limit():
    assert block_combinations_threshold(3, 10**9, 10) is None


def test_mixed_tiles_example():
    assert mixed_tiles(5) == 15


@pytest.mark.parametrize("n", range(2, 15))
def test_mixed_exceeds_coloured(n):
    assert mixed_tiles(n) > coloured_tiles(n)


def test_dice_totals_weights():
    totals = dice_totals(4, 9)
    assert sum(totals.values()) == 4**9
    assert min(totals) == 9 and max(totals) == 36


def test_dice_totals_symmetric():
    totals = dice_totals(6, 3)
    assert all(totals[t] == totals[21 - t] for t in totals)


def test_dice_game_probability():
    p = dice_game()
    assert 0.5 < p < 1