import pytest

from algopuzzles.weights import broken_weights, can_weigh


def test_source_answer():
    assert broken_weights() == [(1, 3, 9, 27)]


@pytest.mark.parametrize("weight", range(1, 41))
def test_answer_weighs_every_amount(weight):
    assert can_weigh((1, 3, 9, 27), weight)


def test_amount_beyond_total_cannot_be_weighed():
    assert can_weigh((1, 3, 9, 27), 41) is False


def test_even_pieces_cannot_balance_odd_amount():
    assert can_weigh([2, 4], 3) is False


def test_difference_of_pieces_is_weighable():
    assert can_weigh([5, 7], 2) is True


def test_every_result_sums_to_total_and_is_strictly_increasing():
    for total in (10, 13, 40):
        for pieces in broken_weights(total):
            assert sum(pieces) == total
            assert list(pieces) == sorted(set(pieces))
            assert all(can_weigh(pieces, w) for w in range(1, total + 1))


def test_invalid_total():
    with pytest.raises(ValueError):
        broken_weights(0)