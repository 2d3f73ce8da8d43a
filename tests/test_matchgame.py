import pytest

from algopuzzles.matchgame import IllegalMove, MatchGame


@pytest.mark.parametrize("move", [1, 2, 3, 4])
def test_computer_wins_from_default_start(move):
    game = MatchGame()
    while not game.finished:
        game.take(min(move, game.remaining))
    assert game.winner == "computer"
    assert game.remaining == 0


def test_computer_reply_completes_five():
    game = MatchGame()
    assert game.take(3) == 2
    assert game.remaining == 16


@pytest.mark.parametrize("count", [0, 5, -1])
def test_out_of_range_take_rejected(count):
    game = MatchGame()
    with pytest.raises(IllegalMove):
        game.take(count)
    assert game.remaining == 21


def test_cannot_take_more_than_remain():
    game = MatchGame(matches=2)
    with pytest.raises(IllegalMove):
        game.take(3)
    assert game.remaining == 2


def test_no_moves_after_game_over():
    game = MatchGame(matches=1)
    assert game.take(1) == 0
    assert game.winner == "computer"
    with pytest.raises(IllegalMove):
        game.take(1)


def test_player_wins_when_computer_takes_last():
    game = MatchGame(matches=5)
    assert game.take(1) == 4
    assert game.winner == "player"