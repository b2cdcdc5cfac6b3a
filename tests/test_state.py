from rpsgame.state import GameState


def test_initial_state():
    state = GameState()
    assert state.started is False
    assert state.player_score == 0
    assert state.computer_score == 0


def test_set_started():
    state = GameState()
    state.started = True
    assert state.started is True
    state.started = False
    assert state.started is False


def test_player_score():
    state = GameState()
    state.player_score = 5
    assert state.player_score == 5
    state.add_player_score()
    assert state.player_score == 6


def test_computer_score():
    state = GameState()
    state.computer_score = 3
    assert state.computer_score == 3
    state.add_computer_score()
    assert state.computer_score == 4


def test_scores_are_independent():
    state = GameState()
    state.add_player_score()
    state.add_player_score()
    state.add_computer_score()
    assert (state.player_score, state.computer_score) == (2, 1)