import pytest

from rpsgame.choices import Choice, Decision


@pytest.mark.parametrize(
    "choice, text",
    [(Choice.ROCK, "Rock"), (Choice.PAPER, "Paper"), (Choice.SCISSOR, "Scissor")],
)
def test_str(choice, text):
    assert str(choice) == text


@pytest.mark.parametrize(
    "number, choice",
    [(0, Choice.ROCK), (1, Choice.PAPER), (2, Choice.SCISSOR)],
)
def test_numbers_match_menu(number, choice):
    assert Choice(number) is choice


@pytest.mark.parametrize(
    "choice, beaten",
    [
        (Choice.ROCK, Choice.SCISSOR),
        (Choice.PAPER, Choice.ROCK),
        (Choice.SCISSOR, Choice.PAPER),
    ],
)
def test_beats(choice, beaten):
    assert choice.beats is beaten


def test_each_choice_beats_a_different_one():
    choices = [Choice(number) for number in range(3)]
    assert {c.beats for c in choices} == set(choices)
    assert all(c.beats is not c for c in choices)


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        Choice(3)


@pytest.mark.parametrize("decision", [Decision.WIN, Decision.LOSE, Decision.DRAW])
def test_decision_round_trips_through_value(decision):
    assert Decision(decision.value) is decision


def test_decisions_are_distinct():
    values = {Decision(d.value) for d in (Decision.WIN, Decision.LOSE, Decision.DRAW)}
    assert len(values) == 3