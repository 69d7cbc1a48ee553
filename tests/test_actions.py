import pytest

from bub.actions import ActionPolicy, Direction, MalformedOutputError, decide_move


def test_threshold_pair_votes():
    assert decide_move(ActionPolicy.THRESHOLD_PAIR, [1.0, 0.0, 1.0, 0.0]) == (-1, -1)
    assert decide_move(ActionPolicy.THRESHOLD_PAIR, [0.0, 1.0, 0.0, 1.0]) == (1, 1)


def test_threshold_pair_ties_go_positive():
    assert decide_move(ActionPolicy.THRESHOLD_PAIR, [0.2, 0.2, -0.4, -0.4]) == (1, 1)


def test_argmax_picks_strongest_direction():
    assert decide_move(ActionPolicy.ARGMAX, [0.0, 0.0, 0.0, 2.0]) == Direction.DOWN.value
    assert decide_move(ActionPolicy.ARGMAX, [0.0, 0.9, 0.1, 0.0]) == (1, 0)
    assert decide_move(ActionPolicy.ARGMAX, [-1.0, -1.0, 0.5, 0.0]) == (0, -1)


def test_argmax_ties_take_first():
    assert decide_move(ActionPolicy.ARGMAX, [1.0, 1.0, 0.0, 0.0]) == (-1, 0)
    assert decide_move(ActionPolicy.ARGMAX, [0.0, 0.3, 0.3, 0.3]) == (1, 0)


@pytest.mark.parametrize("policy", list(ActionPolicy))
def test_malformed_outputs_are_rejected(policy):
    with pytest.raises(MalformedOutputError):
        decide_move(policy, [1.0, 0.0, 0.0])
    with pytest.raises(MalformedOutputError):
        decide_move(policy, [float("nan"), 0.0, 0.0, 0.0])


def test_policies_load_from_config_names():
    assert ActionPolicy("threshold_pair") is ActionPolicy.THRESHOLD_PAIR
    assert ActionPolicy("argmax") is ActionPolicy.ARGMAX
