import random

import pytest

from bub.actions import ActionPolicy
from bub.bub import Bub, new_brain

W, H = 800.0, 600.0


def test_spawn_inside_world(rng):
    for _ in range(50):
        b = Bub.spawn(W, H, rng)
        assert 0.0 <= b.x <= W and 0.0 <= b.y <= H
        assert b.is_alive and b.age == 0


def test_sense_is_normalized(fixed_brain):
    b = Bub(x=400.0, y=150.0, brain=fixed_brain([0.0] * 4), age=1300)
    assert b.sense(W, H, 2600) == [0.5, 0.25, 0.5]


def test_sense_clamps_old_age(fixed_brain):
    b = Bub(x=W, y=0.0, brain=fixed_brain([0.0] * 4), age=5000)
    assert b.sense(W, H, 2600) == [1.0, 0.0, 1.0]


@pytest.mark.parametrize("policy", list(ActionPolicy))
def test_act_clamps_at_edges(policy, fixed_brain):
    corner = Bub(x=0.0, y=0.0, brain=fixed_brain([0.0] * 4))
    for _ in range(5):
        corner.act([1e308, -1e308, 1e308, -1e308], policy, W, H)
        assert corner.x == 0.0 and 0.0 <= corner.y <= H

    far = Bub(x=W, y=H, brain=fixed_brain([0.0] * 4))
    for _ in range(5):
        far.act([-1e308, 1e308, -1e308, 1e308], policy, W, H)
        assert far.x == W and 0.0 <= far.y <= H


@pytest.mark.parametrize("policy", list(ActionPolicy))
def test_random_brains_never_leave_world(policy):
    rng = random.Random(5)
    bubs = [Bub.spawn(60.0, 40.0, rng) for _ in range(20)]
    for _ in range(300):
        for b in bubs:
            b.update(60.0, 40.0, 300, policy)
            assert 0.0 <= b.x <= 60.0
            assert 0.0 <= b.y <= 40.0


def test_update_ages_and_moves(always_left):
    b = Bub(x=100.0, y=100.0, brain=always_left())
    b.update(W, H, 2600, ActionPolicy.ARGMAX)
    assert b.age == 1
    assert (b.x, b.y) == (99.0, 100.0)


def test_dead_bub_is_frozen(always_left):
    b = Bub(x=100.0, y=100.0, brain=always_left())
    b.kill()
    b.update(W, H, 2600, ActionPolicy.THRESHOLD_PAIR)
    assert not b.is_alive
    assert b.age == 0
    assert (b.x, b.y) == (100.0, 100.0)


def test_new_brain_shape(rng):
    brain = new_brain(rng)
    assert (brain.input_size, brain.hidden_size, brain.output_size) == (3, 6, 4)
