import random

import pytest

from bub.bub import Bub
from evolution.selection import (
    AgeSelector,
    EmptyBreedingPoolError,
    FitnessPolicy,
    LivenessSelector,
    SelectionError,
    ZeroFitnessError,
    make_selector,
    roulette_pick,
    select_elite,
    survival_rate,
)


@pytest.fixture
def make_bubs(fixed_brain):
    def make(ages, alive=None):
        alive = alive or [True] * len(ages)
        return [
            Bub(x=0.0, y=0.0, brain=fixed_brain([0.0] * 4), is_alive=a, age=age)
            for age, a in zip(ages, alive)
        ]

    return make


def test_survival_rate_truncates(make_bubs):
    bubs = make_bubs([1, 1, 1], alive=[True, False, False])
    assert survival_rate(bubs) == 33
    assert survival_rate(make_bubs([1, 1])) == 100
    assert survival_rate([]) == 0


def test_elite_keeps_top_fraction(make_bubs):
    bubs = make_bubs([10, 5, 50, 1, 30])
    elite = select_elite(bubs, 0.4)
    assert [b.age for b in elite] == [50, 30]


def test_elite_keeps_at_least_one(make_bubs):
    elite = select_elite(make_bubs([3, 9, 4]), 0.01)
    assert [b.age for b in elite] == [9]


@pytest.mark.parametrize(
    "fraction, keep",
    [(0.05, 5), (0.07, 7), (0.14, 14), (0.29, 29), (0.57, 57), (0.071, 8)],
)
def test_elite_size_is_exact_for_round_fractions(make_bubs, fraction, keep):
    bubs = make_bubs(list(range(1, 101)))
    elite = select_elite(bubs, fraction)
    assert len(elite) == keep
    assert [b.age for b in elite] == list(range(100, 100 - keep, -1))


def test_elite_rejects_bad_fraction(make_bubs):
    with pytest.raises(ValueError):
        select_elite(make_bubs([1]), 0.0)


def test_age_selector_never_leaves_the_pool(make_bubs):
    bubs = make_bubs([10, 5, 50, 1, 30])
    selector = AgeSelector(bubs, random.Random(0), 0.4)
    allowed = {id(b) for b in bubs if b.age in (50, 30)}
    picks = [selector.pick() for _ in range(500)]
    assert {id(p) for p in picks} <= allowed
    # proportional: the 50-year-old is chosen more often than the 30-year-old
    fifty = sum(1 for p in picks if p.age == 50)
    assert fifty > len(picks) - fifty


def test_roulette_skips_zero_fitness(make_bubs):
    pool = make_bubs([0, 7, 0])
    rng = random.Random(3)
    for _ in range(100):
        assert roulette_pick(pool, rng).age == 7


def test_zero_total_age_is_fatal(make_bubs):
    with pytest.raises(ZeroFitnessError):
        AgeSelector(make_bubs([0, 0, 0, 0]), random.Random(0), 0.5)
    with pytest.raises(EmptyBreedingPoolError):
        roulette_pick(make_bubs([0]), random.Random(0))


def test_liveness_draws_only_survivors(make_bubs):
    bubs = make_bubs([1, 2, 3, 4], alive=[False, True, False, True])
    selector = LivenessSelector(bubs, random.Random(0))
    picks = {selector.pick().age for _ in range(200)}
    assert picks == {2, 4}


def test_liveness_without_survivors_is_fatal(make_bubs):
    bubs = make_bubs([5, 5], alive=[False, False])
    with pytest.raises(EmptyBreedingPoolError):
        make_selector(FitnessPolicy.LIVENESS, bubs, random.Random(0), 0.05)


def test_empty_population_is_fatal():
    with pytest.raises(SelectionError):
        make_selector(FitnessPolicy.AGE, [], random.Random(0), 0.05)
