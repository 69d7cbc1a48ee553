import random

import pytest

import config
from neural.network import FeedforwardNetwork


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_brain():
    """Factory for brains that ignore their inputs and always emit ``outputs``."""

    def make(outputs):
        return FeedforwardNetwork.from_parameters(
            weights_ih=[[0.0] * config.NN_INPUTS for _ in range(config.NN_HIDDEN)],
            weights_ho=[[0.0] * config.NN_HIDDEN for _ in range(len(outputs))],
            bias_o=outputs,
        )

    return make


@pytest.fixture
def always_left(fixed_brain):
    # left wins under both action policies
    return lambda: fixed_brain([1.0, 0.0, 0.0, 0.0])
