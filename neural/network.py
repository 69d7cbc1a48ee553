"""
bubs_world module: neural/network.py

Fixed-shape feedforward brain (input -> hidden -> output):
- weights and biases start uniform in [-1, 1]
- tanh on both the hidden and the output layer
- evolved by gaussian weight mutation only (no gradients)
"""

from __future__ import annotations
import copy
import math
import random
from typing import List, Optional, Sequence

import config

Matrix = List[List[float]]


class DimensionMismatchError(ValueError):
    """Input vector length does not match the network's input layer."""


def _tanh(x: float) -> float:
    # stable tanh for typical magnitudes
    return math.tanh(max(-20.0, min(20.0, x)))


def _layer(weights: Matrix, bias: List[float], values: Sequence[float]) -> List[float]:
    out: List[float] = []
    for row, b in zip(weights, bias):
        acc = b
        for w, v in zip(row, values):
            acc += w * v
        out.append(_tanh(acc))
    return out


class FeedforwardNetwork:
    def __init__(
        self,
        input_size: int,
        hidden_size: int,
        output_size: int,
        rng: Optional[random.Random] = None,
    ):
        if min(input_size, hidden_size, output_size) < 1:
            raise ValueError("layer sizes must be positive")
        if rng is None:
            rng = random  # process-wide source

        self.input_size = input_size
        self.hidden_size = hidden_size
        self.output_size = output_size

        self.weights_ih: Matrix = [[rng.uniform(-1.0, 1.0) for _ in range(input_size)] for _ in range(hidden_size)]
        self.bias_h: List[float] = [rng.uniform(-1.0, 1.0) for _ in range(hidden_size)]
        self.weights_ho: Matrix = [[rng.uniform(-1.0, 1.0) for _ in range(hidden_size)] for _ in range(output_size)]
        self.bias_o: List[float] = [rng.uniform(-1.0, 1.0) for _ in range(output_size)]

    @classmethod
    def from_parameters(
        cls,
        weights_ih: Matrix,
        weights_ho: Matrix,
        bias_h: Optional[Sequence[float]] = None,
        bias_o: Optional[Sequence[float]] = None,
    ) -> "FeedforwardNetwork":
        """
        Build a network from explicit parameters.

        weights_ih is hidden_size rows of input_size values, weights_ho is
        output_size rows of hidden_size values. Missing biases are zero.
        """
        hidden_size = len(weights_ih)
        output_size = len(weights_ho)
        if hidden_size == 0 or output_size == 0:
            raise ValueError("weight matrices must not be empty")
        input_size = len(weights_ih[0])

        if any(len(row) != input_size for row in weights_ih):
            raise ValueError("weights_ih rows must all have the same length")
        if any(len(row) != hidden_size for row in weights_ho):
            raise ValueError(f"weights_ho rows must have {hidden_size} values")

        bias_h = [0.0] * hidden_size if bias_h is None else [float(b) for b in bias_h]
        bias_o = [0.0] * output_size if bias_o is None else [float(b) for b in bias_o]
        if len(bias_h) != hidden_size or len(bias_o) != output_size:
            raise ValueError("bias vectors must match their layer sizes")

        net = cls.__new__(cls)
        net.input_size = input_size
        net.hidden_size = hidden_size
        net.output_size = output_size
        net.weights_ih = [[float(w) for w in row] for row in weights_ih]
        net.weights_ho = [[float(w) for w in row] for row in weights_ho]
        net.bias_h = bias_h
        net.bias_o = bias_o
        return net

    def predict(self, inputs: Sequence[float]) -> List[float]:
        if len(inputs) != self.input_size:
            raise DimensionMismatchError(
                f"expected {self.input_size} inputs, got {len(inputs)}"
            )
        hidden = _layer(self.weights_ih, self.bias_h, inputs)
        return _layer(self.weights_ho, self.bias_o, hidden)

    def mutate(self, rng: random.Random, rate: float, sigma: float = config.MUT_SIGMA) -> None:
        """
        Mutate in-place: with probability ``rate`` per weight and per bias,
        add gaussian noise N(0, sigma).
        """
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"mutation rate must be in [0, 1], got {rate}")

        for matrix in (self.weights_ih, self.weights_ho):
            for row in matrix:
                for i in range(len(row)):
                    if rng.random() < rate:
                        row[i] += rng.gauss(0.0, sigma)

        for vec in (self.bias_h, self.bias_o):
            for i in range(len(vec)):
                if rng.random() < rate:
                    vec[i] += rng.gauss(0.0, sigma)

    def clone(self) -> "FeedforwardNetwork":
        return copy.deepcopy(self)

    def parameters(self) -> List[float]:
        """Flat copy of every weight and bias, in a fixed order."""
        flat: List[float] = []
        for row in self.weights_ih:
            flat.extend(row)
        flat.extend(self.bias_h)
        for row in self.weights_ho:
            flat.extend(row)
        flat.extend(self.bias_o)
        return flat

    def parameter_count(self) -> int:
        return (self.input_size + 1) * self.hidden_size + (self.hidden_size + 1) * self.output_size
