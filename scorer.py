# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Feed-forward preference network used by drafting agents.

The network is stored as one flat list of parameters. For each layer the
list holds the weight matrix row by row (one row per output neuron) followed
by that layer's biases. Every layer uses a logistic activation.
"""

from __future__ import annotations

import math
import random
from typing import Sequence

DEFAULT_LAYER_SIZES: tuple[int, ...] = (8, 10, 5, 1)
INITIAL_WEIGHT_RANGE = 0.1


def _sigmoid(x: float) -> float:
    # Split by sign so exp() never overflows.
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def parameter_count(layer_sizes: Sequence[int]) -> int:
    return sum(
        (n_in + 1) * n_out
        for n_in, n_out in zip(layer_sizes[:-1], layer_sizes[1:])
    )


class FeedForwardScorer:
    """Maps a fixed-size feature vector to a single preference score."""

    def __init__(self, weights: Sequence[float],
                 layer_sizes: Sequence[int] = DEFAULT_LAYER_SIZES) -> None:
        if len(layer_sizes) < 2 or layer_sizes[-1] != 1:
            raise ValueError(f"layer sizes must end in a single output: {layer_sizes}")
        expected = parameter_count(layer_sizes)
        if len(weights) != expected:
            raise ValueError(
                f"expected {expected} parameters for layers {tuple(layer_sizes)}, "
                f"got {len(weights)}"
            )
        self.layer_sizes = tuple(layer_sizes)
        self.weights = list(weights)

    @classmethod
    def with_random_weights(cls, rng: random.Random,
                            layer_sizes: Sequence[int] = DEFAULT_LAYER_SIZES) -> FeedForwardScorer:
        """Build a scorer with every parameter drawn from [-0.1, 0.1]."""
        n = parameter_count(layer_sizes)
        return cls(
            [rng.uniform(-INITIAL_WEIGHT_RANGE, INITIAL_WEIGHT_RANGE) for _ in range(n)],
            layer_sizes,
        )

    @property
    def input_size(self) -> int:
        return self.layer_sizes[0]

    def evaluate(self, inputs: Sequence[float]) -> float:
        if len(inputs) != self.input_size:
            raise ValueError(f"expected {self.input_size} inputs, got {len(inputs)}")

        activations = list(inputs)
        offset = 0
        for n_in, n_out in zip(self.layer_sizes[:-1], self.layer_sizes[1:]):
            matrix_end = offset + n_in * n_out
            biases = self.weights[matrix_end:matrix_end + n_out]
            outputs = []
            for j in range(n_out):
                row = self.weights[offset + j * n_in:offset + (j + 1) * n_in]
                total = biases[j] + sum(w * a for w, a in zip(row, activations))
                outputs.append(_sigmoid(total))
            activations = outputs
            offset = matrix_end + n_out
        return activations[0]

    def copy(self) -> FeedForwardScorer:
        return FeedForwardScorer(self.weights, self.layer_sizes)

    def mutated(self, mutation_rate: float, rng: random.Random) -> FeedForwardScorer:
        """Return a copy with each parameter nudged by U(-rate, +rate)."""
        return FeedForwardScorer(
            [w + rng.uniform(-mutation_rate, mutation_rate) for w in self.weights],
            self.layer_sizes,
        )
