# pcn/perceptron.py
import time
from typing import List, NamedTuple

import numpy as np

from pcn.config import INIT_HIGH, INIT_LOW
from pcn.errors import AllocationFailure, DimensionMismatch
from pcn.matrix import MatrixScope, add_bias_column, allocate_matrix, as_matrix, matrix_multiply

_process_rng = None


def process_rng():
    """Generator shared by the whole process, seeded once from the wall clock."""
    global _process_rng
    if _process_rng is None:
        _process_rng = np.random.default_rng(time.time_ns())
    return _process_rng


def make_rng(seed=None):
    """Accepts None (process generator), an int seed or a ready Generator."""
    if seed is None:
        return process_rng()
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(int(seed))


class EpochRecord(NamedTuple):
    epoch: int
    weights: np.ndarray  # snapshot after this epoch's update


class TrainingResult(NamedTuple):
    epochs: List[EpochRecord]
    final_outputs: np.ndarray  # stepped activations after the last epoch

    @property
    def final_weights(self):
        return self.epochs[-1].weights if self.epochs else None


class Perceptron:
    """
    Single-layer perceptron with any number of inputs and outputs.

    weights has shape (n_in + 1, n_out). The last row is the bias, which is
    multiplied by a constant -1 input (see pcn.matrix.add_bias_column), so a
    positive bias weight raises the firing threshold.
    Training is full-batch: every epoch computes the errors of all samples
    with the current weights and applies one update.
    """
    def __init__(self, n_in, n_out=1, n_data=1, rng=None):
        self.n_in = int(n_in)
        self.n_out = int(n_out)
        self.n_data = int(n_data)
        if min(self.n_in, self.n_out, self.n_data) < 1:
            raise AllocationFailure("n_in, n_out and n_data must all be >= 1, got %d, %d, %d"
                                    % (self.n_in, self.n_out, self.n_data))

        self.weights = allocate_matrix(self.n_in + 1, self.n_out)
        self.weights[:] = make_rng(rng).uniform(INIT_LOW, INIT_HIGH, size=self.weights.shape)
        self.history = []

    @classmethod
    def from_dataset(cls, inputs, targets, rng=None):
        inputs = as_matrix(inputs, 'inputs')
        targets = as_matrix(targets, 'targets')
        if inputs.shape[0] != targets.shape[0]:
            raise DimensionMismatch("%d input rows but %d target rows"
                                    % (inputs.shape[0], targets.shape[0]))
        return cls(inputs.shape[1], targets.shape[1], inputs.shape[0], rng=rng)

    def __repr__(self):
        return "Perceptron(n_in=%d, n_out=%d, n_data=%d)" % (self.n_in, self.n_out, self.n_data)

    def raw_output(self, inputs_with_bias, out=None):
        """Linear scores inputs_with_bias x weights, no activation."""
        return matrix_multiply(inputs_with_bias, self.weights, out=out)

    def forward(self, inputs_with_bias, out=None):
        """
        inputs_with_bias: (N, n_in + 1), bias column already appended.
        returns (N, n_out) activations, 1.0 where the score is > 0 else 0.0
        """
        out = self.raw_output(inputs_with_bias, out=out)
        out[:] = out > 0
        return out

    def predict(self, inputs):
        """Stepped activations for raw feature rows (bias column added here)."""
        with MatrixScope() as scope:
            biased = add_bias_column(self._check_inputs(inputs), scope)
            return self.forward(biased)

    def _check_inputs(self, inputs):
        inputs = as_matrix(inputs, 'inputs')
        if inputs.shape[1] != self.n_in:
            raise DimensionMismatch("expected %d input columns, got %d" % (self.n_in, inputs.shape[1]))
        return inputs

    def _check_targets(self, inputs, targets):
        targets = as_matrix(targets, 'targets')
        if targets.shape != (inputs.shape[0], self.n_out):
            raise DimensionMismatch("targets must be %dx%d, got %s"
                                    % (inputs.shape[0], self.n_out, targets.shape))
        return targets

    def train(self, inputs, targets, eta, n_iterations, callback=None):
        """
        Batch delta rule for exactly n_iterations epochs.

        callback(epoch, weights) is called after every update with a snapshot
        of the weights; it only observes, training does not depend on it.
        Returns a TrainingResult with one EpochRecord per epoch and the
        stepped outputs of a final forward pass.
        """
        inputs = self._check_inputs(inputs)
        targets = self._check_targets(inputs, targets)
        eta = float(eta)
        n = inputs.shape[0]

        self.history = []
        with MatrixScope() as scope:
            inputs_with_bias = add_bias_column(inputs, scope)
            activations = scope.allocate(n, self.n_out)
            errors = scope.allocate(n, self.n_out)
            delta = scope.allocate(self.n_in + 1, self.n_out)

            for epoch in range(int(n_iterations)):
                self.forward(inputs_with_bias, out=activations)
                np.subtract(activations, targets, out=errors)

                # delta[r][c] = sum_i x_bias[i][r] * err[i][c]
                matrix_multiply(inputs_with_bias.T, errors, out=delta)
                self.weights -= eta * delta

                snapshot = self.weights.copy()
                self.history.append(EpochRecord(epoch, snapshot))
                if callback is not None:
                    callback(epoch, snapshot)

            self.forward(inputs_with_bias, out=activations)
            final_outputs = activations.copy()

        return TrainingResult(list(self.history), final_outputs)
