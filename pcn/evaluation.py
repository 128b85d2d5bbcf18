# pcn/evaluation.py
from typing import NamedTuple

import numpy as np

from pcn.errors import DimensionMismatch, MalformedTarget
from pcn.matrix import MatrixScope, add_bias_column, as_matrix


class Evaluation(NamedTuple):
    confusion: np.ndarray   # (n_classes, n_classes), [actual, predicted]
    accuracy: float
    predicted: np.ndarray
    actual: np.ndarray

    @property
    def n_classes(self):
        return self.confusion.shape[0]

    @property
    def n_samples(self):
        return int(self.confusion.sum())


def argmax_rows(values):
    """Column index of each row's maximum; the lowest index wins a tie."""
    # np.argmax returns the first occurrence, same as a strictly-greater scan
    return np.argmax(values, axis=1).astype(int)


def assign_classes(outputs, targets):
    """
    Map raw outputs and targets to integer class labels.
    Single output: class 1 when the score is > 0, target cast to int.
    Several outputs: argmax of each row for both.
    Returns (predicted, actual, n_classes).
    """
    n_out = outputs.shape[1]
    if n_out == 1:
        predicted = (outputs[:, 0] > 0).astype(int)
        actual = targets[:, 0].astype(int)
        bad = (actual < 0) | (actual > 1)
        if bad.any():
            i = int(np.flatnonzero(bad)[0])
            raise MalformedTarget("binary target %r in row %d is not 0 or 1" % (targets[i, 0], i))
        return predicted, actual, 2

    # targets that are not one-hot still get a class from argmax
    return argmax_rows(outputs), argmax_rows(targets), n_out


def tally(actual, predicted, n_classes):
    cm = np.zeros((n_classes, n_classes), dtype=int)
    np.add.at(cm, (actual, predicted), 1)
    return cm


def confusion_matrix(model, inputs, targets):
    """
    Evaluate `model` on a dataset using the raw linear scores (no step).
    """
    inputs = as_matrix(inputs, 'inputs')
    targets = as_matrix(targets, 'targets')
    if inputs.shape[0] != targets.shape[0]:
        raise DimensionMismatch("%d input rows but %d target rows" % (inputs.shape[0], targets.shape[0]))
    if targets.shape[1] != model.n_out:
        raise DimensionMismatch("model has %d outputs, targets have %d columns"
                                % (model.n_out, targets.shape[1]))

    with MatrixScope() as scope:
        biased = add_bias_column(inputs, scope)
        outputs = model.raw_output(biased, out=scope.allocate(inputs.shape[0], model.n_out))
        predicted, actual, n_classes = assign_classes(outputs, targets)

    cm = tally(actual, predicted, n_classes)
    accuracy = float(np.trace(cm)) / inputs.shape[0]
    return Evaluation(cm, accuracy, predicted, actual)
