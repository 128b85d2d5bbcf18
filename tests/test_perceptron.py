import numpy as np
import pytest

from pcn.errors import AllocationFailure, DimensionMismatch
from pcn.evaluation import confusion_matrix
from pcn.matrix import add_bias_column
from pcn.perceptron import Perceptron, make_rng, process_rng


def with_weights(weights):
    """2-input, 1-output model with fixed starting weights (last = bias)."""
    model = Perceptron(2, 1, 4, rng=0)
    model.weights[:] = np.array(weights, dtype=float).reshape(3, 1)
    return model


@pytest.mark.parametrize("seed", range(5))
def test_initial_weights_within_bounds(seed):
    model = Perceptron(6, 4, 10, rng=seed)
    assert model.weights.shape == (7, 4)
    assert np.all(model.weights >= -0.05)
    assert np.all(model.weights <= 0.05)


def test_initial_weights_unseeded_within_bounds():
    model = Perceptron(3, 2, 5)
    assert np.all(np.abs(model.weights) <= 0.05)


def test_same_seed_same_weights():
    a = Perceptron(2, 3, 4, rng=99)
    b = Perceptron(2, 3, 4, rng=np.random.default_rng(99))
    np.testing.assert_array_equal(a.weights, b.weights)


def test_process_rng_is_created_once():
    assert process_rng() is process_rng()
    assert make_rng(None) is process_rng()


@pytest.mark.parametrize("counts", [(0, 1, 1), (2, 0, 1), (2, 1, 0)])
def test_invalid_counts(counts):
    with pytest.raises(AllocationFailure):
        Perceptron(*counts)


def test_from_dataset_reads_dimensions(and_gate):
    inputs, targets = and_gate
    model = Perceptron.from_dataset(inputs, targets, rng=1)
    assert (model.n_in, model.n_out, model.n_data) == (2, 1, 4)


def test_from_dataset_row_mismatch():
    with pytest.raises(DimensionMismatch):
        Perceptron.from_dataset(np.zeros((4, 2)), np.zeros((3, 1)))


def test_forward_is_strict_step():
    model = with_weights([1.0, -1.0, 0.0])
    x = add_bias_column([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    # scores 1, -1, 0 -> only strictly positive fires
    np.testing.assert_array_equal(model.forward(x), [[1.0], [0.0], [0.0]])


def test_bias_row_is_subtracted():
    model = with_weights([0.0, 0.0, 0.5])
    raw = model.raw_output(add_bias_column([[3.0, 4.0]]))
    np.testing.assert_allclose(raw, [[-0.5]])


def test_forward_dimension_mismatch():
    model = with_weights([0.0, 0.0, 0.0])
    with pytest.raises(DimensionMismatch):
        model.forward(np.ones((4, 2)))


def test_one_epoch_batch_update(and_gate):
    inputs, targets = and_gate
    model = with_weights([0.01, 0.02, 0.04])
    # every score is negative, so only (1,1) is wrong with error -1
    result = model.train(inputs, targets, 0.25, 1)
    np.testing.assert_allclose(result.epochs[0].weights.ravel(), [0.26, 0.27, -0.21], atol=1e-12)
    np.testing.assert_allclose(model.weights.ravel(), [0.26, 0.27, -0.21], atol=1e-12)


def test_update_uses_pre_update_weights(and_gate):
    inputs, targets = and_gate
    model = with_weights([-0.04, -0.04, -0.05])
    # activations 1,1,1,0 -> errors 1,1,1,-1: input weights cancel, bias moves by 0.5
    model.train(inputs, targets, 0.25, 1)
    np.testing.assert_allclose(model.weights.ravel(), [-0.04, -0.04, 0.45], atol=1e-12)


@pytest.mark.parametrize("start", [
    [0.01, 0.02, 0.04],
    [-0.04, -0.04, -0.05],
])
def test_and_gate_converges(and_gate, start):
    inputs, targets = and_gate
    model = with_weights(start)
    result = model.train(inputs, targets, 0.25, 10)
    np.testing.assert_array_equal(result.final_outputs, targets)
    ev = confusion_matrix(model, inputs, targets)
    assert ev.accuracy == 1.0
    np.testing.assert_array_equal(ev.confusion, [[3, 0], [0, 1]])


def test_training_is_deterministic(and_gate):
    inputs, targets = and_gate
    a = Perceptron.from_dataset(inputs, targets, rng=7)
    b = Perceptron.from_dataset(inputs, targets, rng=7)
    a.train(inputs, targets, 0.25, 10)
    b.train(inputs, targets, 0.25, 10)
    np.testing.assert_array_equal(a.weights, b.weights)


def test_callback_sees_every_epoch_in_order(and_gate):
    inputs, targets = and_gate
    model = Perceptron.from_dataset(inputs, targets, rng=3)
    seen = []
    result = model.train(inputs, targets, 0.25, 6, callback=lambda e, w: seen.append((e, w.copy())))
    assert [e for e, _ in seen] == list(range(6))
    assert [r.epoch for r in result.epochs] == list(range(6))
    for (_, w), rec in zip(seen, result.epochs):
        np.testing.assert_array_equal(w, rec.weights)
    np.testing.assert_array_equal(result.final_weights, model.weights)


def test_snapshots_are_copies(and_gate):
    inputs, targets = and_gate
    model = with_weights([0.01, 0.02, 0.04])
    result = model.train(inputs, targets, 0.25, 3)
    assert result.epochs[0].weights is not model.weights
    assert not np.array_equal(result.epochs[0].weights, result.epochs[1].weights)


def test_callback_errors_propagate(and_gate):
    inputs, targets = and_gate
    model = Perceptron.from_dataset(inputs, targets, rng=3)

    def boom(epoch, weights):
        raise RuntimeError("reporter failed")

    with pytest.raises(RuntimeError):
        model.train(inputs, targets, 0.25, 2, callback=boom)


def test_zero_epochs_still_reports_outputs(and_gate):
    inputs, targets = and_gate
    model = Perceptron.from_dataset(inputs, targets, rng=3)
    before = model.weights.copy()
    result = model.train(inputs, targets, 0.25, 0)
    assert result.epochs == []
    assert result.final_weights is None
    np.testing.assert_array_equal(model.weights, before)
    np.testing.assert_array_equal(result.final_outputs, model.predict(inputs))


def test_dataset_is_not_modified(and_gate):
    inputs, targets = and_gate
    inputs_before, targets_before = inputs.copy(), targets.copy()
    Perceptron.from_dataset(inputs, targets, rng=5).train(inputs, targets, 0.25, 10)
    np.testing.assert_array_equal(inputs, inputs_before)
    np.testing.assert_array_equal(targets, targets_before)


def test_train_rejects_bad_shapes(and_gate):
    inputs, targets = and_gate
    model = Perceptron.from_dataset(inputs, targets, rng=5)
    with pytest.raises(DimensionMismatch):
        model.train(inputs[:, :1], targets, 0.25, 1)
    with pytest.raises(DimensionMismatch):
        model.train(inputs, targets[:3], 0.25, 1)
    with pytest.raises(DimensionMismatch):
        model.train(inputs, np.zeros((4, 2)), 0.25, 1)


def test_multi_output_training_shapes():
    inputs = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    targets = np.eye(3)
    model = Perceptron.from_dataset(inputs, targets, rng=11)
    result = model.train(inputs, targets, 0.1, 4)
    assert model.weights.shape == (3, 3)
    assert result.final_outputs.shape == (3, 3)
    assert set(np.unique(result.final_outputs)) <= {0.0, 1.0}
