"""Dense layers, activations, synthetic data and the classification loss."""

from __future__ import annotations

import math

import numpy as np

_LOSS_EPSILON = 1e-6
_DIVISION_GUARD = 1e-7


def _generator(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


class LayerDense:
    """A fully connected layer: each neuron computes weights . inputs + bias."""

    def __init__(self, n_inputs: int, n_neurons: int, rng: np.random.Generator | None = None):
        if n_inputs <= 0 or n_neurons <= 0:
            raise ValueError("a layer needs at least one input and one neuron")
        rng = _generator(rng)
        self.n_inputs = n_inputs
        self.n_neurons = n_neurons
        # Scale suited to ReLU activations.
        std = math.sqrt(2.0 / n_inputs)
        self.weights = (std * rng.uniform(-1.0, 1.0, (n_neurons, n_inputs))).astype(np.float32)
        self.biases = (std * rng.uniform(-1.0, 1.0, n_neurons)).astype(np.float32)
        self.output: np.ndarray | None = None

    def _require_output(self) -> np.ndarray:
        if self.output is None:
            raise RuntimeError("the layer has no output yet; call forward() first")
        return self.output

    def forward(self, inputs) -> np.ndarray:
        """Compute the output for a batch of inputs, one row per sample."""
        batch = np.atleast_2d(np.asarray(inputs, dtype=np.float32))
        if batch.ndim != 2 or batch.shape[1] != self.n_inputs:
            raise ValueError(
                f"expected inputs with {self.n_inputs} columns, got shape {batch.shape}"
            )
        self.output = batch @ self.weights.T + self.biases
        return self.output

    def activation_relu(self) -> np.ndarray:
        """Replace every negative output with zero."""
        self.output = np.maximum(self._require_output(), 0.0).astype(np.float32)
        return self.output

    def activation_softmax(self) -> np.ndarray:
        """Turn each batch row into a probability distribution."""
        output = self._require_output()
        exps = np.exp(output - output.max(axis=1, keepdims=True))
        self.output = (exps / exps.sum(axis=1, keepdims=True)).astype(np.float32)
        return self.output

    def format_output(self) -> str:
        """Render the output, batch by batch and neuron by neuron."""
        output = self._require_output()
        parts = ["\n\n"]
        for batch_number, row in enumerate(output, start=1):
            parts.append(f"\nBatch number {batch_number}:\n")
            parts.extend(
                f"Neuron number {neuron}: {value:.3f}\n"
                for neuron, value in enumerate(row, start=1)
            )
        return "".join(parts)

    def snapshot(self) -> tuple[np.ndarray, np.ndarray]:
        """Return copies of the current weights and biases."""
        return self.weights.copy(), self.biases.copy()

    def restore(self, params: tuple[np.ndarray, np.ndarray]) -> None:
        """Reset weights and biases from a snapshot."""
        weights, biases = params
        weights = np.asarray(weights, dtype=np.float32)
        biases = np.asarray(biases, dtype=np.float32)
        if weights.shape != self.weights.shape or biases.shape != self.biases.shape:
            raise ValueError("snapshot does not match the layer's shape")
        self.weights = weights.copy()
        self.biases = biases.copy()

    def shift(self, weight_delta: float, bias_delta: float) -> None:
        """Add one value to every weight and another to every bias."""
        self.weights += np.float32(weight_delta)
        self.biases += np.float32(bias_delta)

    def loss(self, targets) -> float:
        """Cross-entropy loss of the current output against the target classes."""
        return calculate_loss(self._require_output(), targets)


def create_data(n_inputs: int, n_batches: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """Random inputs between 0.1 and 0.9, one row per batch."""
    rng = _generator(rng)
    return (0.1 + rng.uniform(0.0, 1.0, (n_batches, n_inputs)) * 0.8).astype(np.float32)


def create_classification_target(
    n_neurons: int, n_batches: int, rng: np.random.Generator | None = None
) -> np.ndarray:
    """Random class indices in range(n_neurons), one per batch."""
    if n_neurons <= 0:
        raise ValueError("at least one class is needed")
    rng = _generator(rng)
    return rng.integers(0, n_neurons, n_batches)


def function_to_approximate(inputs) -> np.ndarray:
    """Class 0 where (x0 + x1) + x2 / x3 exceeds 0.5, class 1 elsewhere."""
    batch = np.atleast_2d(np.asarray(inputs, dtype=np.float32))
    if batch.ndim != 2 or batch.shape[1] < 4:
        raise ValueError("each input row needs at least four values")
    values = (batch[:, 0] + batch[:, 1]) + batch[:, 2] / (batch[:, 3] + _DIVISION_GUARD)
    return np.where(values > 0.5, 0, 1)


def calculate_loss(output, targets) -> float:
    """Mean negative log of the probability given to each target class."""
    probs = np.atleast_2d(np.asarray(output, dtype=np.float32))
    classes = np.asarray(targets, dtype=int).ravel()
    if classes.shape[0] != probs.shape[0]:
        raise ValueError("one target is needed per batch")
    if classes.size and (classes.min() < 0 or classes.max() >= probs.shape[1]):
        raise ValueError("target class out of range")
    picked = np.maximum(probs[np.arange(len(classes)), classes], _LOSS_EPSILON)
    return float(np.mean(-np.log(picked)))