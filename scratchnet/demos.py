"""Small worked examples of single neurons and layers."""

from __future__ import annotations

import argparse

import numpy as np

SAMPLE_INPUTS = (1.0, 2.0, 3.0, 2.5)
SAMPLE_WEIGHTS = (
    (0.2, 0.8, -0.5, 1.0),
    (0.5, -0.91, 0.26, -0.5),
    (-0.26, -0.27, 0.17, 0.87),
)
SAMPLE_BIASES = (2.0, 3.0, 0.5)
BATCH_INPUTS = (
    (1.0, 2.0, 3.0, 2.5),
    (2.0, 5.0, -1.0, 2.0),
    (-1.5, 2.7, 3.3, -0.8),
)


def first_neural_net() -> float:
    """Output of a single neuron with three inputs."""
    inputs = (1.2, 5.1, 2.1)
    weights = (3.1, 2.1, 8.7)
    bias = 3.0
    return bias + sum(x * w for x, w in zip(inputs, weights))


def first_layer() -> list[float]:
    """Three neurons, each computed on its own."""
    return [
        bias + sum(x * w for x, w in zip(SAMPLE_INPUTS, weights))
        for weights, bias in zip(SAMPLE_WEIGHTS, SAMPLE_BIASES)
    ]


def first_efficient_layer() -> list[float]:
    """The same layer, with one dot product per neuron."""
    inputs = np.array(SAMPLE_INPUTS, dtype=np.float32)
    return [
        float(np.dot(inputs, np.array(weights, dtype=np.float32)) + bias)
        for weights, bias in zip(SAMPLE_WEIGHTS, SAMPLE_BIASES)
    ]


def first_dot_product() -> list[float]:
    """The same layer as a single matrix-vector product."""
    weights = np.array(SAMPLE_WEIGHTS, dtype=np.float32)
    inputs = np.array(SAMPLE_INPUTS, dtype=np.float32)
    biases = np.array(SAMPLE_BIASES, dtype=np.float32)
    return (weights @ inputs + biases).tolist()


def layer_with_batches() -> np.ndarray:
    """The layer applied to three batches at once; one row per batch."""
    inputs = np.array(BATCH_INPUTS, dtype=np.float32)
    weights = np.array(SAMPLE_WEIGHTS, dtype=np.float32)
    biases = np.array(SAMPLE_BIASES, dtype=np.float32)
    return inputs @ weights.T + biases


def _neuron_lines(values) -> list[str]:
    return [f"Neuron number {n}: {v:.3f}" for n, v in enumerate(values, start=1)]


def _render(name: str) -> list[str]:
    if name == "neuron":
        return [f"First output: {first_neural_net():.1f}"]
    if name == "layer":
        ordinals = ("First", "Second", "Third")
        return [f"{o} neuron: {v:.3f}" for o, v in zip(ordinals, first_layer())]
    if name == "efficient":
        return _neuron_lines(first_efficient_layer())
    if name == "dot":
        return _neuron_lines(first_dot_product())
    lines = []
    for batch_number, row in enumerate(layer_with_batches(), start=1):
        lines.append(f"Batch number {batch_number}:")
        lines.extend(_neuron_lines(row))
    return lines


_DEMOS = ("neuron", "layer", "efficient", "dot", "batches")


def main(argv=None) -> int:
    """Print the results of one demo, or of all of them."""
    parser = argparse.ArgumentParser(description="Run the worked neuron and layer examples.")
    parser.add_argument("demo", nargs="?", choices=_DEMOS, help="demo to run (default: all)")
    args = parser.parse_args(argv)
    for name in (args.demo,) if args.demo else _DEMOS:
        print("\n".join(_render(name)))
    return 0