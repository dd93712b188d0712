"""Two stacked dense layers on random data: ReLU, then softmax and the loss."""

from __future__ import annotations

import argparse

import numpy as np

from scratchnet.layer import LayerDense, create_classification_target, create_data

_N_INPUTS = 4
_HIDDEN_NEURONS = 3
_OUTPUT_NEURONS = 2
_N_BATCHES = 3


def run(seed: int | None = None) -> str:
    """Run the two-layer example and return the printed report."""
    rng = np.random.default_rng(seed)
    parts: list[str] = []

    first = LayerDense(_N_INPUTS, _HIDDEN_NEURONS, rng)
    inputs = create_data(_N_INPUTS, _N_BATCHES, rng)
    first.forward(inputs)
    parts.append(first.format_output())
    first.activation_relu()
    parts.append(first.format_output())

    second = LayerDense(_HIDDEN_NEURONS, _OUTPUT_NEURONS, rng)
    second.forward(first.output)
    parts.append("\n\n")
    parts.append(second.format_output())
    second.activation_softmax()
    parts.append(second.format_output())

    parts.append("\n\nLoss function: \n")
    targets = create_classification_target(second.n_neurons, _N_BATCHES, rng)
    parts.append(f"Loss: {second.loss(targets):.3f}\n\n")
    return "".join(parts)


def main(argv=None) -> int:
    """Print the report of the two-layer example."""
    parser = argparse.ArgumentParser(
        description="Feed random data through a ReLU layer and a softmax layer."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    print(run(args.seed), end="")
    return 0