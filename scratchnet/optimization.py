"""Random-search training of a small three-layer classifier."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from scratchnet.layer import LayerDense, create_data, function_to_approximate

_N_INPUTS = 4
_N_BATCHES = 3
_INITIAL_LOWEST_LOSS = 1e7
_BASE_STEP = 0.2
_STEP_DECAY = 0.999
DEFAULT_EPOCHS = 1000


@dataclass(frozen=True)
class EpochResult:
    """An epoch whose loss beat every earlier one."""

    epoch: int
    epochs: int
    loss: float

    def __str__(self) -> str:
        return f"Epoch: {self.epoch}/{self.epochs}  Loss: {self.loss:.3f}"


def optimize(epochs: int = DEFAULT_EPOCHS, seed: int | None = None) -> Iterator[EpochResult]:
    """Nudge all parameters at random each epoch; keep changes that lower the loss.

    Yields one result for every epoch that improved on the best loss so far.
    """
    if epochs < 0:
        raise ValueError("the number of epochs cannot be negative")
    rng = np.random.default_rng(seed)
    input_layer = LayerDense(_N_INPUTS, 3, rng)
    hidden_layer = LayerDense(3, 6, rng)
    output_layer = LayerDense(6, 2, rng)
    layers = (input_layer, hidden_layer, output_layer)

    best = [layer.snapshot() for layer in layers]
    lowest_loss = _INITIAL_LOWEST_LOSS

    for epoch in range(epochs):
        step_size = _BASE_STEP * _STEP_DECAY**epoch
        # Weight deltas for all layers first, then bias deltas.
        deltas = step_size * rng.uniform(-1.0, 1.0, 2 * len(layers))
        weight_deltas, bias_deltas = deltas[: len(layers)], deltas[len(layers):]
        for layer, weight_delta, bias_delta in zip(layers, weight_deltas, bias_deltas):
            layer.shift(weight_delta, bias_delta)

        inputs = create_data(_N_INPUTS, _N_BATCHES, rng)
        targets = function_to_approximate(inputs)

        input_layer.forward(inputs)
        input_layer.activation_relu()
        hidden_layer.forward(input_layer.output)
        hidden_layer.activation_softmax()
        output_layer.forward(hidden_layer.output)
        loss = output_layer.loss(targets)

        if abs(loss) < abs(lowest_loss):
            best = [layer.snapshot() for layer in layers]
            lowest_loss = loss
            yield EpochResult(epoch, epochs, loss)
        else:
            for layer, params in zip(layers, best):
                layer.restore(params)


def main(argv=None) -> int:
    """Train the classifier and print every improving epoch."""
    parser = argparse.ArgumentParser(
        description="Train a small classifier by random search over its parameters."
    )
    parser.add_argument("--epochs", type=int, default=DEFAULT_EPOCHS, help="number of epochs")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    if args.epochs < 0:
        parser.error("--epochs cannot be negative")
    for result in optimize(args.epochs, args.seed):
        print(result)
    return 0