# scratchnet

scratchnet is a small neural network written from first principles. It covers
the following:

- single neurons and whole layers
- batches of inputs
- ReLU and softmax activations
- categorical cross-entropy loss
- a random-search optimizer that trains a three-layer network on a synthetic
  classification task

numpy is its only dependency.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command-line tools

### scratchnet-demos

Prints the results of the introductory examples:

```
scratchnet-demos            # all of them
scratchnet-demos neuron     # one neuron with three inputs
scratchnet-demos layer      # three neurons, each computed on its own
scratchnet-demos efficient  # the same layer, one dot product per neuron
scratchnet-demos dot        # the same layer as one matrix-vector product
scratchnet-demos batches    # the layer applied to three batches of inputs
```

### scratchnet-dense

Builds two layers: a 4→3 dense layer with ReLU and a 3→2 dense layer with
softmax. It feeds them three batches of random data and prints each layer's
outputs before and after activation. It then prints the loss against random
target classes.

```
scratchnet-dense
scratchnet-dense --seed 42
```

### scratchnet-optimize

Trains a 4→3→6→2 network by random search. The default is 1000 epochs.

In each epoch, every layer's weights are shifted by one random value and its
biases by another. The step size is `0.2 * 0.999**epoch`. The network sees
three fresh random samples each epoch. A change is kept only when the loss
beats the best loss so far; otherwise the best parameters are put back. Every
improving epoch is printed as `Epoch: <n>/<epochs>  Loss: <loss>`.

```
scratchnet-optimize
scratchnet-optimize --epochs 500 --seed 7
```

## Library use

```python
import numpy as np
from scratchnet.layer import LayerDense, create_data, create_classification_target

rng = np.random.default_rng(0)

layer1 = LayerDense(4, 3, rng)
layer2 = LayerDense(3, 2, rng)

inputs = create_data(4, 3, rng)   # 3 rows of 4 inputs, each between 0.1 and 0.9
layer1.forward(inputs)
layer1.activation_relu()
layer2.forward(layer1.output)
layer2.activation_softmax()

print(layer2.format_output())

targets = create_classification_target(layer2.n_neurons, 3, rng)
print("Loss:", layer2.loss(targets))
```

### `scratchnet.layer`

- `LayerDense(n_inputs, n_neurons, rng=None)` creates a layer. Its weights and
  biases are drawn uniformly from `[-1, 1)` and scaled by `sqrt(2 / n_inputs)`.
  The values are stored as `float32`.
- `forward(inputs)` computes `inputs · weightsᵀ + biases`, with one row per
  sample, and stores the result in `output`.
- `activation_relu()` sets negative outputs to zero.
- `activation_softmax()` turns each row into probabilities. It subtracts the
  row's maximum before taking exponentials.
- `format_output()` returns the output as text, batch by batch and neuron by
  neuron.
- `snapshot()` returns copies of the weights and biases, and
  `restore(params)` puts a snapshot back. `restore` raises `ValueError` when
  the shapes do not match.
- `shift(weight_delta, bias_delta)` adds one constant to every weight and
  another to every bias.
- `loss(targets)` computes the mean cross-entropy against target class
  indices.

Calling an activation, `format_output()` or `loss()` before `forward()`
raises `RuntimeError`.

The module also has these functions:

- `create_data(n_inputs, n_batches, rng=None)` returns random inputs in
  `[0.1, 0.9)`.
- `create_classification_target(n_neurons, n_batches, rng=None)` returns
  random class indices.
- `function_to_approximate(inputs)` returns class 0 for each row where
  `(x0 + x1) + x2 / (x3 + 1e-7)` exceeds 0.5, and class 1 otherwise.
- `calculate_loss(output, targets)` returns the mean of `-log(p)`, where `p`
  is the probability given to each target class. Probabilities below `1e-6`
  are clamped to `1e-6` first.

### `scratchnet.demos`

This module has `first_neural_net()`, `first_layer()`,
`first_efficient_layer()`, `first_dot_product()` and `layer_with_batches()`.
They return the values that `scratchnet-demos` prints.

### `scratchnet.dense_demo`

`run(seed=None)` returns the full text report of the two-layer example.

### `scratchnet.optimization`

`optimize(epochs=1000, seed=None)` is a generator. It yields an `EpochResult`
(`epoch`, `epochs`, `loss`) for each epoch that improved the loss. A negative
epoch count raises `ValueError`.

## What it does not do

scratchnet has no gradient-based training or backpropagation; the only
training method is the random search described above. It cannot save or load
trained parameters to or from files. Parameters live only in memory, through
`snapshot()` and `restore()`.