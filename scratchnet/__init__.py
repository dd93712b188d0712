"""A small dense neural network built from first principles: layers, activations, loss, worked examples and a random-search optimizer."""

__version__ = "0.1.0"
__all__ = ["layer", "demos", "dense_demo", "optimization"]