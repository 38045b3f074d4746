"""Matrices, neurons, layers and networks for a small feed-forward neural network."""

__version__ = "1.0.0"
__all__ = ["cli", "layer", "matrix", "network", "neuron", "random_util"]