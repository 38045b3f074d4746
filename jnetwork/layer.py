"""A layer of neurons."""

from jnetwork.neuron import Neuron


class Layer:
    """A fixed number of neurons, each starting at zero."""

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"layer size must be non-negative, got {size}")
        self.neurons = [Neuron(0.0) for _ in range(size)]

    def __len__(self):
        return len(self.neurons)

    def __iter__(self):
        return iter(self.neurons)