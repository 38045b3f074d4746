"""A feed-forward network built from a layer topology."""

from jnetwork.layer import Layer
from jnetwork.matrix import Matrix


class NeuralNetwork:
    """Layers plus one weight matrix between each pair of adjacent layers."""

    def __init__(self, topology):
        self.topology = list(topology)
        if not self.topology:
            raise ValueError("topology must contain at least one layer")
        # Every layer is sized by the number of layers in the topology.
        self.layers = [Layer(len(self.topology)) for _ in self.topology]
        self.matrices = []
        for inputs, outputs in zip(self.topology, self.topology[1:]):
            matrix = Matrix(inputs, outputs)
            matrix.is_random = True
            self.matrices.append(matrix)

    def __str__(self):
        parts = ["Topology: " + " ".join(str(size) for size in self.topology) + "\r\n"]
        for index, matrix in enumerate(self.matrices):
            parts.append(f"Weights {index} ({matrix.rows} x {matrix.columns}):\r\n")
            parts.append(str(matrix))
        return "".join(parts)