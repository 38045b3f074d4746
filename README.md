# jnetwork

Building blocks for a small feed-forward neural network: a matrix, a neuron
with a fast-sigmoid activation, a layer of neurons and a network that joins
layers with weight matrices. It is plain Python and needs no third-party
packages.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
jnetwork
```

This builds a 2 x 3 matrix that holds the values 1 to 6 and prints it under
the heading `Original matrix`. It then prints the transpose under the heading
`Transposed matrix`. The command takes no options apart from `-h`/`--help`.

## Library

### Matrix (`jnetwork.matrix`)

```python
from jnetwork.matrix import Matrix

m = Matrix(2, 3)         # 2 rows, 3 columns, all 0.0
m.set_value(0, 0, 1)
m.set_value(0, 1, 2)
m.set_value(1, 2, 6)

t = m.transpose()        # a new 3 x 2 matrix
print(t.get_value(2, 1)) # 6.0
print(m.rows, m.columns) # 2 3
print(m)                 # tab-separated rows, each ending in "\r\n"
```

- `Matrix(rows, columns)` raises `ValueError` if either dimension is
  negative. A new matrix is filled with zeros.
- `set_value` stores its value as a float. `set_value` and `get_value` raise
  `IndexError` for an index outside the matrix.
- `str(matrix)` writes each value in `%g` form followed by a tab, and ends
  each row with `\r\n`.
- `is_random` is a plain attribute, `False` on a new matrix. The fill happens
  while the matrix is built, so a matrix built by the constructor is always
  zero-filled. Setting `is_random` later does not refill it.
- The module logs what it does through the standard `logging` module, under
  the logger name `jnetwork.matrix`.

### Neuron (`jnetwork.neuron`)

```python
from jnetwork.neuron import Neuron

n = Neuron(0.5)
print(n.activated_value)  # 0.5 / (1 + 0.5)
n.value = -2              # activated and derived values are computed again
print(n)
```

A neuron keeps three values:

- `value`, the raw value, stored as a float;
- `activated_value`, the fast sigmoid `x / (1 + |x|)`;
- `derived_value`, `a * (1 - a)`, where `a` is the activated value.

Each time `value` is assigned, `activate()` and `derive()` run again.
`str(neuron)` gives the three values on separate lines.

### Layer (`jnetwork.layer`)

```python
from jnetwork.layer import Layer

layer = Layer(4)
print(len(layer))                  # 4
print([n.value for n in layer])    # [0.0, 0.0, 0.0, 0.0]
```

A layer holds `size` neurons in `layer.neurons`, each starting at 0.0.
A negative size raises `ValueError`.

### NeuralNetwork (`jnetwork.network`)

```python
from jnetwork.network import NeuralNetwork

net = NeuralNetwork([3, 2, 1])
print(len(net.layers))    # 3
print(len(net.matrices))  # 2: a 3 x 2 matrix and a 2 x 1 matrix
print(net)
```

A network is built from a topology, a list of layer sizes, which must not be
empty (`ValueError` otherwise). It keeps:

- `topology`, a list copy of the sizes;
- `layers`, one `Layer` per entry. Each layer is sized by the number of
  entries in the topology, not by the entry itself;
- `matrices`, one weight matrix for each pair of adjacent layers, sized
  `topology[i] x topology[i + 1]`, with `is_random` set to `True`.

`str(net)` lists the topology and then each weight matrix with its size.

### Random numbers (`jnetwork.random_util`)

- `init()` reseeds the shared Mersenne Twister generator from the operating
  system's entropy source.
- `generate(max_value)` returns a whole number between 0 and `max_value`
  inclusive, as a float. `max_value` must lie between 0 and 2**32 - 1;
  otherwise it raises `ValueError`.

## What it does not do

The package only builds the parts of a network. It has no forward pass, no
training, no back-propagation, no loss function and no way to save or load a
network. The weight matrices of a `NeuralNetwork` hold zeros.