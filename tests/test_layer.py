import pytest

from jnetwork.layer import Layer


def test_layer_has_requested_size():
    assert len(Layer(4)) == 4


def test_neurons_start_at_zero():
    layer = Layer(3)
    assert [n.value for n in layer] == [0.0, 0.0, 0.0]
    assert all(n.activated_value == 0.0 and n.derived_value == 0.0 for n in layer)


def test_neurons_are_distinct_objects():
    layer = Layer(2)
    layer.neurons[0].value = 1.0
    assert layer.neurons[1].value == 0.0


def test_empty_layer():
    assert list(Layer(0)) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Layer(-1)