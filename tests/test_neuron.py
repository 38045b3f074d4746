import pytest

from jnetwork.neuron import Neuron


def test_will_activate_correctly():
    neuron = Neuron(0.5)
    assert neuron.activated_value == pytest.approx(1 / 3)


def test_will_derive_correctly():
    neuron = Neuron(0.5)
    assert neuron.derived_value == pytest.approx(2 / 9)


def test_negative_input():
    neuron = Neuron(-1.0)
    assert neuron.activated_value == pytest.approx(-0.5)
    assert neuron.derived_value == pytest.approx(-0.75)


def test_zero_input():
    neuron = Neuron(0.0)
    assert (neuron.value, neuron.activated_value, neuron.derived_value) == (0.0, 0.0, 0.0)


def test_assigning_value_recomputes():
    neuron = Neuron(0.0)
    neuron.value = 1.0
    assert neuron.value == 1.0
    assert neuron.activated_value == pytest.approx(0.5)
    assert neuron.derived_value == pytest.approx(0.25)


def test_activation_is_bounded():
    for value in (-1e9, -3.0, 0.1, 7.0, 1e9):
        assert -1.0 < Neuron(value).activated_value < 1.0


def test_str():
    assert str(Neuron(1.0)) == "Value: 1\r\nActivated value: 0.5\r\nDerived value: 0.25\r\n"