"""A single neuron with a fast-sigmoid activation."""


class Neuron:
    """Holds a raw value together with its activation and derivative."""

    def __init__(self, value):
        self.value = value

    @property
    def value(self):
        """The raw input value; assigning it recomputes the other two."""
        return self._value

    @value.setter
    def value(self, value):
        self._value = float(value)
        self.activate()
        self.derive()

    def activate(self):
        """Compute ``x / (1 + |x|)`` from the raw value."""
        self.activated_value = self._value / (1 + abs(self._value))

    def derive(self):
        """Compute ``a * (1 - a)`` from the activated value."""
        self.derived_value = self.activated_value * (1 - self.activated_value)

    def __str__(self):
        return (
            f"Value: {self._value:g}\r\n"
            f"Activated value: {self.activated_value:g}\r\n"
            f"Derived value: {self.derived_value:g}\r\n"
        )