"""A dense two-dimensional matrix of floats."""

import logging

from jnetwork import random_util

logger = logging.getLogger(__name__)


class Matrix:
    """A ``rows`` x ``columns`` matrix, zero-filled unless built random."""

    def __init__(self, rows, columns):
        if rows < 0 or columns < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows} x {columns}")
        logger.info("Initializing Matrix with size %d x %d", rows, columns)
        self._rows = rows
        self._columns = columns
        self.is_random = False
        random_util.init()
        self._values = self._initial_values()

    def _initial_values(self):
        logger.debug("Initializing matrix values")
        values = []
        for index in range(self._rows):
            if self.is_random:
                logger.debug("Filling row %d with random values", index)
                row = [random_util.generate(1) for _ in range(self._columns)]
            else:
                row = [0.0] * self._columns
            values.append(row)
        logger.info("Matrix initialized successfully")
        return values

    @property
    def rows(self):
        """Number of rows."""
        return self._rows

    @property
    def columns(self):
        """Number of columns."""
        return self._columns

    def _check_index(self, row, column, action):
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            logger.error("Invalid index (%d, %d) for %s: Index out of bounds", row, column, action)
            raise IndexError(
                f"index ({row}, {column}) out of bounds for {self._rows} x {self._columns} matrix"
            )

    def transpose(self):
        """Return a new matrix with rows and columns swapped."""
        logger.info("Transposing matrix of size %d x %d", self._rows, self._columns)
        transposed = Matrix(self._columns, self._rows)
        for i, row in enumerate(self._values):
            for j, value in enumerate(row):
                transposed.set_value(j, i, value)
        logger.info("Matrix transposed successfully")
        return transposed

    def set_value(self, row, column, value):
        """Store ``value`` at ``(row, column)``."""
        self._check_index(row, column, "set_value")
        logger.debug("Setting value at (%d, %d) to %f", row, column, value)
        self._values[row][column] = float(value)

    def get_value(self, row, column):
        """Return the value at ``(row, column)``."""
        self._check_index(row, column, "get_value")
        logger.debug("Getting value at (%d, %d)", row, column)
        return self._values[row][column]

    def __str__(self):
        return "".join(
            "".join(f"{value:g}\t" for value in row) + "\r\n" for row in self._values
        )