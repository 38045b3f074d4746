"""Command that demonstrates matrix transposition."""

import argparse

from jnetwork.matrix import Matrix


def main(argv=None):
    """Print a 2 x 3 example matrix and its transpose."""
    parser = argparse.ArgumentParser(
        prog="jnetwork", description="Print an example matrix and its transpose."
    )
    parser.parse_args(argv)

    original = Matrix(2, 3)
    for index, value in enumerate(range(1, 7)):
        original.set_value(*divmod(index, 3), value)

    print("Original matrix")
    print(original)

    print("Transposed matrix")
    print(original.transpose())
    return 0