import math

import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up (not to even)."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """
    Format a number the way it is written to the CSV file and the corner labels.

    Integral values drop the decimal part (10.0 -> "10"), anything else uses
    the shortest plain decimal that round-trips (0.1 -> "0.1",
    5e-05 -> "0.00005"). Exponent notation is never produced.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return np.format_float_positional(value, trim="-")
