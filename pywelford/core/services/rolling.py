from typing import List, Optional, Sequence

import numpy as np


class InvalidWindowError(ValueError):
    """Window size outside [2, len(data)]. Raised for caller bugs, not data conditions."""


def rolling_mean(data: Sequence[float], window_size: int) -> List[Optional[float]]:
    """
    Mean over every full window of `window_size` consecutive values.

    The output has one entry per input position. The first
    `window_size - 1` entries are None since no full window ends there.

    The window sum is slid in O(1) per step by subtracting the value that
    leaves and adding the one that enters, so it may drift from a fresh sum
    by rounding error on long inputs.
    """
    values = np.asarray(data, dtype=np.float64)
    n = len(values)

    if window_size < 2:
        raise InvalidWindowError(f"window_size must be at least 2, got {window_size}")
    if window_size > n:
        raise InvalidWindowError(
            f"window_size {window_size} exceeds the number of values ({n})"
        )

    result: List[Optional[float]] = [None] * (window_size - 1)

    total = np.float64(0.0)
    for value in values[:window_size]:
        total += value
    result.append(float(total / window_size))

    for i in range(window_size, n):
        total = total - values[i - window_size] + values[i]
        result.append(float(total / window_size))

    return result
