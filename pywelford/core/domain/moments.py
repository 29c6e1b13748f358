from typing import NamedTuple

import numpy as np


class Moments(NamedTuple):
    """Finalized moments of a stream. Unpacks as (mean, variance, sample_variance)."""

    mean: np.floating
    population_variance: np.floating
    sample_variance: np.floating
