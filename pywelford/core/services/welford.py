"""
Welford's online algorithm for running mean and variance.

The aggregate never stores observations: it keeps the count, the running
mean and M2, the sum of squared deviations from the running mean. All
three are held in the aggregator's own float width, so a 32-bit aggregate
never silently widens and a 64-bit aggregate never silently narrows.
"""
from __future__ import annotations
from typing import Generic, Iterable, Optional, Type, TypeVar

import numpy as np

from pywelford.core.domain.moments import Moments
from pywelford.core.domain.precision import Precision
from pywelford.core.ports.aggregator import MomentAggregator

F = TypeVar("F", np.float32, np.float64)


class PrecisionMismatchError(TypeError):
    """A numpy value of one float width was fed to an aggregate of another."""


class WelfordAggregator(MomentAggregator, Generic[F]):
    dtype: Optional[Type[F]] = None

    def __init__(self):
        if self.dtype is None:
            raise TypeError(
                "WelfordAggregator has no width, use WelfordAggregator32 or WelfordAggregator64"
            )
        self._count: F = self.dtype(0)
        self._mean: F = self.dtype(0)
        self._m2: F = self.dtype(0)

    @property
    def count(self) -> F:
        return self._count

    @property
    def mean(self) -> F:
        return self._mean

    @property
    def m2(self) -> F:
        return self._m2

    def _coerce(self, value) -> F:
        if isinstance(value, np.floating) and not isinstance(value, self.dtype):
            raise PrecisionMismatchError(
                f"Cannot fold {type(value).__name__} into a {self.dtype.__name__} aggregate"
            )
        return self.dtype(value)

    def update(self, value) -> WelfordAggregator[F]:
        """
        Fold one observation into the aggregate.

        NaN and infinities are not rejected, they propagate through the
        mean and M2 like any other IEEE value.
        """
        x = self._coerce(value)

        with np.errstate(all="ignore"):
            self._count += self.dtype(1)
            delta = x - self._mean
            self._mean += delta / self._count
            # deviation from the updated mean
            delta2 = x - self._mean
            self._m2 += delta * delta2

        return self

    def finalize(self) -> Optional[Moments]:
        if self._count < 2:
            return None

        with np.errstate(all="ignore"):
            variance = self._m2 / self._count
            sample_variance = self._m2 / (self._count - self.dtype(1))

        return Moments(self._mean, variance, sample_variance)

    def __len__(self):
        return int(self._count)

    def __repr__(self):
        return (
            f"<{type(self).__name__} count={self._count} "
            f"mean={self._mean} m2={self._m2}>"
        )


class WelfordAggregator32(WelfordAggregator[np.float32]):
    dtype = np.float32


class WelfordAggregator64(WelfordAggregator[np.float64]):
    dtype = np.float64


def new_aggregator(precision: Precision = Precision.F64) -> WelfordAggregator:
    """Build an empty aggregate of the requested width."""
    mapping = {
        Precision.F32: WelfordAggregator32,
        Precision.F64: WelfordAggregator64,
    }
    return mapping[precision]()


def mean_and_variance(
    values: Iterable, precision: Precision = Precision.F64
) -> Optional[Moments]:
    """
    Fold `values` left to right into a fresh aggregate and finalize it.

    Returns None for fewer than two values.
    """
    aggregator = new_aggregator(precision)
    for value in values:
        aggregator.update(value)
    return aggregator.finalize()
