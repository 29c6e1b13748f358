from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from pywelford.core.domain.moments import Moments


class MomentAggregator(ABC):
    @abstractmethod
    def update(self, value) -> MomentAggregator:
        """Fold one observation into the aggregate and return self."""
        pass

    @abstractmethod
    def finalize(self) -> Optional[Moments]:
        """Return the moments seen so far, or None with fewer than two observations."""
        pass
