from __future__ import annotations
from enum import Enum
from typing import Type

import numpy as np


class Precision(Enum):
    F32 = "F32"
    F64 = "F64"

    @property
    def dtype(self) -> Type[np.floating]:
        """Return the numpy scalar type backing this precision."""
        mapping = {
            Precision.F32: np.float32,
            Precision.F64: np.float64,
        }
        return mapping[self]

    @classmethod
    def from_str(cls, name: str) -> Precision:
        aliases = {
            "F32": cls.F32,
            "FLOAT32": cls.F32,
            "F64": cls.F64,
            "FLOAT64": cls.F64,
        }
        key = name.strip().upper()
        if key not in aliases:
            raise ValueError(f"Unknown precision: {name}")
        return aliases[key]

    def to_str(self) -> str:
        return self.name
