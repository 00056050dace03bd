# models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
import math
import numpy as np

@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        vals = (self.min_x, self.min_y, self.max_x, self.max_y)
        if not all(math.isfinite(v) for v in vals):
            raise ValueError(f"Bounds must be finite, got {vals}")
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"Bounds min must not exceed max, got {vals}")

    def contains(self, x: float, y: float, tol: float = 0.0) -> bool:
        return (self.min_x - tol <= x <= self.max_x + tol
                and self.min_y - tol <= y <= self.max_y + tol)

@dataclass(frozen=True)
class Sample:
    x: float
    y: float
    z: float

@dataclass(frozen=True)
class SampleSet:
    """
    Samples in scan order (x outer, y inner) plus their elevation range.
    An empty set keeps the sentinel range z_min=+inf, z_max=-inf.
    """
    samples: Tuple[Sample, ...] = ()
    z_min: float = math.inf
    z_max: float = -math.inf

    @property
    def is_empty(self) -> bool:
        return len(self.samples) == 0

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def as_array(self) -> np.ndarray:
        if not self.samples:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([(s.x, s.y, s.z) for s in self.samples], dtype=np.float64)

@dataclass(frozen=True)
class GridSpec:
    bounds: Bounds
    interval: float
    W: int
    H: int
