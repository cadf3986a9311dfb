from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np

F32 = np.float32
EPS = np.finfo(F32).eps  # машинний епс для float32


@dataclass(frozen=True)
class Vec3:
    """
    Точка/вектор у 3D з компонентами одинарної точності (float32).
    Рівність точна, без епсилон.
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, "x", F32(self.x))
        object.__setattr__(self, "y", F32(self.y))
        object.__setattr__(self, "z", F32(self.z))

    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return sub(self, other)

    def dot(self, other: Vec3) -> F32:
        return dot(self, other)

    @classmethod
    def ones(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)


ORIGIN = Vec3(0.0, 0.0, 0.0)

HullLike = Union[np.ndarray, Iterable[Vec3], Iterable[Tuple[float, float, float]]]


def sub(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)

def dot(a: Vec3, b: Vec3) -> F32:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.y*b.z - a.z*b.y,
                a.z*b.x - a.x*b.z,
                a.x*b.y - a.y*b.x)

def cross3(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    return cross(cross(a, b), c)

def dcross3(a: Vec3, b: Vec3) -> Vec3:
    """(a x b) x a: перпендикуляр до `a` у площині (a, b), з боку `b`."""
    return cross3(a, b, a)


def as_hull(points: HullLike) -> np.ndarray:
    """
    Привести оболонку до масиву (n, 3) float32.
    Порядок точок зберігається (від нього залежить вибір серед рівних опорних точок).
    Порожня оболонка -> масив (0, 3).
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(F32, copy=False)
    else:
        arr = np.array([tuple(p) for p in points], dtype=F32)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=F32)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"hull must be a sequence of 3D points, got shape {arr.shape}")
    return arr
