# bgjk/support.py
from __future__ import annotations

import numpy as np

from .geom import Vec3, ORIGIN, HullLike, as_hull


def farthest(points: HullLike, direction: Vec3) -> Vec3:
    """
    Найвіддаленіша вздовж `direction` точка множини.
    Серед рівних перемагає перша (argmax повертає перший максимум).
    Порожня множина поводиться як одна точка в початку координат.
    """
    arr = as_hull(points)
    if len(arr) == 0:
        return ORIGIN
    # той самий порядок операцій, що і в dot(): (x*dx + y*dy) + z*dz
    proj = arr[:, 0]*direction.x + arr[:, 1]*direction.y + arr[:, 2]*direction.z
    x, y, z = arr[int(np.argmax(proj))]
    return Vec3(x, y, z)


def support(hull_a: HullLike, hull_b: HullLike, direction: Vec3) -> Vec3:
    """Опорна точка різниці Мінковського A - B вздовж `direction`. O(|A| + |B|)."""
    return farthest(hull_a, direction) - farthest(hull_b, -direction)
