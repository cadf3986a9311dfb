"""
bgjk — булевий GJK для 3D: чи перетинаються опуклі оболонки двох множин точок.
Точність — float32, як у рушіях фізики, що постачають вершини.
"""

__version__ = "0.1.0"

from bgjk.geom import Vec3, EPS, ORIGIN, as_hull, dot, cross
from bgjk.config import BGJKConfig, CONFIG
from bgjk.collide import Verdict, Query, NoConvergence, query, intersects

__all__ = [
    "Vec3", "EPS", "ORIGIN", "as_hull", "dot", "cross",
    "BGJKConfig", "CONFIG",
    "Verdict", "Query", "NoConvergence", "query", "intersects", "__version__",
]
