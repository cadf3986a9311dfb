# bgjk/predicates.py
from __future__ import annotations
from enum import Enum

from .geom import Vec3, cross, dot


class Region(Enum):
    """Де лежить початок координат відносно трикутника (a, b, c)."""
    EDGE_AB = "edge_ab"   # зовні ребра ab
    EDGE_AC = "edge_ac"   # зовні ребра ac
    FACE = "face"         # у призмі над/під трикутником


def outside(normal: Vec3, ao: Vec3) -> bool:
    """Чи лежить початок координат строго з боку нормалі грані."""
    return dot(normal, ao) > 0


def straddle(ao: Vec3, ab: Vec3, ac: Vec3, abc: Vec3) -> Region:
    """
    Тест «по який бік площини»: спершу площина ребра ab (нормаль ab x abc),
    потім площина ребра ac (нормаль abc x ac).
    ao — вектор від найновішої вершини a до початку координат, abc = ab x ac.
    Порівняння строгі (> 0): дотик до площини вважається «всередині».
    """
    if outside(cross(ab, abc), ao):
        return Region.EDGE_AB
    if outside(cross(abc, ac), ao):
        return Region.EDGE_AC
    return Region.FACE
