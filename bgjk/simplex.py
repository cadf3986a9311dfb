from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from .geom import Vec3, ORIGIN, cross, dcross3, dot
from .predicates import Region, outside, straddle


@dataclass(frozen=True)
class Simplex:
    """
    Робочий симплекс між ітераціями. Найновіша вершина `a` сюди не входить:
    вона приходить з наступного опорного запиту.
    width == 2: відрізок (b, c), c — кандидат на трикутник;
    width == 3: трикутник (b, c, d), кандидат на тетраедр разом з a.
    """
    b: Vec3
    c: Vec3
    d: Vec3 = ORIGIN
    width: int = 2


@dataclass(frozen=True)
class Separated:
    """Знайдено розділювальний напрям: оболонки не перетинаються."""


@dataclass(frozen=True)
class Intersecting:
    """Тетраедр містить початок координат: оболонки перетинаються."""


@dataclass(frozen=True)
class Continue:
    simplex: Simplex
    direction: Vec3


Step = Union[Separated, Intersecting, Continue]


def _collapse(a: Vec3, b: Vec3, c: Vec3, d: Vec3,
              ao: Vec3, ab: Vec3, ac: Vec3, abc: Vec3) -> Optional[Continue]:
    """
    Якщо початок координат зовні одного з ребер ab/ac трикутника (a, b, c),
    звести симплекс до цього ребра. Інакше None.
    """
    region = straddle(ao, ab, ac, abc)
    if region is Region.EDGE_AB:
        return Continue(Simplex(a, b, d, 2), dcross3(ab, ao))
    if region is Region.EDGE_AC:
        return Continue(Simplex(a, c, d, 2), dcross3(ac, ao))
    return None


def refine_segment(simplex: Simplex, a: Vec3) -> Continue:
    """
    Крок для width == 2: відрізок (b, c) + нова точка a -> трикутник.
    Або зводимо до ребра, або переходимо до тетраедра (width == 3),
    обираючи бік трикутника, де лежить початок координат.
    """
    b, c, d = simplex.b, simplex.c, simplex.d
    ao = -a
    ab = b - a
    ac = c - a
    abc = cross(ab, ac)

    edge = _collapse(a, b, c, d, ao, ab, ac, abc)
    if edge is not None:
        return edge
    if outside(abc, ao):
        return Continue(Simplex(a, b, c, 3), abc)
    return Continue(Simplex(a, c, b, 3), -abc)


def _face(a: Vec3, b: Vec3, c: Vec3, d: Vec3, ao: Vec3) -> Continue:
    # грань (a, b, c) тетраедра, яку початок координат «бачить»
    ab = b - a
    ac = c - a
    abc = cross(ab, ac)
    edge = _collapse(a, b, c, d, ao, ab, ac, abc)
    if edge is not None:
        return edge
    return Continue(Simplex(a, b, c, 3), abc)


def refine_tetrahedron(simplex: Simplex, a: Vec3) -> Union[Intersecting, Continue]:
    """
    Крок для width == 3: тетраедр (a, b, c, d).
    Основа (b, c, d) вже перевірена при переході, тож лишаються три грані при a:
    (a, b, c), (a, c, d), (a, d, b). Якщо жодна не дивиться на початок
    координат — він усередині.
    """
    b, c, d = simplex.b, simplex.c, simplex.d
    ao = -a
    ab = b - a
    ac = c - a
    if outside(cross(ab, ac), ao):
        return _face(a, b, c, d, ao)
    ad = d - a
    if outside(cross(ac, ad), ao):
        return _face(a, c, d, d, ao)
    if outside(cross(ad, ab), ao):
        return _face(a, d, b, d, ao)
    return Intersecting()


def evolve(simplex: Simplex, direction: Vec3, a: Vec3) -> Step:
    """
    Один крок еволюції симплекса з новою опорною точкою `a`, отриманою
    вздовж `direction`. Чиста функція: вхідний симплекс не змінюється.
    """
    # проєкція строго від'ємна -> розділювальна вісь; нуль (дотик) іде далі
    if dot(a, direction) < 0:
        return Separated()
    if simplex.width == 2:
        return refine_segment(simplex, a)
    if simplex.width == 3:
        return refine_tetrahedron(simplex, a)
    raise ValueError(f"simplex width must be 2 or 3, got {simplex.width}")
