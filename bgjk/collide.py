from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Optional

from .config import CONFIG, BGJKConfig
from .geom import Vec3, HullLike, as_hull, dcross3, dot
from .simplex import Continue, Intersecting, Simplex, evolve
from .support import support

logger = logging.getLogger(__name__)


class Verdict(Enum):
    INTERSECTING = "intersecting"
    SEPARATED = "separated"
    INCONCLUSIVE = "inconclusive"   # вичерпано max_iterations


@dataclass(frozen=True)
class Query:
    verdict: Verdict
    iterations: int  # кількість опорних запитів у головному циклі


class NoConvergence(RuntimeError):
    """Пошук не зійшовся за max_iterations."""


def query(hull_a: HullLike, hull_b: HullLike, config: Optional[BGJKConfig] = None) -> Query:
    """
    Булевий GJK: чи містить різниця Мінковського A - B початок координат.

    Порядок точок в оболонках не важливий (окрім вибору серед рівних опорних),
    внутрішні точки не змінюють відповіді. Оболонки не змінюються.
    Складність одного кроку O(n + m).
    """
    cfg = config or CONFIG
    A = as_hull(hull_a)
    B = as_hull(hull_b)

    direction = Vec3.ones()
    c = support(A, B, direction)
    direction = -c
    b = support(A, B, direction)
    if dot(b, direction) < 0:
        logger.debug("separated at initialization")
        return Query(Verdict.SEPARATED, 0)

    simplex = Simplex(b, c)
    direction = dcross3(c - b, -b)

    steps = count(1) if cfg.max_iterations is None else range(1, cfg.max_iterations + 1)
    for i in steps:
        a = support(A, B, direction)
        step = evolve(simplex, direction, a)
        if isinstance(step, Continue):
            simplex, direction = step.simplex, step.direction
            continue
        verdict = Verdict.INTERSECTING if isinstance(step, Intersecting) else Verdict.SEPARATED
        logger.debug("%s after %d iterations", verdict.value, i)
        return Query(verdict, i)

    logger.warning("no convergence after %d iterations (|A|=%d, |B|=%d)",
                   cfg.max_iterations, len(A), len(B))
    return Query(Verdict.INCONCLUSIVE, cfg.max_iterations)


def intersects(hull_a: HullLike, hull_b: HullLike, config: Optional[BGJKConfig] = None) -> bool:
    """
    Чи перетинаються (або торкаються) опуклі оболонки двох множин точок.
    Порожня оболонка поводиться як одна точка в початку координат.
    Кидає NoConvergence, якщо вичерпано ліміт ітерацій: це єдиний випадок,
    коли функція не повертає bool.
    """
    result = query(hull_a, hull_b, config)
    if result.verdict is Verdict.INCONCLUSIVE:
        raise NoConvergence(f"no verdict after {result.iterations} iterations")
    return result.verdict is Verdict.INTERSECTING
