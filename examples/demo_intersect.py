# examples/demo_intersect.py
import logging

from bgjk import EPS, query


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


if __name__ == "__main__":
    configure_logging()

    square = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)]
    cube = square + [(0, 0, 1), (1, 0, 1), (0, 1, 1), (1, 1, 1)]

    cases = {
        "квадрати з спільним ребром": (square, [(x + 1, y, z) for x, y, z in square]),
        "квадрати на відстані EPS": (square, [(1 + EPS, 0, 0), (2, 0, 0), (1 + EPS, 1, 0), (2, 1, 0)]),
        "куби з спільною вершиною": (cube, [(x + 1, y + 1, z + 1) for x, y, z in cube]),
        "точка над відрізком": ([(0, 0, 0), (1, 0, 0)], [(0.5, 0, 0.1)]),
        "порожня оболонка проти (0,0,0)": ([], [(0, 0, 0)]),
    }

    for name, (a, b) in cases.items():
        result = query(a, b)
        print(f"{name:34s} -> {result.verdict.value} ({result.iterations} ітерацій)")
