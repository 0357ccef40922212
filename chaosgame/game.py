from __future__ import annotations
import random
from typing import Callable, Iterator, Optional

from .geom import Pt, jump_towards
from .polygon import Polygon


def chaos_game(
    polygon: Polygon,
    iterations: int,
    jump_distance: float,
    next_point: Callable[[], Pt],
    rng: Optional[random.Random] = None,
) -> Iterator[Pt]:
    """
    «Гра хаосу»: стартуємо з випадкової середини сторони polygon і щоразу
    стрибаємо на jump_distance у бік точки, яку повернув next_point().

    Повертає генератор рівно з `iterations` точок. Точка видається ДО стрибка,
    тож перша — стартова середина сторони, а результат останнього стрибка не видається.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    if rng is None:
        rng = random.Random()
    start = rng.choice(polygon.medial_points())
    return _play(start, iterations, jump_distance, next_point)


def _play(
    current: Pt, iterations: int, jump_distance: float, next_point: Callable[[], Pt]
) -> Iterator[Pt]:
    for _ in range(iterations):
        yield current
        current = jump_towards(current, next_point(), jump_distance)
