from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

EPS = 1e-10  # допуск для предикатів орієнтації

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def midpoint(p: Pt, q: Pt) -> Pt:
    return Pt((p.x + q.x) / 2.0, (p.y + q.y) / 2.0)

def jump_towards(p: Pt, q: Pt, distance: float) -> Pt:
    """
    Лінійна інтерполяція p*(1-distance) + q*distance.
    distance поза [0, 1] — екстраполяція (Вічек стрибає на 2/3).
    """
    return Pt(p.x * (1.0 - distance) + q.x * distance,
              p.y * (1.0 - distance) + q.y * distance)

def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """Подвоєна орієнтована площа abc: >0 проти годинникової стрілки."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def to_array(points: Sequence[Pt]) -> np.ndarray:
    """Точки -> масив форми (n, 2); порожній вхід дає (0, 2)."""
    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)
