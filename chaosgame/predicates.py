# chaosgame/predicates.py
from __future__ import annotations
from typing import Sequence

import numpy as np
from scipy.spatial import Delaunay

from .geom import Pt, EPS, orient2d, to_array
from .polygon import Polygon


def strictly_inside(p: Pt, hull: Sequence[Pt], eps: float = EPS) -> bool:
    """
    Чи лежить p строго всередині опуклого багатокутника hull
    (вершини по колу, будь-яка орієнтація). Точка на ребрі — не всередині.
    """
    n = len(hull)
    if n < 3:
        return False
    sign = 0
    for i in range(n):
        o = orient2d(hull[i], hull[(i + 1) % n], p)
        if abs(o) <= eps:
            return False
        s = 1 if o > 0 else -1
        if sign == 0:
            sign = s
        elif s != sign:
            return False
    return True


def inside_hull(points: Sequence[Pt], hull: Sequence[Pt], tol: float = 1e-9) -> np.ndarray:
    """
    Пакетна перевірка «точка в опуклій оболонці hull (межа включно)».
    Триангулюємо hull через SciPy Delaunay (Qhull) і шукаємо симплекс для кожної точки.
    Повертає bool-масив довжини len(points).
    """
    if len(hull) < 3:
        raise ValueError("Need at least 3 hull points")
    arr = to_array(points)
    if len(arr) == 0:
        return np.zeros(0, dtype=bool)
    tri = Delaunay(to_array(hull))
    return tri.find_simplex(arr, tol=tol) >= 0


def validate(points: Sequence[Pt], polygon: Polygon) -> dict:
    """
    Діагностика згенерованої множини:
      - скільки точок вийшло за опуклу оболонку вершин polygon;
      - які з решти лежать на межі (не строго всередині);
      - габаритний прямокутник (xmin, ymin, xmax, ymax).
    Порожній outside = все ок.
    """
    arr = to_array(points)
    hull = polygon.vertices()
    inside = inside_hull(points, hull)
    outside = [int(i) for i in np.flatnonzero(~inside)]
    on_boundary = [int(i) for i in np.flatnonzero(inside) if not strictly_inside(points[i], hull)]
    if len(arr):
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        bbox = (float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))
    else:
        bbox = None
    return {
        "points": len(arr),
        "unique_points": len(set(points)),
        "outside": outside,
        "on_boundary": on_boundary,
        "bbox": bbox,
    }
