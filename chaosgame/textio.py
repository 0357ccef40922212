from __future__ import annotations
from typing import Iterable, List, TextIO

from .geom import Pt


def format_point(p: Pt) -> str:
    # repr float — найкоротший запис без втрат, gnuplot його читає
    return f"{p.x} {p.y}"


def write_points(points: Iterable[Pt], stream: TextIO) -> int:
    """Пише по рядку «x y» на точку; повертає кількість записаних рядків."""
    n = 0
    write = stream.write
    for p in points:
        write(format_point(p) + "\n")
        n += 1
    return n


def parse_points(text: str) -> List[Pt]:
    """
    Парсить точки з багаторядкового тексту (вивід write_points).
    Кожен рядок: x y або x, y. Порожні рядки й коментарі (#) пропускаються.
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Line {lineno}: expected 2 numbers, got {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Line {lineno}: cannot parse numbers '{line}'") from None
        points.append(Pt(x, y))
    return points
