# chaosgame/polygon.py
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from .geom import Pt, midpoint


class Polygon(ABC):
    """
    Багатокутник як упорядкована циклічна послідовність вершин (мінімум 3).
    Конкретна фігура задає лише vertices(); решта виводиться звідти.
    """

    @abstractmethod
    def vertices(self) -> List[Pt]:
        ...

    def medial_points(self) -> List[Pt]:
        """
        Середини сторін: i-та точка = midpoint(v[i], v[(i+1) % n]).
        Припускає, що сусідні вершини стоять поруч у vertices().
        """
        pts = self.vertices()
        n = len(pts)
        if n < 3:
            raise ValueError(f"Polygon needs at least 3 vertices, got {n}")
        return [midpoint(pts[i], pts[(i + 1) % n]) for i in range(n)]


@dataclass(frozen=True)
class Triangle(Polygon):
    a: Pt
    b: Pt
    c: Pt

    @classmethod
    def equilateral(cls, length: float) -> "Triangle":
        # висота дорівнює стороні — так задано «рівносторонній» трикутник гри
        return cls(Pt(0.0, 0.0), Pt(length, 0.0), Pt(length / 2.0, length))

    def vertices(self) -> List[Pt]:
        return [self.a, self.b, self.c]


@dataclass(frozen=True)
class Quadrilateral(Polygon):
    a: Pt
    b: Pt
    c: Pt
    d: Pt

    @classmethod
    def square(cls, length: float) -> "Quadrilateral":
        return cls(Pt(0.0, 0.0), Pt(length, 0.0), Pt(length, length), Pt(0.0, length))

    def vertices(self) -> List[Pt]:
        return [self.a, self.b, self.c, self.d]
