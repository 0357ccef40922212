# chaosgame/rules.py
from __future__ import annotations
import random
from typing import Optional, Sequence, Tuple

from .geom import Pt


class UniformVertex:
    """
    Правило вибору опорної точки для гри: рівномірний вибір серед candidates.
    Об'єкт викликається без аргументів і повертає Pt.

    prev — остання прийнята точка (None до першого виклику).
    Підкласи звужують вибір через accepts(): відкинутий кандидат перетягується;
    такі правила стартують із випадкового prev.
    """

    def __init__(self, candidates: Sequence[Pt], rng: Optional[random.Random] = None):
        if not candidates:
            raise ValueError("Need at least one candidate point")
        self.candidates: Tuple[Pt, ...] = tuple(candidates)
        self.rng = random.Random() if rng is None else rng
        self.prev: Optional[Pt] = None

    def accepts(self, new: Pt) -> bool:
        return True

    def __call__(self) -> Pt:
        while True:
            new = self.rng.choice(self.candidates)
            if self.accepts(new):
                self.prev = new
                return new


class AvoidRepeat(UniformVertex):
    """Забороняє двічі поспіль ту саму вершину (обидві координати рівні)."""

    def __init__(self, candidates: Sequence[Pt], rng: Optional[random.Random] = None):
        if len(set(candidates)) < 2:
            raise ValueError("Need at least two distinct candidates to avoid repeats")
        super().__init__(candidates, rng)
        self.prev = self.rng.choice(self.candidates)

    def accepts(self, new: Pt) -> bool:
        return new.x != self.prev.x or new.y != self.prev.y


class ShareCoordinate(UniformVertex):
    """Наступна вершина мусить мати спільну x або y з попередньою."""

    def __init__(self, candidates: Sequence[Pt], rng: Optional[random.Random] = None):
        super().__init__(candidates, rng)
        self.prev = self.rng.choice(self.candidates)

    def accepts(self, new: Pt) -> bool:
        return new.x == self.prev.x or new.y == self.prev.y
