from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Tuple

from .game import chaos_game
from .geom import Pt, midpoint
from .polygon import Polygon, Quadrilateral, Triangle
from .rules import AvoidRepeat, ShareCoordinate, UniformVertex

logger = logging.getLogger(__name__)

ITERATIONS = 1_000_000
SIDE = 100.0
HALF_JUMP = 0.5
VICSEK_JUMP = 0.66666666667
DEFAULT_PRESET = "sierpinski-triangle"


@dataclass(frozen=True)
class Preset:
    """
    Іменована конфігурація фракталу.
    build(rng) -> (polygon, rule): свіжі фігура та правило на кожен запуск.
    """
    name: str
    jump_distance: float
    build: Callable[[random.Random], Tuple[Polygon, UniformVertex]]


def _sierpinski_triangle(rng: random.Random) -> Tuple[Polygon, UniformVertex]:
    triangle = Triangle.equilateral(SIDE)
    return triangle, UniformVertex(triangle.vertices(), rng)


def _square_one(rng: random.Random) -> Tuple[Polygon, UniformVertex]:
    square = Quadrilateral.square(SIDE)
    return square, AvoidRepeat(square.vertices(), rng)


def _square_two(rng: random.Random) -> Tuple[Polygon, UniformVertex]:
    square = Quadrilateral.square(SIDE)
    return square, ShareCoordinate(square.vertices(), rng)


def _vicsek(rng: random.Random) -> Tuple[Polygon, UniformVertex]:
    square = Quadrilateral.square(SIDE)
    pts = square.vertices()
    pts.append(midpoint(pts[0], pts[2]))  # центр квадрата
    return square, UniformVertex(pts, rng)


PRESETS: Dict[str, Preset] = {
    p.name: p
    for p in (
        Preset("sierpinski-triangle", HALF_JUMP, _sierpinski_triangle),
        Preset("square-one", HALF_JUMP, _square_one),
        Preset("square-two", HALF_JUMP, _square_two),
        Preset("vicsek", VICSEK_JUMP, _vicsek),
    )
}


def get_preset(name: str) -> Preset:
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"{name} is not yet implemented") from None


def run(name: str, iterations: int = ITERATIONS, rng: Optional[random.Random] = None) -> Iterator[Pt]:
    """Генератор точок фракталу `name` (ключ PRESETS)."""
    preset = get_preset(name)
    if rng is None:
        rng = random.Random()
    polygon, rule = preset.build(rng)
    logger.debug("%s: %d iterations, jump %s, %d candidates",
                 name, iterations, preset.jump_distance, len(rule.candidates))
    return chaos_game(polygon, iterations, preset.jump_distance, rule, rng)
