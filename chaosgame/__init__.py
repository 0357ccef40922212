"""
chaosgame — «гра хаосу» для IFS-фракталів (Серпінський, квадрати, Вічек).
Точки друкуються по рядку «x y» для gnuplot / matplotlib.
Перевірки на SciPy — окремо, у chaosgame.predicates (CLI їх не тягне).
"""

__version__ = "0.1.0"

from chaosgame.geom import Pt, EPS, midpoint, jump_towards, centroid, orient2d, to_array
from chaosgame.polygon import Polygon, Triangle, Quadrilateral
from chaosgame.rules import UniformVertex, AvoidRepeat, ShareCoordinate
from chaosgame.game import chaos_game
from chaosgame.presets import PRESETS, ITERATIONS, Preset, get_preset, run
from chaosgame.textio import format_point, write_points, parse_points

__all__ = [
    "Pt", "EPS", "midpoint", "jump_towards", "centroid", "orient2d", "to_array",
    "Polygon", "Triangle", "Quadrilateral",
    "UniformVertex", "AvoidRepeat", "ShareCoordinate",
    "chaos_game", "PRESETS", "ITERATIONS", "Preset", "get_preset", "run",
    "format_point", "write_points", "parse_points", "__version__",
]
