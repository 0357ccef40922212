"""
chaos-game — пише точки фракталу в stdout, по рядку «x y».

    chaos-game sierpinski-triangle > plots/sierpinski-triangle.txt

Переглянути: gnuplot `plot 'plots/sierpinski-triangle.txt' with points`
або examples/view.py (matplotlib).
"""
from __future__ import annotations
import logging
import os
import sys
from typing import List, Optional

from .textio import write_points
from .presets import DEFAULT_PRESET, ITERATIONS, PRESETS, run as run_preset

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    name = args[0] if args else DEFAULT_PRESET
    if name not in PRESETS:
        sys.exit(f"{name} is not yet implemented")

    logger.info("%s: generating %d points", name, ITERATIONS)
    try:
        n = write_points(run_preset(name, ITERATIONS), sys.stdout)
        sys.stdout.flush()
    except BrokenPipeError:
        # читач закрив канал (напр. `| head`): решту виводу — в devnull
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    logger.info("%s: wrote %d points", name, n)
    return 0


def run() -> None:
    """Точка входу консольного скрипта: логи в stderr, stdout лишається під дані."""
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(main())
