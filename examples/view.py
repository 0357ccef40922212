# examples/view.py
"""
Перегляд точок, які видав chaos-game, через matplotlib.

    chaos-game vicsek > plots/vicsek.txt
    python examples/view.py plots/vicsek.txt
    python examples/view.py plots/vicsek.txt --animate    # точки з'являються порціями
    chaos-game square-two | python examples/view.py -     # зі stdin
"""
from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from chaosgame.geom import to_array
from chaosgame.textio import parse_points


def load(path: str):
    if path == "-":
        return parse_points(sys.stdin.read())
    with open(path, "r", encoding="utf-8") as f:
        return parse_points(f.read())


def show(arr, title: str, animate: bool = False, frames: int = 200) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_aspect("equal")
    ax.set_title(title)

    if not animate:
        ax.scatter(arr[:, 0], arr[:, 1], s=0.1, c="black", marker=".", linewidths=0)
        plt.show()
        return

    # аналог gnuplot `every ::0::i`: на кадрі i показуємо перші i-порцій точок
    ax.set_xlim(arr[:, 0].min(), arr[:, 0].max())
    ax.set_ylim(arr[:, 1].min(), arr[:, 1].max())
    sc = ax.scatter([], [], s=0.1, c="black", marker=".", linewidths=0)
    step = max(1, len(arr) // frames)

    def update(i):
        sc.set_offsets(arr[: (i + 1) * step])
        return (sc,)

    anim = FuncAnimation(fig, update, frames=frames, interval=30, blit=True)  # noqa: F841
    plt.show()


def main():
    ap = argparse.ArgumentParser(description="Show chaos-game points with matplotlib")
    ap.add_argument("path", help="file with 'x y' lines, or '-' for stdin")
    ap.add_argument("--animate", action="store_true")
    args = ap.parse_args()

    try:
        points = load(args.path)
    except ValueError as e:
        sys.exit(f"{args.path}: {e}")
    if not points:
        sys.exit(f"{args.path}: no points")

    show(to_array(points), args.path, animate=args.animate)


if __name__ == "__main__":
    main()
