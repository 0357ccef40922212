# examples/demo_presets.py
import random

from chaosgame.presets import PRESETS, run
from chaosgame.predicates import validate

if __name__ == "__main__":
    # невеликий прогін кожного фракталу + перевірка, що все в межах фігури
    n = 20000
    for name, preset in PRESETS.items():
        polygon, _ = preset.build(random.Random())
        pts = list(run(name, n))
        report = validate(pts, polygon)
        print(f"{name:20s} points={report['points']} unique={report['unique_points']} "
              f"outside={len(report['outside'])} "
              f"on_boundary={len(report['on_boundary'])} bbox={report['bbox']}")
