import argparse
import logging
import pathlib
import sys

import numpy as np

# Ensure repository root is on PYTHONPATH when running without installation.
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from boids.config import build_flock, load_config
from boids.core.metrics import summarize
from boids.core.simulator import Simulator
from boids.viz.logger import FlockLogger
from boids.viz.render_2d import FlockRenderer2D


def main():
    parser = argparse.ArgumentParser(description="Run boids flocking simulation.")
    parser.add_argument("--config", type=pathlib.Path, help="Path to YAML config.")
    parser.add_argument("--no-render", action="store_true", help="Disable live rendering (headless).")
    parser.add_argument("--log", type=pathlib.Path, help="Optional path to write JSON log.")
    parser.add_argument("--steps", type=int, help="Override total simulation steps.")
    parser.add_argument("--seed", type=int, help="Override RNG seed.")
    parser.add_argument("--render-every", type=int, dest="render_every", help="Render every N steps.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config)
    if args.steps is not None:
        cfg["steps"] = args.steps
    if args.seed is not None:
        cfg["seed"] = args.seed
    if args.render_every is not None:
        cfg["render_every"] = args.render_every

    flock = build_flock(cfg, rng=np.random.default_rng(cfg["seed"]))
    sim = Simulator(flock)
    renderer = None if args.no_render else FlockRenderer2D(bounds=cfg["flock"]["bounds"])
    logger = FlockLogger(args.log) if args.log else None

    def on_tick(t, flock):
        if renderer and t % cfg["render_every"] == 0:
            renderer.render(flock, t)
        if logger:
            logger.log_flock(flock, t, metrics=summarize(flock))

    sim.run(cfg["steps"], callback=on_tick)

    stats = summarize(sim.flock)
    print(
        f"Finished {sim.t} ticks: polarization={stats['polarization']:.3f}, "
        f"mean distance={stats['mean_pairwise_distance']:.2f}"
    )

    if logger:
        logger.flush()


if __name__ == "__main__":
    main()
