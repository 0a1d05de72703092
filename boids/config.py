import copy
import logging
import pathlib

import numpy as np
import yaml

from .core.flock import Flock
from .core.weights import BoidWeights

log = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "steps": 2000,
    "render_every": 2,
    "seed": None,
    "flock": {
        "dim": 2,  # 2 | 3
        "count": 60,
        "bounds": [0, 640, 0, 360],  # [xmin, xmax, ymin, ymax(, zmin, zmax)]
        "goal_separation": 25.0,
        "goal_alignment": 50.0,
        "goal_cohesion": 50.0,
        "target": None,
    },
    "boid": {
        "max_speed": 2.0,
        "max_force": 0.03,
        "turn_rate_limit": 2.0,
        "weights": {"separation": 1.5, "alignment": 1.0, "cohesion": 1.0, "targeting": 0.01},
    },
}


def deep_update(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: pathlib.Path | None) -> dict:
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    path = pathlib.Path(path)
    cfg = yaml.safe_load(path.read_text())
    if cfg is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if "inherits" in cfg:
        base_path = path.parent / cfg["inherits"]
        log.debug("%s inherits %s", path, base_path)
        base_cfg = load_config(base_path)
        cfg = {k: v for k, v in cfg.items() if k != "inherits"}
        return deep_update(base_cfg, cfg)
    return deep_update(copy.deepcopy(DEFAULT_CONFIG), cfg)


def build_flock(cfg: dict, rng: np.random.Generator | None = None) -> Flock:
    flock_cfg = cfg["flock"]
    boid_cfg = dict(cfg.get("boid", {}))
    if rng is None:
        rng = np.random.default_rng(cfg.get("seed"))

    count = int(flock_cfg.get("count", 0))
    if count <= 0:
        raise ValueError(f"flock.count must be positive, got {count}")

    weights = boid_cfg.pop("weights", None)
    if weights is not None:
        boid_cfg["weights"] = BoidWeights(**weights)

    return Flock.scatter(
        count,
        flock_cfg["bounds"],
        dim=int(flock_cfg.get("dim", 2)),
        rng=rng,
        boid_kwargs=boid_cfg,
        goal_separation=float(flock_cfg.get("goal_separation", 25.0)),
        goal_alignment=float(flock_cfg.get("goal_alignment", 50.0)),
        goal_cohesion=float(flock_cfg.get("goal_cohesion", 50.0)),
        target=flock_cfg.get("target"),
    )
