import json
from pathlib import Path

from ..core.flock import Flock


class FlockLogger:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.records = []

    def log_flock(self, flock: Flock, t: int, metrics=None):
        snapshot = {
            "t": t,
            "target": flock.target.tolist() if flock.target is not None else None,
            "boids": [
                {
                    "pos": b.position.tolist(),
                    "vel": b.velocity.tolist(),
                }
                for b in flock.boids
            ],
        }
        if metrics is not None:
            snapshot["metrics"] = metrics
        self.records.append(snapshot)

    def flush(self):
        with self.path.open("w") as f:
            json.dump(self.records, f, indent=2)
