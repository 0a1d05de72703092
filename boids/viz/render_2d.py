import matplotlib.pyplot as plt
import numpy as np

from ..core.flock import Flock


class FlockRenderer2D:
    """Scatter/quiver view of a flock; 3D flocks are drawn as their xy projection."""

    def __init__(self, bounds, arrow_scale: float = 4.0):
        self.bounds = bounds
        self.arrow_scale = arrow_scale
        self.fig, self.ax = plt.subplots(figsize=(8, 4.5))
        backend = plt.get_backend().lower()
        self._interactive = backend not in {"agg", "pdf", "svg"}
        if self._interactive:
            plt.ion()
        self.quiver = None
        self.target_scat = None
        self.ax.set_xlim(bounds[0], bounds[1])
        self.ax.set_ylim(bounds[2], bounds[3])
        self.ax.set_aspect("equal")

    def render(self, flock: Flock, t: int = 0):
        positions = flock.positions()
        velocities = flock.velocities()
        if len(positions) > 0:
            xy = positions[:, :2]
            uv = velocities[:, :2] * self.arrow_scale
            if self.quiver is None or len(xy) != len(self.quiver.get_offsets()):
                if self.quiver is not None:
                    self.quiver.remove()
                self.quiver = self.ax.quiver(
                    xy[:, 0],
                    xy[:, 1],
                    uv[:, 0],
                    uv[:, 1],
                    color="blue",
                    angles="xy",
                    scale_units="xy",
                    scale=1.0,
                    width=0.003,
                    zorder=4,
                )
            else:
                self.quiver.set_offsets(xy)
                self.quiver.set_UVC(uv[:, 0], uv[:, 1])
        elif self.quiver is not None:
            self.quiver.remove()
            self.quiver = None

        if flock.target is not None:
            target = np.asarray(flock.target[:2])[None, :]
            if self.target_scat is None:
                self.target_scat = self.ax.scatter(
                    target[:, 0], target[:, 1], c="green", s=60, marker="x", zorder=5, label="target"
                )
            else:
                self.target_scat.set_offsets(target)
            self.target_scat.set_visible(True)
        elif self.target_scat is not None:
            self.target_scat.set_visible(False)

        self.ax.set_title(f"t={t} | {len(flock)} boids")
        if self._interactive:
            plt.pause(0.001)

    def close(self):
        plt.close(self.fig)
