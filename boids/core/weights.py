from dataclasses import dataclass, fields


@dataclass(frozen=True)
class BoidWeights:
    """Multipliers used to blend the four steering behaviors of a boid."""
    separation: float = 1.5
    alignment: float = 1.0
    cohesion: float = 1.0
    targeting: float = 0.01

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"weight '{f.name}' must be non-negative, got {value}")

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
