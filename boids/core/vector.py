import numpy as np


def as_vector(values, dtype=None) -> np.ndarray:
    """
    Copy `values` into a read-only 1-D float array.

    Integer input is promoted to float64; float32/float64 input keeps its dtype
    unless `dtype` says otherwise.
    """
    v = np.array(values, dtype=dtype)
    if not np.issubdtype(v.dtype, np.floating):
        v = v.astype(np.float64)
    if v.ndim != 1:
        raise ValueError(f"expected a 1-D vector, got shape {v.shape}")
    v.setflags(write=False)
    return v


def frozen(v: np.ndarray) -> np.ndarray:
    v.setflags(write=False)
    return v


def zeros(dim: int, dtype=np.float64) -> np.ndarray:
    return frozen(np.zeros(dim, dtype=dtype))


def magnitude(v: np.ndarray):
    return np.linalg.norm(v)


def distance(a: np.ndarray, b: np.ndarray):
    return np.linalg.norm(a - b)


def normalize(v: np.ndarray) -> np.ndarray:
    """Unit-length copy of v; a zero vector has no direction and stays zero."""
    mag = magnitude(v)
    if mag > 0:
        return frozen(v / mag)
    return zeros(len(v), v.dtype)


def limit_magnitude(v: np.ndarray, max_value) -> np.ndarray:
    """Scale v down to length `max_value` if it is longer, else return it as is."""
    mag = magnitude(v)
    if mag > max_value:
        return frozen(v * (max_value / mag))
    return v
