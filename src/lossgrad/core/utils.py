import numpy as np
from typing import List, Tuple


def as_float32(data, copy: bool = False) -> np.ndarray:
    """Converts numbers, nested lists or arrays to a float32 numpy array."""
    arr = np.asarray(data, dtype=np.float32)
    return arr.copy() if copy else arr


def readonly(arr: np.ndarray) -> np.ndarray:
    """Flags the array as non-writable and returns it."""
    arr.setflags(write=False)
    return arr


def same_shape(a: np.ndarray, b: np.ndarray) -> bool:
    return tuple(a.shape) == tuple(b.shape)


def split_outer(arr: np.ndarray, parts: int) -> List[np.ndarray]:
    """
    Splits an array into at most `parts` contiguous chunks along axis 0.
    Chunks differ in length by at most one row; empty chunks are dropped.
    """
    parts = max(1, min(parts, arr.shape[0]))
    return [c for c in np.array_split(arr, parts, axis=0) if c.shape[0] > 0]


def shape_str(shape: Tuple[int, ...]) -> str:
    return "(" + ", ".join(str(d) for d in shape) + ")"
