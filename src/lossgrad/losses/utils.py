"""
Epsilon-guarded helpers for loss computations
"""

from __future__ import annotations
# postponed evaluation of annotations, Array below is only a readability alias
from contextlib import contextmanager
import numpy as np

Array = np.ndarray

# Core guarded ops

def log_eps(x: Array, eps: float) -> Array:
    # ln(x + eps), the eps offset keeps ln(0) finite
    return np.log(x + eps)

def div_eps(num: Array, den: Array, eps: float) -> Array:
    # num / (den + eps)
    return num / (den + eps)

def step_sign(x: Array) -> Array:
    # +1 where x > 0, -1 everywhere else (x == 0 included, unlike np.sign)
    return np.where(x > 0, np.float32(1.0), np.float32(-1.0)).astype(x.dtype, copy=False)

@contextmanager
def quiet_floats():
    # some formulas legitimately hit 0/0 or ln(0), return nan/inf instead of warning
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        yield

def count_nonfinite(x: Array) -> int:
    return int(np.size(x) - np.count_nonzero(np.isfinite(x)))
