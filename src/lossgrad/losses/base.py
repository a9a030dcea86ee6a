# src/lossgrad/losses/base.py
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union
import numpy as np

from ..core.utils import as_float32, same_shape
from ..errors import ShapeMismatchError

Reduction = Literal["none", "mean", "sum"]

@dataclass
class LossOut:
    value: Union[np.ndarray, float]     # reduced loss, or per-element loss for reduction="none"
    grad: Optional[np.ndarray] = None   # gradient w.r.t. predictions


def check_pair(yhat, y) -> Tuple[np.ndarray, np.ndarray]:
    """Coerce predictions and targets to float32 arrays of one shape."""
    yhat = as_float32(yhat)
    y = as_float32(y)
    if not same_shape(yhat, y):
        raise ShapeMismatchError(yhat.shape, y.shape)
    return yhat, y
