# src/lossgrad/losses/reductions.py
import numpy as np
from .base import Reduction

REDUCTIONS = ("none", "mean", "sum")

def check_reduction(reduction: Reduction) -> None:
    if reduction not in REDUCTIONS:
        raise ValueError(f"Unknown reduction {reduction!r}, expected one of {REDUCTIONS}")

def apply_reduction(x, reduction: Reduction = "mean", sample_weight=None):
    check_reduction(reduction)
    if sample_weight is not None:
        x = x * sample_weight
    if reduction == "none":
        return x
    if reduction == "sum":
        return float(np.sum(x, dtype=np.float64))
    return float(np.sum(x, dtype=np.float64) / max(1, x.size))

def scale_grad(grad, y, reduction: Reduction = "mean", sample_weight=None):
    # mirrors apply_reduction so grad is the derivative of the reduced value
    if sample_weight is not None:
        grad = grad * sample_weight
    return grad / np.maximum(1, y.size) if reduction == "mean" else grad
