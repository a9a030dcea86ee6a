# src/lossgrad/losses/__init__.py
from .base import LossOut, Reduction
from .classification import bce, ce, hinge, kld
from .evaluator import LossEvaluator, evaluate
from .kinds import LossKind
from .reductions import apply_reduction
from .regression import mae, mse, rmse

__all__ = [
    "LossEvaluator",
    "LossKind",
    "LossOut",
    "Reduction",
    "apply_reduction",
    "bce",
    "ce",
    "evaluate",
    "hinge",
    "kld",
    "mae",
    "mse",
    "rmse",
]
