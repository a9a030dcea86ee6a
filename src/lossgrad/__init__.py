"""
lossgrad: elementwise loss surfaces and their gradients over numpy tensors.

    >>> from lossgrad import evaluate
    >>> ev = evaluate("mse", [1., 2., 3.], [1., 0., 5.])
    >>> ev.mean_loss()
    2.6666666666666665
"""
from .config import EPSILON, LossConfig, configure, get_config, reset_config
from .core import Tensor
from .errors import LossError, ShapeMismatchError, UnknownLossKind
from .logging import setup_logging
from .losses import LossEvaluator, LossKind, LossOut, evaluate

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "LossConfig",
    "LossError",
    "LossEvaluator",
    "LossKind",
    "LossOut",
    "ShapeMismatchError",
    "Tensor",
    "UnknownLossKind",
    "configure",
    "evaluate",
    "get_config",
    "reset_config",
    "setup_logging",
]
