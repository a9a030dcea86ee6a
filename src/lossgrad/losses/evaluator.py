# src/lossgrad/losses/evaluator.py
from __future__ import annotations
import functools
import logging

from ..config import get_config
from ..core.parallel import map_outer
from ..core.tensor import Tensor
from ..errors import ShapeMismatchError
from .kinds import LossKind, formula_for
from .utils import count_nonfinite, quiet_floats

logger = logging.getLogger(__name__)


class LossEvaluator:
    """
    Computes a loss function over predictions and targets.

    - elementwise_loss(): the loss applied element-wise, same shape as the inputs
    - mean_loss(): the mean of every element of elementwise_loss(), a float
    - gradient(): d loss / d prediction per element, used for backpropagation

    Nothing is cached, each call recomputes from the stored operands.
    Reduction is always the mean; callers backpropagating through gradient()
    average over the batch themselves.
    """

    __slots__ = ("_kind", "_predictions", "_targets", "_eps", "_workers", "_parallel_min_size")

    def __init__(self, kind, predictions, targets):
        kind = LossKind.parse(kind)
        predictions = Tensor.wrap(predictions)
        targets = Tensor.wrap(targets)
        if predictions.shape != targets.shape:
            raise ShapeMismatchError(predictions.shape, targets.shape)

        self._kind = kind
        self._predictions = predictions
        self._targets = targets
        cfg = get_config()
        self._eps = cfg.epsilon
        self._workers = cfg.workers
        self._parallel_min_size = cfg.parallel_min_size
        logger.debug("Created %s evaluator for shape %s", kind.tag, predictions.shape)

    # one factory per kind

    @classmethod
    def mse(cls, predictions, targets) -> "LossEvaluator":
        """Mean squared error. Predictions and targets: (B, *) or (*)."""
        return cls(LossKind.SQUARED_ERROR, predictions, targets)

    @classmethod
    def mae(cls, predictions, targets) -> "LossEvaluator":
        """Mean absolute error. Predictions and targets: (B, *) or (*)."""
        return cls(LossKind.ABSOLUTE_ERROR, predictions, targets)

    @classmethod
    def rmse(cls, predictions, targets) -> "LossEvaluator":
        return cls(LossKind.ROOT_SQUARED_ERROR, predictions, targets)

    @classmethod
    def ce(cls, predictions, targets) -> "LossEvaluator":
        """Cross entropy, predictions must be probabilities."""
        return cls(LossKind.CROSS_ENTROPY, predictions, targets)

    @classmethod
    def bce(cls, predictions, targets) -> "LossEvaluator":
        return cls(LossKind.BINARY_CROSS_ENTROPY, predictions, targets)

    @classmethod
    def he(cls, predictions, targets) -> "LossEvaluator":
        """Hinge embedding, targets are expected in {-1, 1}."""
        return cls(LossKind.HINGE_EMBEDDING, predictions, targets)

    @classmethod
    def kld(cls, predictions, targets) -> "LossEvaluator":
        return cls(LossKind.KL_DIVERGENCE, predictions, targets)

    @property
    def kind(self) -> LossKind:
        return self._kind

    @property
    def predictions(self) -> Tensor:
        return self._predictions

    @property
    def targets(self) -> Tensor:
        return self._targets

    @property
    def shape(self) -> tuple:
        return self._predictions.shape

    def elementwise_loss(self) -> Tensor:
        return Tensor(self._apply(formula_for(self._kind).value))

    def mean_loss(self) -> float:
        return self.elementwise_loss().mean()

    def gradient(self) -> Tensor:
        grad = self._apply(formula_for(self._kind).grad)
        bad = count_nonfinite(grad)
        if bad:
            logger.debug("%s gradient has %d non-finite elements", self._kind.tag, bad)
        return Tensor(grad)

    def _apply(self, fn):
        fn = functools.partial(_call, fn, eps=self._eps)
        p, t = self._predictions.data, self._targets.data
        if self._workers > 1 and p.ndim > 0 and p.size >= self._parallel_min_size:
            return map_outer(fn, p, t, self._workers)
        return fn(p, t)

    def __repr__(self):
        return f"LossEvaluator(kind={self._kind.name}, shape={self.shape})"


def _call(fn, p, t, eps):
    # errstate is thread-local, so it is entered inside each worker
    with quiet_floats():
        return fn(p, t, eps)


def evaluate(kind, predictions, targets) -> LossEvaluator:
    """Build an evaluator for the given kind (member, name or short tag)."""
    return LossEvaluator(kind, predictions, targets)
