# src/lossgrad/errors.py
from .core.utils import shape_str


class LossError(Exception):
    """Base class for errors raised by lossgrad."""


class ShapeMismatchError(LossError, ValueError):
    """Predictions and targets do not share a shape."""

    def __init__(self, predictions_shape, targets_shape):
        self.predictions_shape = tuple(predictions_shape)
        self.targets_shape = tuple(targets_shape)
        super().__init__(
            f"Predictions shape {shape_str(self.predictions_shape)} must be the same "
            f"as targets shape {shape_str(self.targets_shape)}"
        )


class UnknownLossKind(LossError, ValueError):
    """Raised when a loss tag does not name one of the supported kinds."""
