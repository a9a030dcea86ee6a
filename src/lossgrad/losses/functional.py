# src/lossgrad/losses/functional.py
from ..config import get_config
from .base import LossOut, check_pair
from .reductions import apply_reduction, check_reduction, scale_grad
from .utils import quiet_floats

def run_functional(value_fn, grad_fn, yhat, y, reduction="mean", sample_weight=None,
                   return_grad=False, eps=None):
    """Shared body of the functional losses: validate, compute, reduce."""
    check_reduction(reduction)
    yhat, y = check_pair(yhat, y)
    if eps is None:
        eps = get_config().epsilon
    with quiet_floats():
        loss = value_fn(yhat, y, eps)
        if return_grad:
            grad = grad_fn(yhat, y, eps)
            return LossOut(
                value=apply_reduction(loss, reduction, sample_weight),
                grad=scale_grad(grad, y, reduction, sample_weight)
            )
        return LossOut(value=apply_reduction(loss, reduction, sample_weight))
