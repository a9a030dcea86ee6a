# src/lossgrad/losses/regression.py
import numpy as np
from .functional import run_functional
from .utils import step_sign

# per-element surfaces and their derivatives w.r.t. the prediction p
# every pair takes (p, t, eps) so the dispatch table can treat all kinds alike

def squared_error(p, t, eps=None):
    return np.square(p - t)

def squared_error_grad(p, t, eps=None):
    return 2 * (p - t)

def absolute_error(p, t, eps=None):
    return np.abs(p - t)

def absolute_error_grad(p, t, eps=None):
    return step_sign(p - t)

def root_squared_error(p, t, eps=None):
    return np.sqrt(np.square(p - t))

def root_squared_error_grad(p, t, eps=None):
    # 0/0 -> nan wherever p == t
    diff = p - t
    return diff / np.sqrt(np.square(diff))


def mse(yhat, y, reduction="mean", sample_weight=None, return_grad=False):
    return run_functional(squared_error, squared_error_grad,
                          yhat, y, reduction, sample_weight, return_grad)

def mae(yhat, y, reduction="mean", sample_weight=None, return_grad=False):
    return run_functional(absolute_error, absolute_error_grad,
                          yhat, y, reduction, sample_weight, return_grad)

def rmse(yhat, y, reduction="mean", sample_weight=None, return_grad=False):
    """
    Root of the squared error, taken per element before reduction.
    The gradient is nan where yhat == y.
    """
    return run_functional(root_squared_error, root_squared_error_grad,
                          yhat, y, reduction, sample_weight, return_grad)
