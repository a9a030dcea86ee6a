# src/lossgrad/losses/classification.py
import numpy as np
from .functional import run_functional
from .utils import div_eps, log_eps

"""
Probability and margin based losses

Cross entropy, binary cross entropy and KL divergence expect predictions that are already
probabilities (after a softmax or sigmoid), nothing here applies an activation.
eps is added inside every log and denominator so that p == 0 or p == 1 stays finite

Hinge embedding expects targets in {-1, 1} and treats p * t as the margin
"""

def cross_entropy(p, t, eps):
    return -t * log_eps(p, eps)

def cross_entropy_grad(p, t, eps):
    return -div_eps(t, p, eps)

def binary_cross_entropy(p, t, eps):
    return -(t * log_eps(p, eps) + (1 - t) * log_eps(1 - p, eps))

def binary_cross_entropy_grad(p, t, eps):
    # d/dp simplifies to (p - t) / (p (1 - p)), eps keeps p in {0, 1} finite
    return div_eps(p - t, p * (1 - p), eps)

def hinge_embedding(p, t, eps=None):
    return np.maximum(0, 1 - p * t)

def hinge_embedding_grad(p, t, eps=None):
    return np.where(1 - p * t > 0, -t, np.zeros_like(t))

def kl_divergence(p, t, eps):
    # t == 0 gives 0 * ln(0) = nan, left as is
    return t * np.log(t / (p + eps))

def kl_divergence_grad(p, t, eps):
    return -div_eps(t, p, eps)


def ce(yhat, y, reduction="mean", sample_weight=None, return_grad=False, eps=None):
    return run_functional(cross_entropy, cross_entropy_grad,
                          yhat, y, reduction, sample_weight, return_grad, eps)

def bce(yhat, y, reduction="mean", sample_weight=None, return_grad=False, eps=None):
    return run_functional(binary_cross_entropy, binary_cross_entropy_grad,
                          yhat, y, reduction, sample_weight, return_grad, eps)

def hinge(yhat, y, reduction="mean", sample_weight=None, return_grad=False):
    return run_functional(hinge_embedding, hinge_embedding_grad,
                          yhat, y, reduction, sample_weight, return_grad)

def kld(yhat, y, reduction="mean", sample_weight=None, return_grad=False, eps=None):
    return run_functional(kl_divergence, kl_divergence_grad,
                          yhat, y, reduction, sample_weight, return_grad, eps)
