import numpy as np
import pytest
from numpy.testing import assert_allclose

from lossgrad.errors import ShapeMismatchError
from lossgrad.losses import LossOut, apply_reduction, bce, ce, hinge, kld, mae, mse, rmse

yhat = np.array([0.1, 0.4, 0.6])
y = np.array([0.0, 0.5, 1.0])


def test_mse_mean_with_grad():
    out = mse(yhat, y, return_grad=True)
    assert isinstance(out, LossOut)
    assert out.value == pytest.approx(0.06, rel=1e-5)
    # mean reduction divides the per-element gradient by the element count
    assert_allclose(out.grad, 2 * (yhat - y) / 3, rtol=1e-5)


def test_grad_omitted_by_default():
    assert mse(yhat, y).grad is None


def test_reduction_none_keeps_elements():
    out = mae(yhat, y, reduction="none", return_grad=True)
    assert_allclose(out.value, [0.1, 0.1, 0.4], rtol=1e-5)
    assert_allclose(out.grad, [1.0, -1.0, -1.0])


def test_reduction_sum():
    out = mse(yhat, y, reduction="sum", return_grad=True)
    assert out.value == pytest.approx(0.18, rel=1e-5)
    assert_allclose(out.grad, 2 * (yhat - y), rtol=1e-5)


def test_sample_weight_scales_value_and_grad():
    w = np.array([1.0, 0.0, 2.0])
    out = mse(yhat, y, reduction="sum", sample_weight=w, return_grad=True)
    assert out.value == pytest.approx(0.01 + 2 * 0.16, rel=1e-5)
    assert_allclose(out.grad, 2 * (yhat - y) * w, rtol=1e-5)


def test_unknown_reduction():
    with pytest.raises(ValueError):
        mse(yhat, y, reduction="max")


def test_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        mse(np.zeros(3), np.zeros(4))


def test_rmse_grad_nan_at_equal_elements():
    out = rmse([1.0, 2.0], [1.0, 0.0], reduction="none", return_grad=True)
    assert_allclose(out.value, [0.0, 2.0])
    assert np.isnan(out.grad[0])
    assert out.grad[1] == 1.0


def test_probability_losses():
    p = np.array([0.25, 0.5])
    t = np.array([1.0, 0.0])
    assert_allclose(ce(p, t, reduction="none").value, [np.log(4.0), 0.0], rtol=1e-5, atol=1e-6)
    assert_allclose(bce(p, t, reduction="none").value, [np.log(4.0), np.log(2.0)], rtol=1e-5)
    assert_allclose(kld([0.5], [0.25], reduction="none").value, [0.25 * np.log(0.5)], rtol=1e-5)


def test_explicit_eps():
    out = ce([0.5], [1.0], reduction="none", eps=0.5)
    assert_allclose(out.value, [0.0], atol=1e-7)


def test_hinge():
    out = hinge([0.5, -0.5, 2.0], [1.0, 1.0, 1.0], reduction="none", return_grad=True)
    assert_allclose(out.value, [0.5, 1.5, 0.0])
    assert_allclose(out.grad, [-1.0, -1.0, 0.0])


def test_apply_reduction_mean_of_empty():
    assert apply_reduction(np.zeros(0), "mean") == 0.0
