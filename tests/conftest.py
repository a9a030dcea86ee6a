import numpy as np
import pytest

from lossgrad.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng():
    return np.random.default_rng(0)
