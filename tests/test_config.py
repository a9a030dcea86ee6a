import pytest

from lossgrad.config import EPSILON, LossConfig, configure, get_config, reset_config


def test_defaults():
    cfg = get_config()
    assert cfg.epsilon == EPSILON == 1e-8
    assert cfg.workers == 1


def test_configure_and_reset():
    cfg = configure(workers=4)
    assert cfg.workers == 4
    assert get_config() is cfg
    assert get_config().epsilon == EPSILON
    assert reset_config().workers == 1


@pytest.mark.parametrize("changes", [
    {"epsilon": 0.0},
    {"epsilon": -1e-3},
    {"workers": 0},
    {"parallel_min_size": -1},
])
def test_invalid_values(changes):
    with pytest.raises(ValueError):
        LossConfig(**changes)
    with pytest.raises(ValueError):
        configure(**changes)
    # a rejected change leaves the active config untouched
    assert get_config() == LossConfig()


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        get_config().epsilon = 1.0


def test_load_from_toml(tmp_path):
    path = tmp_path / "losses.toml"
    path.write_text("[lossgrad]\nepsilon = 1e-6\nworkers = 2\n")
    cfg = LossConfig.load(str(path))
    assert cfg.epsilon == 1e-6
    assert cfg.workers == 2
    assert cfg.parallel_min_size == LossConfig().parallel_min_size


def test_load_without_table_uses_defaults(tmp_path):
    path = tmp_path / "empty.toml"
    path.write_text("[other]\nkey = 1\n")
    assert LossConfig.load(str(path)) == LossConfig()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LossConfig.load(str(tmp_path / "missing.toml"))
