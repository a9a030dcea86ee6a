import dataclasses
import logging
import os
import tomllib
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# default offset added inside logs and denominators
EPSILON = 1e-8


@dataclass(frozen=True)
class LossConfig:
    """Settings shared by every loss evaluation in the process."""

    epsilon: float = EPSILON
    workers: int = 1  # > 1 enables chunked evaluation on a thread pool
    parallel_min_size: int = 65536  # smaller operands always run sequentially

    def __post_init__(self):
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.parallel_min_size < 0:
            raise ValueError(
                f"parallel_min_size cannot be negative, got {self.parallel_min_size}"
            )

    @classmethod
    def load(cls, config_path: str) -> "LossConfig":
        """
        Load loss settings from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "lossgrad" table.
            Keys missing from the table keep their defaults.

        Returns
        -------
        LossConfig
            Instance populated from the "lossgrad" table.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(**data.get("lossgrad", {}))


_active = LossConfig()


def get_config() -> LossConfig:
    return _active


def configure(**changes) -> LossConfig:
    """Replace fields of the active config and return the new one."""
    global _active
    _active = dataclasses.replace(_active, **changes)
    logger.debug("Loss config updated: %s", _active)
    return _active


def reset_config() -> LossConfig:
    global _active
    _active = LossConfig()
    return _active
