# src/lossgrad/losses/kinds.py
from enum import Enum
from typing import Callable, Dict, NamedTuple

from ..errors import UnknownLossKind
from . import classification, regression


class LossKind(Enum):
    """The supported loss surfaces, each carrying its short tag."""

    SQUARED_ERROR = "mse"
    ABSOLUTE_ERROR = "mae"
    ROOT_SQUARED_ERROR = "rmse"
    CROSS_ENTROPY = "ce"
    BINARY_CROSS_ENTROPY = "bce"
    HINGE_EMBEDDING = "he"
    KL_DIVERGENCE = "kld"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def parse(cls, kind) -> "LossKind":
        """Accepts a member, a member name or a short tag, case-insensitive."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            key = kind.strip()
            try:
                return cls[key.upper()]
            except KeyError:
                pass
            try:
                return cls(key.lower())
            except ValueError:
                pass
        raise UnknownLossKind(
            f"Unknown loss kind {kind!r}, expected one of "
            f"{', '.join(k.tag for k in cls)}"
        )


class Formula(NamedTuple):
    value: Callable
    grad: Callable


FORMULAS: Dict[LossKind, Formula] = {
    LossKind.SQUARED_ERROR: Formula(regression.squared_error, regression.squared_error_grad),
    LossKind.ABSOLUTE_ERROR: Formula(regression.absolute_error, regression.absolute_error_grad),
    LossKind.ROOT_SQUARED_ERROR: Formula(regression.root_squared_error,
                                         regression.root_squared_error_grad),
    LossKind.CROSS_ENTROPY: Formula(classification.cross_entropy,
                                    classification.cross_entropy_grad),
    LossKind.BINARY_CROSS_ENTROPY: Formula(classification.binary_cross_entropy,
                                           classification.binary_cross_entropy_grad),
    LossKind.HINGE_EMBEDDING: Formula(classification.hinge_embedding,
                                      classification.hinge_embedding_grad),
    LossKind.KL_DIVERGENCE: Formula(classification.kl_divergence,
                                    classification.kl_divergence_grad),
}


def formula_for(kind: LossKind) -> Formula:
    try:
        return FORMULAS[kind]
    except KeyError:
        # every member has an entry, a miss means the table and the enum diverged
        raise RuntimeError(f"Unhandled loss kind {kind!r}") from None
