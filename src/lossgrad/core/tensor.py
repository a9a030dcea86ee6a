from __future__ import annotations
import numpy as np
from .utils import as_float32, readonly

"""
Tensor
A class that wraps a number or array of 32-bit floats and exposes
- data: the numeric values, as a read-only numpy array
- shape: the ordered dimension sizes
- mean(): the arithmetic mean of every element

Loss evaluation never mutates its operands, so a Tensor is immutable by convention:
the wrapped buffer is flagged read-only and any operation hands back a new Tensor

i.e.
p = Tensor([1., 2., 3.])
p.shape   --> (3,)
p.mean()  --> 2.0
p.data[0] = 5.  raises ValueError (assignment destination is read-only)

Use numpy() when a writable copy is needed, for example to feed an optimizer
"""
class Tensor:
    __slots__ = ("_data",)

    def __init__(self, data):
        # copy so later writes to the caller's array cannot leak into this tensor
        self._data = readonly(as_float32(data, copy=True))

    @classmethod
    def wrap(cls, data) -> "Tensor":
        """Return data unchanged if it is already a Tensor, otherwise wrap it."""
        return data if isinstance(data, cls) else cls(data)

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def shape(self) -> tuple:
        return self._data.shape

    @property
    def ndim(self) -> int:
        return self._data.ndim

    @property
    def size(self) -> int:
        return self._data.size

    """
    mean

    accumulate in float64 so long float32 tensors do not drift,
    then return a plain Python float
    an empty tensor has no mean, numpy would warn and return nan, we return nan quietly
    """
    def mean(self) -> float:
        if self._data.size == 0:
            return float("nan")
        return float(np.mean(self._data, dtype=np.float64))

    def numpy(self) -> np.ndarray:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        # copy=True must hand back fresh, writable memory, copy=False must never copy
        same_dtype = dtype is None or np.dtype(dtype) == self._data.dtype
        if copy:
            return self._data.astype(self._data.dtype if dtype is None else dtype)
        if copy is False and not same_dtype:
            raise ValueError(f"Cannot convert a float32 Tensor to {np.dtype(dtype)} without a copy")
        return self._data if same_dtype else self._data.astype(dtype)

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"Tensor({np.array2string(self._data, separator=', ')}, shape={self.shape})"
