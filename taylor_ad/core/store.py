# taylor_ad/core/store.py
from __future__ import annotations
import numpy as np

from ..config import get_config
from ..errors import OrderNotComputed


class CoefficientStore:
    """
    Growable buffer of Taylor coefficients c[0], c[1], ... of one series.

    Attributes
    ----------
    valid_through : int
        Highest order whose coefficient is valid; -1 when nothing is.
        Entries above the watermark are garbage and must not be read.
    """
    __slots__ = ("_buf", "valid_through")

    def __init__(self, capacity: int = None):
        if capacity is None:
            capacity = get_config().initial_capacity
        self._buf = np.zeros(max(int(capacity), 1), dtype=np.float64)
        self.valid_through = -1

    def __repr__(self):
        return f"CoefficientStore(valid_through={self.valid_through}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        return self._buf.shape[0]

    def _reserve(self, order: int):
        if order < self.capacity:
            return
        new_cap = get_config().next_capacity(self.capacity, order + 1)
        buf = np.zeros(new_cap, dtype=np.float64)
        buf[:self.capacity] = self._buf
        self._buf = buf

    def get(self, order: int) -> float:
        """Coefficient at `order`; raises OrderNotComputed above the watermark."""
        if order < 0:
            raise IndexError(f"Taylor order must be non-negative, got {order}")
        if order > self.valid_through:
            raise OrderNotComputed(
                f"coefficient of order {order} requested but series is only "
                f"valid through order {self.valid_through}"
            )
        return float(self._buf[order])

    def set(self, order: int, value: float):
        """
        Append the next computed coefficient. Only `valid_through + 1` is
        accepted: computed series grow strictly in order.
        """
        if order != self.valid_through + 1:
            raise OrderNotComputed(
                f"cannot write order {order}: next computable order is {self.valid_through + 1}"
            )
        self._reserve(order)
        self._buf[order] = value
        self.valid_through = order

    def seed(self, order: int, value: float):
        """
        Caller-controlled write used by free variables. Any order may be set;
        orders skipped between the old watermark and `order` read as 0.
        """
        if order < 0:
            raise IndexError(f"Taylor order must be non-negative, got {order}")
        self._reserve(order)
        if order > self.valid_through + 1:
            self._buf[self.valid_through + 1:order] = 0.0
        self._buf[order] = value
        self.valid_through = max(self.valid_through, order)

    def extend_zeros(self, order: int):
        """Advance the watermark to `order`, filling the new orders with 0."""
        if order <= self.valid_through:
            return
        self._reserve(order)
        self._buf[self.valid_through + 1:order + 1] = 0.0
        self.valid_through = order

    def reset(self):
        # keep the buffer, only forget what was valid
        self.valid_through = -1

    def view(self, order: int) -> np.ndarray:
        """Read-only view on c[0..order]; caller guarantees order <= valid_through."""
        v = self._buf[:order + 1]
        v.flags.writeable = False
        return v

    def as_array(self, order: int = None) -> np.ndarray:
        """Copy of the valid coefficients c[0..order] (default: all valid ones)."""
        if order is None:
            order = self.valid_through
        if order > self.valid_through:
            raise OrderNotComputed(
                f"coefficients through order {order} requested but series is only "
                f"valid through order {self.valid_through}"
            )
        return self._buf[:order + 1].copy()
