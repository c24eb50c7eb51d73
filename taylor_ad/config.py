# taylor_ad/config.py
"""
Engine Configuration

Shared, process-wide settings of the Taylor engine: coefficient buffer
sizing and the evaluation order above which a warning is issued.
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class EngineConfig:
    """
    Settings read by the coefficient store and the evaluator.

    Attributes
    ----------
    initial_capacity : int
        Number of coefficients preallocated for every new series.
    growth_factor : float
        Factor by which a coefficient buffer grows when it is full.
    order_warning : Optional[int]
        Evaluating beyond this order issues a TaylorWarning, since the
        convolution recurrences cost O(order^2) per node. None disables it.
    """
    initial_capacity: int = 8
    growth_factor: float = 2.0
    order_warning: Optional[int] = 512

    def __post_init__(self):
        if self.initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {self.initial_capacity}")
        if self.growth_factor <= 1.0:
            raise ValueError(f"growth_factor must be > 1, got {self.growth_factor}")
        if self.order_warning is not None and self.order_warning < 0:
            raise ValueError(f"order_warning must be >= 0 or None, got {self.order_warning}")

    def next_capacity(self, current: int, required: int) -> int:
        """Smallest geometric growth of `current` that holds `required` entries."""
        capacity = max(current, 1)
        while capacity < required:
            capacity = max(capacity + 1, int(capacity * self.growth_factor))
        return capacity


# Active configuration (module-level singleton, swapped by use_config)
engine_config = EngineConfig()


def get_config() -> EngineConfig:
    """Return the active engine configuration."""
    return engine_config


@contextmanager
def use_config(config: Optional[EngineConfig] = None, **overrides):
    """
    Context manager to temporarily use another configuration:
        with use_config(order_warning=None):
            ... evaluate to very high orders ...

    Keyword overrides are applied on top of `config` (or of the currently
    active configuration if `config` is None).
    """
    from . import config as _config_mod  # module access so the swap is visible everywhere
    prev = _config_mod.engine_config
    try:
        base = config if config is not None else prev
        _config_mod.engine_config = replace(base, **overrides) if overrides else base
        yield _config_mod.engine_config
    finally:
        _config_mod.engine_config = prev
