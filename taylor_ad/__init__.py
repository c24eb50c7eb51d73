# taylor_ad/__init__.py
# Forward-mode Taylor series arithmetic for functions of one real variable

from .core.series import TSeries
from .core.node import OpKind
from .config import EngineConfig, get_config, use_config
from .errors import (
    TaylorError,
    OrderNotComputed,
    SingularExpansion,
    DomainError,
    TaylorWarning,
)

# Operations
from .ops import (
    add, sub, mul, div, neg, pos, pow, square,
    exp, log, sqrt,
    sin, cos, tan, asin, acos, atan,
    erf, norm_cdf,
)

# Drivers
from . import taylor
from .taylor import (
    value,
    variable,
    evaluate,
    nth_derivative,
    highest_valid_order,
    valid_orders,
    reset,
    taylor_coefficients,
    taylor_derivatives,
    TaylorExpander,
)

__all__ = [
    # Core
    'TSeries',
    'OpKind',
    # Config
    'EngineConfig',
    'get_config',
    'use_config',
    # Errors
    'TaylorError',
    'OrderNotComputed',
    'SingularExpansion',
    'DomainError',
    'TaylorWarning',
    # Operations
    'add', 'sub', 'mul', 'div', 'neg', 'pos', 'pow', 'square',
    'exp', 'log', 'sqrt',
    'sin', 'cos', 'tan', 'asin', 'acos', 'atan',
    'erf', 'norm_cdf',
    # Drivers
    'taylor',
    'value',
    'variable',
    'evaluate',
    'nth_derivative',
    'highest_valid_order',
    'valid_orders',
    'reset',
    'taylor_coefficients',
    'taylor_derivatives',
    'TaylorExpander',
]
