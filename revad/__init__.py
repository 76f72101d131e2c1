# revad/__init__.py
# Tape-based reverse-mode automatic differentiation

from .config import ADConfig, config
from .core.node import IGNORE, Node, Op
from .core.tape import Tape
from .core.var import Codual
from .core.engine import adjoints, reverse
from .core.result import Result
from .core.seeds import (
    derivative_at,
    derivative_at_list,
    differentiate,
    differentiate_list,
    grad,
    record,
    value,
)
from .core.graph_utils import (
    get_graph_stats,
    print_computation_graph,
    print_graph_summary,
)
from . import ops
from .ops import (
    absolute,
    cos,
    cos_deg,
    exp,
    log,
    sin,
    sin_deg,
)

# Forward mode
from .forward import (
    Dual,
    Number,
    apply,
    dual_derivative_at,
    forward_derivative_at,
    forward_derivative_at_list,
)
from .check import GradientCheck, check_gradient

__all__ = [
    # Config
    'ADConfig',
    'config',
    # Tape
    'IGNORE',
    'Node',
    'Op',
    'Tape',
    'Codual',
    # Engine
    'adjoints',
    'reverse',
    # Driver
    'Result',
    'derivative_at',
    'derivative_at_list',
    'differentiate',
    'differentiate_list',
    'grad',
    'record',
    'value',
    # Diagnostics
    'get_graph_stats',
    'print_computation_graph',
    'print_graph_summary',
    'GradientCheck',
    'check_gradient',
    # Elementary functions
    'ops',
    'absolute',
    'cos',
    'cos_deg',
    'exp',
    'log',
    'sin',
    'sin_deg',
    # Forward mode
    'Dual',
    'Number',
    'apply',
    'dual_derivative_at',
    'forward_derivative_at',
    'forward_derivative_at_list',
]
