"""
gibbons: directed acyclic multigraphs built from combinators.
"""

__version__ = "0.1.0"

# ============================================================================
# CORE IMPORTS
# ============================================================================

from .core import (
    # Graph values
    Graph,
    Edge,
    Vertex,
    Swap,
    Empty,
    Seq,
    Before,
    Par,

    # Constructors and combinators
    arity,
    edge,
    wire,
    vertex,
    labeled_vertex,
    swap,
    empty,
    seq,
    before,
    par,
    beside,
    replicate,
    chain,

    # Activations
    ActivationRegistry,
    register_activation,
    get_activation,

    # Networks
    Network,
)

from .utils import load_config, apply_config, setup_logging

# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'Graph',
    'Edge',
    'Vertex',
    'Swap',
    'Empty',
    'Seq',
    'Before',
    'Par',
    'arity',
    'edge',
    'wire',
    'vertex',
    'labeled_vertex',
    'swap',
    'empty',
    'seq',
    'before',
    'par',
    'beside',
    'replicate',
    'chain',
    'ActivationRegistry',
    'register_activation',
    'get_activation',
    'Network',
    'load_config',
    'apply_config',
    'setup_logging',
]
