"""
Core algebra: graph values, activation registry, network topologies.

Example:
    >>> from gibbons.core import edge, vertex, seq, par
    >>> seq(par(edge(1), edge(1)), vertex(2, 1, 'add')).arity
    (2, 1)
"""

from .graph import (
    Graph,
    Edge,
    Vertex,
    Swap,
    Empty,
    Seq,
    Before,
    Par,
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
)

from .registry import (
    ActivationRegistry,
    register_activation,
    get_activation,
    resolve_activation,
)

from .network import Network

__all__ = [
    # Graph values
    'Graph',
    'Edge',
    'Vertex',
    'Swap',
    'Empty',
    'Seq',
    'Before',
    'Par',

    # Constructors and combinators
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

    # Activations
    'ActivationRegistry',
    'register_activation',
    'get_activation',
    'resolve_activation',

    # Networks
    'Network',
]
