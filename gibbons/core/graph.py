"""
Directed acyclic multigraphs as an initial algebra.

Follows Jeremy Gibbons, "An Initial Algebra Approach to Directed Acyclic
Graphs": a graph is never mutated node by node, it is built from a handful
of atoms and two ways of combining graphs.

Atoms:
- Edge: a fan with one entry and ``n`` exits
- Vertex: a labeled node with ``m`` entries and ``n`` exits
- Swap: exchanges a block of ``m`` ports with a block of ``n`` ports
- Empty: no ports at all (unit of replication)

Combinators:
- seq: strict sequential composition, ``None`` on port mismatch
- before: lenient sequential composition, never checks ports
- par: parallel composition, always succeeds
- replicate: ``n`` copies of a graph side by side

Key Design Principles:
- Immutable values (a graph is never modified after construction)
- Structural sharing (children are held by reference, never copied)
- O(1) arity (composites cache their entry/exit counts)
- Acyclic by construction (no constructor can introduce a cycle)

Example:
    >>> inputs = par(edge(2), edge(2))
    >>> cross = par(par(edge(1), swap(1, 1)), edge(1))
    >>> net = chain(inputs, cross, par(vertex(2, 1, 'tanh'), vertex(2, 1, 'tanh')))
    >>> net.arity
    (2, 2)
    >>> seq(edge(2), vertex(3, 1, 'tanh')) is None
    True
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Sequence, Tuple, TypeVar


logger = logging.getLogger(__name__)

A = TypeVar('A')  # vertex label
T = TypeVar('T')  # port label

Arity = Tuple[int, int]


# ============================================================================
# BASE TYPE
# ============================================================================


class Graph(Generic[A, T]):
    """
    Base class of every graph value.

    Subclasses form a closed set: Edge, Vertex, Swap, Empty, Seq, Before, Par.
    Values compare and hash by identity; the algebra has no notion of two
    differently built graphs being equal.

    Operators:
        x + y       lenient sequential composition (``before``)
        x * y       parallel composition (``par``)
        k * x       replication (``replicate``), also ``x * k``

    The strict sequential composition has no operator because it can return
    ``None``; use ``seq`` or ``chain``.
    """

    __slots__ = ()

    @property
    def arity(self) -> Arity:
        """(entries, exits) of this graph."""
        raise NotImplementedError

    @property
    def entries(self) -> int:
        """Number of input ports."""
        return self.arity[0]

    @property
    def exits(self) -> int:
        """Number of output ports."""
        return self.arity[1]

    def __add__(self, other: Any) -> 'Graph[A, T]':
        if not isinstance(other, Graph):
            return NotImplemented
        return before(self, other)

    def __mul__(self, other: Any) -> 'Graph[A, T]':
        if isinstance(other, Graph):
            return par(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return replicate(other, self)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'Graph[A, T]':
        if isinstance(other, int) and not isinstance(other, bool):
            return replicate(other, self)
        return NotImplemented


# ============================================================================
# ATOMS
# ============================================================================


@dataclass(frozen=True, eq=False)
class Edge(Graph[A, T]):
    """
    Fan primitive: one entry threaded into ``n`` exits.

    ``Edge(1)`` is the plain identity wire.
    """
    n: int

    @property
    def arity(self) -> Arity:
        return (1, self.n)


@dataclass(frozen=True, eq=False)
class Vertex(Graph[A, T]):
    """
    Labeled node with ``m`` entries and ``n`` exits.

    Attributes:
        m: Number of entries
        n: Number of exits
        label: Payload interpreted by the caller (e.g. an activation)
        inputs: Optional per-entry port labels
        outputs: Optional per-exit port labels
    """
    m: int
    n: int
    label: A
    inputs: Sequence[T] = ()
    outputs: Sequence[T] = ()

    @property
    def arity(self) -> Arity:
        return (self.m, self.n)


@dataclass(frozen=True, eq=False)
class Swap(Graph[A, T]):
    """Route a block of ``m`` ports and a block of ``n`` ports in swapped order."""
    m: int
    n: int

    @property
    def arity(self) -> Arity:
        return (self.m + self.n, self.n + self.m)


@dataclass(frozen=True, eq=False)
class Empty(Graph[A, T]):
    """The graph with no ports."""

    @property
    def arity(self) -> Arity:
        return (0, 0)


# ============================================================================
# COMPOSITES
# ============================================================================


@dataclass(frozen=True, eq=False)
class _Composite(Graph[A, T]):
    """
    Binary node with cached arity.

    ``m``/``n`` are fixed by the smart constructors below and never
    recomputed from the children.
    """
    m: int
    n: int
    left: Graph[A, T] = field(repr=False)
    right: Graph[A, T] = field(repr=False)

    @property
    def arity(self) -> Arity:
        return (self.m, self.n)


@dataclass(frozen=True, eq=False)
class Seq(_Composite[A, T]):
    """``left`` followed by ``right``; only built when their ports match."""


@dataclass(frozen=True, eq=False)
class Before(_Composite[A, T]):
    """``left`` followed by ``right`` with no port check."""


@dataclass(frozen=True, eq=False)
class Par(_Composite[A, T]):
    """``left`` beside ``right``."""


# ============================================================================
# SMART CONSTRUCTORS
# ============================================================================


def arity(graph: Graph[A, T]) -> Arity:
    """
    Return ``(entries, exits)`` of any graph in O(1).

    Example:
        >>> arity(swap(2, 3))
        (5, 5)
    """
    return graph.arity


def edge(n: int = 1) -> Edge:
    """Fan primitive with arity ``(1, n)``."""
    return Edge(n)


def wire() -> Edge:
    """Identity wire, arity ``(1, 1)``."""
    return Edge(1)


def vertex(m: int, n: int, label: A) -> Vertex:
    """
    Labeled node with ``m`` anonymous entries and ``n`` anonymous exits.

    Args:
        m: Number of entries
        n: Number of exits
        label: Vertex payload

    Returns:
        Vertex with arity ``(m, n)``
    """
    return Vertex(m, n, label)


def labeled_vertex(inputs: Sequence[T], outputs: Sequence[T], label: A) -> Vertex:
    """
    Labeled node whose ports are individually named.

    The arity is taken from the lengths of ``inputs`` and ``outputs``. Both
    sequences are stored as given, not copied.

    Example:
        >>> v = labeled_vertex(['x', 'y'], ['z'], 'add')
        >>> v.arity
        (2, 1)
    """
    return Vertex(len(inputs), len(outputs), label, inputs, outputs)


def swap(m: int, n: int) -> Swap:
    """Permutation exchanging a block of ``m`` ports with a block of ``n``."""
    return Swap(m, n)


def empty() -> Empty:
    """The zero-port graph."""
    return Empty()


def seq(x: Graph[A, T], y: Graph[A, T]) -> Optional[Seq]:
    """
    Strict sequential composition.

    Connects the exits of ``x`` to the entries of ``y``. This is the only
    place a badly wired topology is rejected.

    Args:
        x: Upstream graph
        y: Downstream graph

    Returns:
        Seq with arity ``(entries(x), exits(y))``, or None if
        ``exits(x) != entries(y)``

    Example:
        >>> seq(edge(2), vertex(2, 1, 'tanh')).arity
        (1, 1)
        >>> seq(edge(2), vertex(3, 1, 'tanh')) is None
        True
    """
    m, n = x.arity
    p, q = y.arity

    if n != p:
        logger.debug(f"seq rejected: {n} exits cannot feed {p} entries")
        return None

    return Seq(m, q, x, y)


def before(x: Graph[A, T], y: Graph[A, T]) -> Before:
    """
    Lenient sequential composition.

    Same shape as ``seq`` but never checks ``exits(x) == entries(y)``. The
    result claims ``(entries(x), exits(y))`` even when the ports cannot be
    wired together; only use it when the counts are known to match.
    """
    m, _ = x.arity
    _, q = y.arity

    return Before(m, q, x, y)


def par(x: Graph[A, T], y: Graph[A, T]) -> Par:
    """
    Parallel composition.

    Always succeeds. Entries and exits add up. No re-association is done, so
    ``par(par(a, b), c)`` and ``par(a, par(b, c))`` are different values.
    """
    m, n = x.arity
    p, q = y.arity

    return Par(m + p, n + q, x, y)


beside = par


def replicate(n: int, graph: Graph[A, T]) -> Graph[A, T]:
    """
    Place ``n`` references to ``graph`` side by side.

    ``replicate(0, g)`` is Empty, ``replicate(k, g)`` is
    ``par(g, replicate(k - 1, g))``. The graph is shared, not copied.

    Args:
        n: Number of copies (>= 0)
        graph: Graph to replicate

    Returns:
        Right-nested parallel composition terminated by Empty

    Raises:
        ValueError: If n is negative

    Example:
        >>> replicate(3, vertex(2, 1, 'relu')).arity
        (6, 3)
    """
    if n < 0:
        raise ValueError(f"Cannot replicate a graph {n} times (n must be >= 0)")

    logger.debug(f"replicating graph with arity {graph.arity} x{n}")

    result: Graph[A, T] = empty()
    for _ in range(n):
        result = par(graph, result)

    return result


def chain(*graphs: Graph[A, T]) -> Optional[Graph[A, T]]:
    """
    Strictly compose graphs left to right.

    Stops at the first join whose ports do not match.

    Args:
        *graphs: One or more graphs

    Returns:
        The composed graph, or None if any join was rejected

    Raises:
        ValueError: If no graphs are given
    """
    if not graphs:
        raise ValueError("chain() needs at least one graph")

    result: Optional[Graph[A, T]] = graphs[0]
    for i, graph in enumerate(graphs[1:], start=1):
        result = seq(result, graph)
        if result is None:
            logger.debug(f"chain stopped at stage {i}")
            return None

    return result
