"""
Feed-forward network topologies.

A Network is a graph whose vertices are neurons labeled with activation
functions. It only describes wiring; running the network is up to whoever
interprets the activations.

Example:
    >>> # xor-style network
    >>> #
    >>> #            +-------+
    >>> # Input A ---+       +--- Neuron A ---+
    >>> #            +--- ---+                +
    >>> #                X                    +--- Output
    >>> #            +--- ---+                +
    >>> # Input B ---+       +--- Neuron B ---+
    >>> #            +-------+
    >>> inputs = Network.par(Network.edge(2), Network.edge(2))
    >>> cross = Network.par(Network.par(Network.edge(1), Network.swap(1, 1)), Network.edge(1))
    >>> hidden = Network.replicate(2, Network.neuron(2, 1, 'tanh'))
    >>> output = Network.neuron(2, 1, 'tanh')
    >>> net = Network.chain(inputs, cross, hidden, output)
    >>> net.arity
    (2, 1)
"""

from typing import Optional, Union

from .graph import Arity, Graph
from .graph import chain, edge, par, replicate, seq, swap, vertex
from .registry import Activation, ActivationName, resolve_activation


class Network:
    """
    Network topology wrapping a Graph of activation-labeled vertices.

    Constructors mirror the graph algebra. ``seq`` and ``chain`` return None
    when ports do not match, exactly like their graph counterparts.

    Attributes:
        graph: Underlying graph value
    """

    __slots__ = ('graph',)

    def __init__(self, graph: Graph[Activation, None]):
        self.graph = graph

    # ------------------------------------------------------------------
    # Atoms
    # ------------------------------------------------------------------

    @classmethod
    def edge(cls, n: int = 1) -> 'Network':
        """Fan one input into ``n`` outputs."""
        return cls(edge(n))

    @classmethod
    def neuron(
        cls,
        m: int,
        n: int,
        activation: Union[ActivationName, Activation, None] = None
    ) -> 'Network':
        """
        Neuron with ``m`` inputs and ``n`` outputs.

        Args:
            m: Number of inputs
            n: Number of outputs
            activation: Activation callable, registered name, or None for the
                registry default

        Returns:
            Single-neuron network

        Raises:
            ValueError: If activation names an unregistered activation
        """
        return cls(vertex(m, n, resolve_activation(activation)))

    @classmethod
    def swap(cls, m: int, n: int) -> 'Network':
        """Cross a block of ``m`` wires over a block of ``n`` wires."""
        return cls(swap(m, n))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    @classmethod
    def seq(cls, x: 'Network', y: 'Network') -> Optional['Network']:
        """Feed ``x`` into ``y``; None if the port counts differ."""
        graph = seq(x.graph, y.graph)
        return None if graph is None else cls(graph)

    @classmethod
    def par(cls, x: 'Network', y: 'Network') -> 'Network':
        """Place ``x`` beside ``y``."""
        return cls(par(x.graph, y.graph))

    @classmethod
    def replicate(cls, n: int, x: 'Network') -> 'Network':
        """``n`` copies of ``x`` side by side (a layer of identical neurons)."""
        return cls(replicate(n, x.graph))

    @classmethod
    def chain(cls, *networks: 'Network') -> Optional['Network']:
        """Feed each network into the next; None at the first mismatch."""
        graph = chain(*(network.graph for network in networks))
        return None if graph is None else cls(graph)

    # ------------------------------------------------------------------
    # Ports
    # ------------------------------------------------------------------

    @property
    def arity(self) -> Arity:
        return self.graph.arity

    @property
    def entries(self) -> int:
        return self.graph.entries

    @property
    def exits(self) -> int:
        return self.graph.exits

    def __repr__(self) -> str:
        return f"Network(entries={self.entries}, exits={self.exits})"
