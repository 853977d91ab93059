"""
Tests for the graph algebra.

Tests:
- Arity of atoms
- Strict sequential composition
- Lenient sequential composition
- Parallel composition
- Replication and operators
- Structural sharing and immutability
- End-to-end crossbar wiring
"""

import dataclasses
import logging

import pytest

from gibbons.core.graph import (
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


# ============================================================================
# TEST FIXTURES
# ============================================================================


@pytest.fixture
def neuron():
    """A 2-in / 1-out vertex."""
    return vertex(2, 1, 'tanh')


@pytest.fixture
def crossbar_stages():
    """Stages of the 2-input xor network, 2 -> 4 -> 4 -> 2 -> 1."""
    inputs = par(edge(2), edge(2))
    cross = par(par(edge(1), swap(1, 1)), edge(1))
    hidden = par(vertex(2, 1, 'tanh'), vertex(2, 1, 'tanh'))
    output = vertex(2, 1, 'tanh')
    return inputs, cross, hidden, output


# ============================================================================
# ATOM TESTS
# ============================================================================


class TestAtoms:
    """Test arity of atomic constructors."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_edge_fans_out(self, n):
        """Test edge(n) has one entry and n exits."""
        assert arity(edge(n)) == (1, n)

    def test_edge_default_is_wire(self):
        """Test edge() defaults to a single exit."""
        assert edge().arity == (1, 1)

    def test_wire(self):
        """Test wire is the identity wire."""
        w = wire()

        assert isinstance(w, Edge)
        assert w.arity == (1, 1)

    def test_vertex(self):
        """Test vertex keeps its counts and label."""
        v = vertex(3, 2, 'relu')

        assert v.arity == (3, 2)
        assert v.entries == 3
        assert v.exits == 2
        assert v.label == 'relu'
        assert v.inputs == ()
        assert v.outputs == ()

    def test_vertex_counts_not_validated(self):
        """Test vertex accepts any counts, including zero."""
        assert vertex(0, 0, None).arity == (0, 0)

    def test_labeled_vertex_derives_counts(self):
        """Test labeled_vertex arity comes from port label sequences."""
        v = labeled_vertex(['x', 'y', 'z'], ['out'], 'sum')

        assert v.arity == (3, 1)
        assert list(v.inputs) == ['x', 'y', 'z']
        assert list(v.outputs) == ['out']

    def test_labeled_vertex_shares_port_labels(self):
        """Test port label sequences are stored by reference."""
        inputs = ('a', 'b')
        outputs = ('c',)

        v = labeled_vertex(inputs, outputs, 'f')

        assert v.inputs is inputs
        assert v.outputs is outputs

    @pytest.mark.parametrize("m,n", [(0, 0), (1, 1), (1, 3), (4, 2)])
    def test_swap(self, m, n):
        """Test swap(m, n) has m+n entries and n+m exits."""
        assert arity(swap(m, n)) == (m + n, n + m)

    def test_empty(self):
        """Test empty graph has no ports."""
        e = empty()

        assert isinstance(e, Empty)
        assert e.arity == (0, 0)

    def test_all_atoms_are_graphs(self):
        """Test every atom is a Graph."""
        for g in [edge(2), wire(), vertex(1, 1, None), swap(1, 2), empty()]:
            assert isinstance(g, Graph)


# ============================================================================
# STRICT SEQUENTIAL COMPOSITION TESTS
# ============================================================================


class TestSeq:
    """Test strict sequential composition."""

    def test_matching_ports(self, neuron):
        """Test seq succeeds when exits(x) == entries(y)."""
        g = seq(edge(2), neuron)

        assert isinstance(g, Seq)
        assert g.arity == (1, 1)

    def test_mismatched_ports_is_none(self):
        """Test 2 exits into 3 entries is rejected."""
        assert seq(edge(2), vertex(3, 1, 'tanh')) is None

    @pytest.mark.parametrize("exits,entries", [
        (1, 1), (2, 2), (3, 3), (1, 2), (2, 1), (0, 1), (4, 3),
    ])
    def test_present_iff_counts_match(self, exits, entries):
        """Test seq is present exactly when counts agree."""
        x = vertex(5, exits, 'x')
        y = vertex(entries, 7, 'y')

        result = seq(x, y)

        if exits == entries:
            assert result is not None
            assert result.arity == (5, 7)
        else:
            assert result is None

    def test_result_arity_from_operands(self):
        """Test result takes entries of x and exits of y."""
        g = seq(swap(1, 2), vertex(3, 4, None))

        assert g.arity == (3, 4)

    def test_children_kept(self, neuron):
        """Test Seq holds the very operands it was given."""
        x = edge(2)
        g = seq(x, neuron)

        assert g.left is x
        assert g.right is neuron

    def test_rejection_is_logged(self, caplog):
        """Test rejected composition emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger='gibbons.core.graph'):
            seq(edge(2), vertex(3, 1, 'tanh'))

        assert "seq rejected" in caplog.text

    def test_cached_arity_not_recomputed(self, neuron):
        """Test arity reads the cached fields, not the children."""
        g = seq(edge(2), neuron)
        fake = dataclasses.replace(g, m=10, n=20)

        assert fake.arity == (10, 20)


# ============================================================================
# LENIENT SEQUENTIAL COMPOSITION TESTS
# ============================================================================


class TestBefore:
    """Test lenient sequential composition."""

    def test_matching_ports(self, neuron):
        """Test before behaves like seq on matching ports."""
        g = before(edge(2), neuron)

        assert isinstance(g, Before)
        assert g.arity == (1, 1)

    def test_mismatched_ports_still_present(self):
        """Test before accepts 2 exits into 3 entries."""
        g = before(edge(2), vertex(3, 1, 'tanh'))

        assert g is not None
        assert g.arity == (1, 1)

    def test_distinct_from_seq(self, neuron):
        """Test lenient nodes are never Seq nodes."""
        g = before(edge(2), neuron)

        assert not isinstance(g, Seq)
        assert not isinstance(seq(edge(2), neuron), Before)

    def test_plus_operator(self):
        """Test x + y is lenient composition."""
        g = edge(2) + vertex(3, 1, 'tanh')

        assert isinstance(g, Before)
        assert g.arity == (1, 1)

    def test_plus_rejects_non_graph(self):
        """Test adding a non-graph raises TypeError."""
        with pytest.raises(TypeError):
            edge(1) + 1


# ============================================================================
# PARALLEL COMPOSITION TESTS
# ============================================================================


class TestPar:
    """Test parallel composition."""

    @pytest.mark.parametrize("x,y", [
        (edge(2), edge(3)),
        (vertex(2, 1, None), swap(1, 1)),
        (empty(), vertex(4, 4, None)),
        (empty(), empty()),
    ])
    def test_ports_add(self, x, y):
        """Test entries and exits add up."""
        g = par(x, y)

        assert isinstance(g, Par)
        assert g.arity == (x.entries + y.entries, x.exits + y.exits)

    def test_never_none(self):
        """Test par is total even for wildly different operands."""
        assert par(vertex(100, 0, None), edge(0)) is not None

    def test_beside_alias(self):
        """Test beside is par."""
        assert beside is par

    def test_times_operator(self):
        """Test x * y is parallel composition."""
        g = edge(2) * swap(1, 1)

        assert isinstance(g, Par)
        assert g.arity == (3, 4)

    def test_no_reassociation(self):
        """Test differently associated compositions are different values."""
        a, b, c = edge(1), edge(2), edge(3)

        left = par(par(a, b), c)
        right = par(a, par(b, c))

        assert left.arity == right.arity
        assert left != right
        assert isinstance(left.left, Par)
        assert isinstance(right.right, Par)


# ============================================================================
# REPLICATION TESTS
# ============================================================================


class TestReplicate:
    """Test replication."""

    def test_zero_is_empty(self, neuron):
        """Test replicate(0, g) has no ports."""
        g = replicate(0, neuron)

        assert isinstance(g, Empty)
        assert g.arity == (0, 0)

    @pytest.mark.parametrize("k", [1, 2, 3, 10])
    def test_arity_scales(self, k, neuron):
        """Test replicate(k, g) multiplies ports by k."""
        assert replicate(k, neuron).arity == (2 * k, k)

    def test_structure_is_right_nested(self, neuron):
        """Test replicate(2, g) is par(g, par(g, empty))."""
        g = replicate(2, neuron)

        assert isinstance(g, Par)
        assert g.left is neuron
        assert isinstance(g.right, Par)
        assert g.right.left is neuron
        assert isinstance(g.right.right, Empty)

    def test_large_count(self):
        """Test replication does not recurse per copy."""
        g = replicate(5000, wire())

        assert g.arity == (5000, 5000)

    def test_negative_count_error(self, neuron):
        """Test negative count raises."""
        with pytest.raises(ValueError, match=">= 0"):
            replicate(-1, neuron)

    def test_scalar_operators(self, neuron):
        """Test k * g and g * k replicate."""
        assert (3 * neuron).arity == (6, 3)
        assert (neuron * 3).arity == (6, 3)

    def test_bool_is_not_a_count(self, neuron):
        """Test booleans are not accepted as replication counts."""
        with pytest.raises(TypeError):
            True * neuron


# ============================================================================
# SHARING AND IMMUTABILITY TESTS
# ============================================================================


class TestSharing:
    """Test structural sharing and immutability."""

    def test_child_shared_by_two_parents(self, neuron):
        """Test one subgraph can sit under two parents without copies."""
        first = par(neuron, edge(1))
        second = seq(edge(2), neuron)

        assert first.left is second.right

    def test_replicate_shares(self, neuron):
        """Test every replica is the same object."""
        g = replicate(4, neuron)

        node = g
        while isinstance(node, Par):
            assert node.left is neuron
            node = node.right

    def test_frozen(self, neuron):
        """Test graph values cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            neuron.m = 5

        g = par(neuron, neuron)
        with pytest.raises(dataclasses.FrozenInstanceError):
            g.left = edge(1)

    def test_identity_equality(self):
        """Test structurally identical graphs are distinct values."""
        a = vertex(1, 1, 'f')
        b = vertex(1, 1, 'f')

        assert a == a
        assert a != b
        assert len({a, b}) == 2

    def test_repr_does_not_descend(self, neuron):
        """Test composite repr shows cached ports only."""
        g = par(neuron, neuron)

        assert repr(g) == "Par(m=4, n=2)"


# ============================================================================
# CHAIN TESTS
# ============================================================================


class TestChain:
    """Test chained strict composition."""

    def test_single_graph(self, neuron):
        """Test chain of one graph returns it."""
        assert chain(neuron) is neuron

    def test_stops_at_mismatch(self):
        """Test chain returns None when any join mismatches."""
        assert chain(edge(2), vertex(2, 3, None), vertex(2, 1, None)) is None

    def test_left_nested(self):
        """Test chain folds from the left."""
        a, b, c = edge(2), vertex(2, 2, None), vertex(2, 1, None)

        g = chain(a, b, c)

        assert isinstance(g, Seq)
        assert g.right is c
        assert g.left.left is a
        assert g.left.right is b

    def test_empty_chain_error(self):
        """Test chain needs at least one graph."""
        with pytest.raises(ValueError, match="at least one"):
            chain()


# ============================================================================
# END-TO-END TESTS
# ============================================================================


class TestCrossbar:
    """Test the xor crossbar built stage by stage."""

    def test_stage_arities(self, crossbar_stages):
        """Test every stage has the engineered port counts."""
        inputs, cross, hidden, output = crossbar_stages

        assert inputs.arity == (2, 4)
        assert cross.arity == (4, 4)
        assert hidden.arity == (4, 2)
        assert output.arity == (2, 1)

    def test_every_join_succeeds(self, crossbar_stages):
        """Test each strict join yields a value."""
        inputs, cross, hidden, output = crossbar_stages

        wired = seq(inputs, cross)
        assert wired is not None

        layered = seq(wired, hidden)
        assert layered is not None

        net = seq(layered, output)
        assert net is not None
        assert net.arity == (2, 1)

    def test_chain_matches_manual(self, crossbar_stages):
        """Test chain gives the same ports as manual composition."""
        assert chain(*crossbar_stages).arity == (2, 1)

    def test_wrong_order_rejected(self, crossbar_stages):
        """Test skipping the hidden layer fails to wire."""
        inputs, cross, _, output = crossbar_stages

        assert chain(inputs, cross, output) is None
