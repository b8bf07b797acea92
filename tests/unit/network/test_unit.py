"""
Unit tests for the Unit class.

Tests cover initialization, cloning, randomization, the split of the mutation
rate across connections, quantization and the forward computation.
"""

import math
import pytest
import numpy as np
from unittest.mock import Mock

from evonet.activations import Activation
from evonet.network import Connection, Group, Unit


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def wired_unit():
    """Unit with three connections (weights 0.5, -1.0, 2.0) and bias 0.25."""
    unit = Unit('identity')
    unit.bias = 0.25
    unit.connections = [Connection(0, 0.5), Connection(1, -1.0), Connection(2, 2.0)]
    return unit


@pytest.fixture
def source_group():
    """Input Group of three units with activations 1, 2, 3."""
    group = Group(3, 'identity')
    group.wire(None)
    group.activate_from_input([1.0, 2.0, 3.0])
    return group


def fixed_rng(value):
    rng = Mock()
    rng.uniform.return_value = value
    return rng


# ============================================================================
# Test: Constructor
# ============================================================================

class TestUnitInit:
    """Test Unit initialization."""

    def test_defaults(self):
        unit = Unit()
        assert unit.activation_fn is Activation.SIGMOID
        assert unit.bias == 0.0
        assert unit.activation == 0.0
        assert unit.connections == []

    def test_activation_by_name(self):
        assert Unit('relu').activation_fn is Activation.RELU
        assert Unit('TANH').activation_fn is Activation.TANH

    def test_unknown_activation_rejected(self):
        with pytest.raises(ValueError, match="Unknown activation function"):
            Unit('signoid')

    def test_activation_assignment_is_parsed(self):
        unit = Unit()
        unit.activation_fn = "relu"
        assert unit.activation_fn is Activation.RELU

    def test_unknown_activation_assignment_rejected(self):
        unit = Unit('tanh')
        with pytest.raises(ValueError, match="Unknown activation function"):
            unit.activation_fn = "softmax"
        assert unit.activation_fn is Activation.TANH


# ============================================================================
# Test: clone
# ============================================================================

class TestUnitClone:
    """Test Unit.clone()."""

    def test_clone_copies_everything(self, wired_unit):
        wired_unit.activation = 0.7
        clone = wired_unit.clone()
        assert clone.activation_fn is wired_unit.activation_fn
        assert clone.bias == wired_unit.bias
        assert clone.activation == 0.7
        assert [c.weight for c in clone.connections] == [0.5, -1.0, 2.0]
        assert [c.source_index for c in clone.connections] == [0, 1, 2]

    def test_clone_connections_are_independent(self, wired_unit):
        clone = wired_unit.clone()
        assert all(a is not b for a, b in zip(clone.connections, wired_unit.connections))
        clone.connections[0].weight = 42.0
        clone.bias = -3.0
        assert wired_unit.connections[0].weight == 0.5
        assert wired_unit.bias == 0.25


# ============================================================================
# Test: randomize
# ============================================================================

class TestUnitRandomize:
    """Test Unit.randomize()."""

    def test_bias_and_weights_in_unit_interval(self, wired_unit, rng):
        for _ in range(200):
            wired_unit.randomize(rng)
            assert -1.0 <= wired_unit.bias < 1.0
            assert all(-1.0 <= c.weight < 1.0 for c in wired_unit.connections)

    def test_draws_once_per_parameter(self, wired_unit):
        rng = fixed_rng(0.1)
        wired_unit.randomize(rng)
        assert rng.uniform.call_count == 4
        assert wired_unit.bias == 0.1
        assert all(c.weight == 0.1 for c in wired_unit.connections)


# ============================================================================
# Test: mutate
# ============================================================================

class TestUnitMutate:
    """Test Unit.mutate()."""

    def test_rate_split_across_connections(self, wired_unit):
        rng = fixed_rng(0.0)
        wired_unit.mutate(0.6, rng)
        calls = [call.args for call in rng.uniform.call_args_list]
        assert calls[0] == (-0.6, 0.6)
        for args in calls[1:]:
            assert args == pytest.approx((-0.2, 0.2))
        assert len(calls) == 4

    def test_perturbs_bias_and_weights(self, wired_unit):
        wired_unit.mutate(0.6, fixed_rng(0.01))
        assert wired_unit.bias == pytest.approx(0.26)
        assert [c.weight for c in wired_unit.connections] == pytest.approx([0.51, -0.99, 2.01])

    def test_unit_without_connections_only_mutates_bias(self):
        unit = Unit('identity')
        rng  = fixed_rng(0.05)
        unit.mutate(0.5, rng)
        rng.uniform.assert_called_once_with(-0.5, 0.5)
        assert unit.bias == pytest.approx(0.05)

    def test_perturbation_bounds(self, rng):
        for _ in range(500):
            unit = Unit('identity')
            unit.connections = [Connection(0), Connection(1)]
            unit.mutate(0.4, rng)
            assert -0.4 <= unit.bias < 0.4
            assert all(-0.2 <= c.weight < 0.2 for c in unit.connections)


# ============================================================================
# Test: quantize
# ============================================================================

class TestUnitQuantize:
    """Test Unit.quantize()."""

    def test_rounds_bias_and_weights(self):
        unit = Unit('identity')
        unit.bias = 0.14159
        unit.connections = [Connection(0, 2.71828), Connection(1, -1.41421)]
        unit.quantize(2)
        assert unit.bias == pytest.approx(0.14)
        assert [c.weight for c in unit.connections] == pytest.approx([2.72, -1.41])

    def test_idempotent(self, wired_unit, rng):
        wired_unit.randomize(rng)
        wired_unit.quantize(3)
        snapshot = [wired_unit.bias] + [c.weight for c in wired_unit.connections]
        wired_unit.quantize(3)
        assert [wired_unit.bias] + [c.weight for c in wired_unit.connections] == snapshot


# ============================================================================
# Test: set_activation / forward
# ============================================================================

class TestUnitForward:
    """Test Unit.set_activation() and Unit.forward()."""

    def test_set_activation(self):
        unit = Unit()
        unit.set_activation(-3.5)
        assert unit.activation == -3.5

    def test_identity_forward(self, wired_unit, source_group):
        # 0.5*1 - 1.0*2 + 2.0*3 + 0.25
        wired_unit.forward(source_group)
        assert wired_unit.activation == pytest.approx(4.75)

    def test_relu_clips_negative(self, wired_unit, source_group):
        wired_unit.activation_fn = Activation.RELU
        wired_unit.bias = -10.0
        wired_unit.forward(source_group)
        assert wired_unit.activation == 0.0

    def test_relu_passes_positive(self, wired_unit, source_group):
        wired_unit.activation_fn = Activation.RELU
        wired_unit.forward(source_group)
        assert wired_unit.activation == pytest.approx(4.75)

    def test_sigmoid(self, wired_unit, source_group):
        wired_unit.activation_fn = Activation.SIGMOID
        wired_unit.forward(source_group)
        assert wired_unit.activation == pytest.approx(1.0 / (1.0 + math.exp(-4.75)))

    def test_tanh(self, wired_unit, source_group):
        wired_unit.activation_fn = Activation.TANH
        wired_unit.forward(source_group)
        x = 4.75
        assert wired_unit.activation == pytest.approx((math.exp(x) - math.exp(-x)) / (math.exp(x) + math.exp(-x)))

    def test_reads_source_by_index(self, source_group):
        unit = Unit('identity')
        unit.connections = [Connection(2, 1.0)]
        unit.forward(source_group)
        assert unit.activation == 3.0

    def test_activation_is_python_float(self, wired_unit, source_group):
        wired_unit.activation_fn = Activation.SIGMOID
        wired_unit.forward(source_group)
        assert type(wired_unit.activation) is float
