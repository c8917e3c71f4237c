# qubit_field/tests/test_bloch.py
import math

import numpy as np
import pytest

from qubit_field import config
from qubit_field.apply_serial import apply_gate
from qubit_field.bloch import bloch_angles, bloch_coordinates
from qubit_field.complex_math import make
from qubit_field.errors import InvalidState
from qubit_field.state import QubitState, STATE_ONE, STATE_ZERO

def test_poles():
    assert bloch_coordinates(STATE_ZERO) == pytest.approx((0, 0, 1), abs=1e-9)
    assert bloch_coordinates(STATE_ONE) == pytest.approx((0, 0, -1), abs=1e-9)

def test_hadamard_lands_on_equator():
    b = bloch_coordinates(apply_gate(STATE_ZERO, "H"))
    assert b.z == pytest.approx(0.0, abs=1e-9)
    assert b.x**2 + b.y**2 == pytest.approx(1.0, abs=1e-9)

def test_s_rotates_plus_to_plus_y():
    st = apply_gate(apply_gate(STATE_ZERO, "H"), "S")
    assert bloch_coordinates(st) == pytest.approx((0, 1, 0), abs=1e-9)

def test_unit_sphere_for_random_states():
    rng = np.random.default_rng(9)
    for _ in range(100):
        v = rng.normal(size=2) + 1j*rng.normal(size=2)
        b = bloch_coordinates(QubitState.from_numpy(v / np.linalg.norm(v)))
        assert all(-1 - 1e-12 <= c <= 1 + 1e-12 for c in b)
        assert b.x**2 + b.y**2 + b.z**2 == pytest.approx(1.0, abs=1e-9)

def test_relative_phase_only():
    # a global phase on both amplitudes does not move the point
    r = 1 / math.sqrt(2)
    st = QubitState(make(0, r), make(0, r))
    assert bloch_coordinates(st) == pytest.approx((1, 0, 0), abs=1e-9)

def test_overshoot_is_clamped():
    st = QubitState(make(0, 0), make(1 + 1e-12, 0))
    theta, _ = bloch_angles(st)
    assert theta == pytest.approx(math.pi)

def test_validate_flag(monkeypatch):
    bad = QubitState(make(1, 0), make(1, 0))
    bloch_coordinates(bad)
    with pytest.raises(InvalidState):
        bloch_coordinates(bad, validate=True)
    monkeypatch.setattr(config, "NORM_TOL", 2.0)
    bloch_coordinates(bad, validate=True)
