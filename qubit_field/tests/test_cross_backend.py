# qubit_field/tests/test_cross_backend.py
import numpy as np
import pytest

from qubit_field import apply_numpy, apply_serial
from qubit_field.circuit import Circuit
from qubit_field.errors import InvalidArgument, InvalidState
from qubit_field.gates import Gate
from qubit_field.state import QubitState, STATE_ZERO

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def random_state(rng):
    v = rng.normal(size=2) + 1j*rng.normal(size=2)
    return QubitState.from_numpy(v / np.linalg.norm(v))

def test_serial_vs_numpy_each_gate():
    rng = np.random.default_rng(123)
    for _ in range(25):
        st = random_state(rng)
        for g in Gate:
            s = apply_serial.apply_gate(st, g)
            n = apply_numpy.apply_gate(st, g)
            assert max_abs_diff(s.as_numpy(), n.as_numpy()) < 1e-12

def test_random_circuits_match():
    rng = np.random.default_rng(123)
    gates = list(Gate)
    for depth in (5, 10, 20):
        c = Circuit.empty()
        for _ in range(depth):
            c.add(gates[int(rng.integers(0, len(gates)))])
        init = random_state(rng)
        s = c.run(initial=init, backend="serial")
        t = c.run(initial=init, backend="numpy")
        assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-12, rtol=0)

def test_parse_and_builders_agree():
    assert Circuit.parse("H, z x").ops == Circuit.empty().h().z().x().ops
    assert Circuit.parse("").ops == []
    assert len(Circuit.parse("S T Y")) == 3

def test_parse_rejects_unknown_tag():
    with pytest.raises(InvalidArgument):
        Circuit.parse("H,Q")

def test_unknown_backend():
    with pytest.raises(NotImplementedError):
        Circuit.empty().h().run(backend="gpu")

def test_run_checks_norm():
    bad = QubitState.from_numpy(np.array([1.0, 1.0]))
    with pytest.raises(InvalidState):
        Circuit.empty().x().run(initial=bad)
    st = Circuit.empty().x().run(initial=bad, check_norm=False)
    assert st.norm2() == pytest.approx(2.0)

def test_run_defaults_to_zero_state():
    assert Circuit.empty().run() == STATE_ZERO
