# qubit_field/apply_numpy.py
from typing import Union

import numpy as np

from .gates import Gate, as_array
from .state import QubitState

# Same contract as apply_serial, but through a numpy matrix-vector product.

def apply_single_qubit(state: QubitState, U2: np.ndarray) -> QubitState:
    assert U2.shape == (2, 2)
    psi = state.as_numpy(dtype=U2.dtype)
    return QubitState.from_numpy(U2 @ psi)

def apply_gate(state: QubitState, gate: Union[Gate, str]) -> QubitState:
    return apply_single_qubit(state, as_array(Gate.parse(gate)))
