# qubit_field/apply_serial.py
import logging
from typing import Union

from .complex_math import add, multiply
from .gates import Gate, Matrix2x2, matrix
from .state import QubitState

logger = logging.getLogger(__name__)

def apply_single_qubit(state: QubitState, U2: Matrix2x2) -> QubitState:
    """Apply a 2x2 matrix of Complex entries to (alpha, beta); returns a new state."""
    a0 = state.alpha
    a1 = state.beta
    new_alpha = add(multiply(U2[0][0], a0), multiply(U2[0][1], a1))
    new_beta = add(multiply(U2[1][0], a0), multiply(U2[1][1], a1))
    return QubitState(new_alpha, new_beta)

def apply_gate(state: QubitState, gate: Union[Gate, str]) -> QubitState:
    # resolve first so an unknown name fails before any arithmetic
    g = Gate.parse(gate)
    logger.debug("apply %s", g.value)
    return apply_single_qubit(state, matrix(g))
