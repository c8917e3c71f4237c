"""
Public API for the qubit_field package.

    from qubit_field import STATE_ZERO, apply_gate, probability_of_one, measure, bloch_coordinates
"""

from .complex_math import Complex, make, add, multiply, magnitude, exp_imaginary, format_complex
from .errors import QubitFieldError, InvalidArgument, InvalidState, FieldError
from .state import QubitState, STATE_ZERO, STATE_ONE
from .gates import Gate, GATES
from .apply_serial import apply_gate
from .measurement import Measurement, probability_of_one, measure, outcome_for_draw, sample
from .bloch import BlochPoint, bloch_coordinates, bloch_angles
from .circuit import Circuit
from .field import Field, NodeType, QuantumNode, EntanglementLink, strength_tier

__all__ = [
    "Complex", "make", "add", "multiply", "magnitude", "exp_imaginary", "format_complex",
    "QubitFieldError", "InvalidArgument", "InvalidState", "FieldError",
    "QubitState", "STATE_ZERO", "STATE_ONE",
    "Gate", "GATES", "apply_gate",
    "Measurement", "probability_of_one", "measure", "outcome_for_draw", "sample",
    "BlochPoint", "bloch_coordinates", "bloch_angles",
    "Circuit",
    "Field", "NodeType", "QuantumNode", "EntanglementLink", "strength_tier",
]
