# qubit_field/gates.py
import math
from enum import Enum
from typing import Dict, Tuple, Union

import numpy as np

from .complex_math import Complex, ZERO, ONE, NEG_ONE, I, NEG_I, make, exp_imaginary
from .errors import InvalidArgument

Row = Tuple[Complex, Complex]
Matrix2x2 = Tuple[Row, Row]


class Gate(Enum):
    H = "H"  # Hadamard
    X = "X"  # Pauli-X (bit flip)
    Y = "Y"  # Pauli-Y
    Z = "Z"  # Pauli-Z (phase flip)
    S = "S"  # phase, pi/2 about z
    T = "T"  # pi/4 phase

    @classmethod
    def parse(cls, name: Union["Gate", str]) -> "Gate":
        if isinstance(name, Gate):
            return name
        if isinstance(name, str):
            try:
                return cls(name.strip().upper())
            except ValueError:
                pass
        raise InvalidArgument(f"Unknown gate {name!r}; expected one of "
                              f"{', '.join(g.value for g in cls)}")


_INV_SQRT2 = 1.0 / math.sqrt(2.0)

GATES: Dict[Gate, Matrix2x2] = {
    Gate.H: ((make(_INV_SQRT2, 0.0), make(_INV_SQRT2, 0.0)),
             (make(_INV_SQRT2, 0.0), make(-_INV_SQRT2, 0.0))),
    Gate.X: ((ZERO, ONE),
             (ONE, ZERO)),
    Gate.Y: ((ZERO, NEG_I),
             (I, ZERO)),
    Gate.Z: ((ONE, ZERO),
             (ZERO, NEG_ONE)),
    Gate.S: ((ONE, ZERO),
             (ZERO, I)),
    Gate.T: ((ONE, ZERO),
             (ZERO, exp_imaginary(math.pi / 4))),
}


def matrix(gate: Union[Gate, str]) -> Matrix2x2:
    return GATES[Gate.parse(gate)]


def as_array(gate: Union[Gate, str], dtype=np.complex128) -> np.ndarray:
    """2x2 numpy copy of a catalogue matrix."""
    m = matrix(gate)
    return np.array([[m[0][0].to_builtin(), m[0][1].to_builtin()],
                     [m[1][0].to_builtin(), m[1][1].to_builtin()]], dtype=dtype)
