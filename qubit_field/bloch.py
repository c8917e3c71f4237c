# qubit_field/bloch.py
import math
from typing import NamedTuple, Tuple

from .complex_math import magnitude
from .state import QubitState


class BlochPoint(NamedTuple):
    x: float
    y: float
    z: float


def bloch_angles(state: QubitState, validate: bool = False) -> Tuple[float, float]:
    """
    (theta, phi) such that state ~ cos(theta/2)|0> + e^{i phi} sin(theta/2)|1>.

    phi is the relative phase arg(beta) - arg(alpha); atan2(0, 0) is 0, so the
    basis states get phi = 0.
    """
    if validate:
        state.check_normalized()
    m = min(max(magnitude(state.beta), 0.0), 1.0)  # clip float overshoot
    theta = 2.0 * math.asin(m)
    phi = math.atan2(state.beta.i, state.beta.r) - math.atan2(state.alpha.i, state.alpha.r)
    return theta, phi


def bloch_coordinates(state: QubitState, validate: bool = False) -> BlochPoint:
    theta, phi = bloch_angles(state, validate=validate)
    return BlochPoint(math.sin(theta) * math.cos(phi),
                      math.sin(theta) * math.sin(phi),
                      math.cos(theta))
