# qubit_field/measurement.py
"""
Born-rule probability and projective measurement in the computational basis.

measure() is the only place randomness enters the engine. The random source
is injectable: pass a numpy Generator, a random.Random, an int seed, or any
object with a random() method returning a float in [0, 1).
"""
import logging
from typing import List, NamedTuple

import numpy as np

from .complex_math import magnitude
from .errors import InvalidArgument
from .state import QubitState, STATE_ONE, STATE_ZERO

logger = logging.getLogger(__name__)


class Measurement(NamedTuple):
    collapsed_state: QubitState
    outcome: int  # 0 or 1


def probability_of_one(state: QubitState) -> float:
    """|beta|^2, unclamped (a non-normalized state can give > 1)."""
    m = magnitude(state.beta)
    return m * m


def resolve_rng(rng=None):
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)):
        return np.random.default_rng(int(rng))
    if not hasattr(rng, "random"):
        raise InvalidArgument(f"rng must provide random(), got {type(rng).__name__}")
    return rng


def outcome_for_draw(state: QubitState, u: float) -> Measurement:
    if u < probability_of_one(state):
        return Measurement(STATE_ONE, 1)
    return Measurement(STATE_ZERO, 0)


def measure(state: QubitState, rng=None, validate: bool = False) -> Measurement:
    """
    Collapse `state` to |0> or |1>.

    Draws u ~ U[0, 1) once; outcome is 1 iff u < |beta|^2. With validate=True
    the normalization invariant is checked first (raises InvalidState).
    """
    if validate:
        state.check_normalized()
    u = float(resolve_rng(rng).random())
    result = outcome_for_draw(state, u)
    logger.debug("measure: u=%.6f p1=%.6f -> %d", u, probability_of_one(state), result.outcome)
    return result


def sample(state: QubitState, shots: int, rng=None) -> List[int]:
    """Outcomes of `shots` independent measurements of the same state."""
    if shots < 0:
        raise InvalidArgument(f"shots must be >= 0, got {shots}")
    rng = resolve_rng(rng)
    return [measure(state, rng).outcome for _ in range(shots)]
