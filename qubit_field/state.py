# qubit_field/state.py
import numpy as np
from dataclasses import dataclass
from typing import Optional

from . import config
from .complex_math import Complex, make, magnitude
from .errors import InvalidArgument, InvalidState

@dataclass(frozen=True)
class QubitState:
    alpha: Complex  # amplitude of |0>
    beta: Complex   # amplitude of |1>

    @staticmethod
    def zero() -> "QubitState":
        return QubitState(alpha=make(1.0, 0.0), beta=make(0.0, 0.0))

    @staticmethod
    def one() -> "QubitState":
        return QubitState(alpha=make(0.0, 0.0), beta=make(1.0, 0.0))

    @staticmethod
    def from_numpy(psi) -> "QubitState":
        psi = np.asarray(psi)
        if psi.shape != (2,):
            raise InvalidArgument(f"expected a length-2 amplitude vector, got shape {psi.shape}")
        return QubitState(Complex.from_builtin(psi[0]), Complex.from_builtin(psi[1]))

    def norm2(self) -> float:
        return magnitude(self.alpha)**2 + magnitude(self.beta)**2

    def check_normalized(self, tol: Optional[float] = None) -> "QubitState":
        if tol is None:
            tol = config.NORM_TOL
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise InvalidState(f"Normalization failed: |alpha|^2+|beta|^2={n2}")
        return self

    def as_numpy(self, dtype=np.complex128) -> np.ndarray:
        return np.array([self.alpha.to_builtin(), self.beta.to_builtin()], dtype=dtype)


STATE_ZERO = QubitState.zero()
STATE_ONE = QubitState.one()
