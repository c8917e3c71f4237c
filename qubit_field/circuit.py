# qubit_field/circuit.py
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .gates import Gate
from .state import QubitState, STATE_ZERO

logger = logging.getLogger(__name__)

@dataclass
class Circuit:
    """Ordered gate list applied one after another to a single qubit."""
    ops: List[Gate] = field(default_factory=list)

    @staticmethod
    def empty() -> "Circuit":
        return Circuit([])

    @staticmethod
    def parse(text: str) -> "Circuit":
        # "H,Z,X" or "H Z X"
        names = [t for t in re.split(r"[\s,]+", text.strip()) if t]
        return Circuit([Gate.parse(n) for n in names])

    def add(self, gate: Union[Gate, str]) -> "Circuit":
        self.ops.append(Gate.parse(gate)); return self

    def h(self): return self.add(Gate.H)
    def x(self): return self.add(Gate.X)
    def y(self): return self.add(Gate.Y)
    def z(self): return self.add(Gate.Z)
    def s(self): return self.add(Gate.S)
    def t(self): return self.add(Gate.T)

    def __len__(self) -> int:
        return len(self.ops)

    def run(self, initial: QubitState = STATE_ZERO, backend: str = "serial",
            check_norm: bool = True, check_norm_tol: Optional[float] = None) -> QubitState:
        if backend == "serial":
            from .apply_serial import apply_gate
        elif backend == "numpy":
            from .apply_numpy import apply_gate
        else:
            raise NotImplementedError(f"Unknown backend: {backend}")

        st = initial
        for gate in self.ops:
            st = apply_gate(st, gate)
        logger.debug("ran %d gates on %s backend", len(self.ops), backend)

        if check_norm:
            st.check_normalized(tol=check_norm_tol)
        return st
