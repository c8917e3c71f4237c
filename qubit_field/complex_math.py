# qubit_field/complex_math.py
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    r: float
    i: float

    @staticmethod
    def from_builtin(z) -> "Complex":
        z = complex(z)
        return Complex(z.real, z.imag)

    def to_builtin(self) -> complex:
        return complex(self.r, self.i)


def make(r: float, i: float) -> Complex:
    return Complex(r, i)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.r + b.r, a.i + b.i)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(a.r*b.r - a.i*b.i,
                   a.r*b.i + a.i*b.r)


def magnitude(c: Complex) -> float:
    return math.sqrt(c.r*c.r + c.i*c.i)


def exp_imaginary(theta: float) -> Complex:
    """e^(i*theta) = cos(theta) + i*sin(theta)."""
    return Complex(math.cos(theta), math.sin(theta))


def format_complex(c: Complex) -> str:
    """Debug display as 'r+ii' / 'r-ii' with two decimals."""
    r = c.r + 0.0  # -0.0 -> 0.0
    i = c.i + 0.0
    imag = f"+{i:.2f}i" if i >= 0 else f"{i:.2f}i"
    return f"{r:.2f}{imag}"


ZERO = make(0.0, 0.0)
ONE = make(1.0, 0.0)
NEG_ONE = make(-1.0, 0.0)
I = make(0.0, 1.0)
NEG_I = make(0.0, -1.0)
