# qubit_field/errors.py


class QubitFieldError(Exception):
    """Base class for everything raised by qubit_field."""


class InvalidArgument(QubitFieldError, ValueError):
    """A caller passed a value outside the accepted domain (e.g. unknown gate)."""


class InvalidState(QubitFieldError, ValueError):
    """A state failed the normalization check |alpha|^2 + |beta|^2 == 1."""


class FieldError(QubitFieldError):
    """Node/link bookkeeping violation inside a Field."""
