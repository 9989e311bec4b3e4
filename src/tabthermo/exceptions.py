"""Exception types for tabulated thermodynamics."""


class InvalidTableError(ValueError):
    """Raised when a composition table or its source is malformed."""


class InternalConsistencyError(RuntimeError):
    """Raised when an interpolation bracket has zero width."""
