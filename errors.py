class ConfigurationError(ValueError):
    """Grid dimensions or config values that cannot be compiled. Fix the input and retry."""


class InvariantViolation(AssertionError):
    """A window or assignment of the wrong shape reached the compiler internals."""
