"""Errors raised by the CEC2005 benchmark functions."""


class DimensionMismatchError(ValueError):
    """Operand vector or matrix dimensions disagree."""


class ConfigurationArityError(ValueError):
    """A composition was built with the wrong number of components."""


class NumericDegeneracyError(ValueError):
    """Weight normalization or fmax normalization is zero or non-finite."""
