"""Exceptions raised by the calculator and its collaborating utilities."""


class InvalidExpression(ValueError):
    """Raised when a statement or its postfix form is malformed."""


class CannotBuildPyramid(ValueError):
    """Raised when the given numbers cannot be arranged into a pyramid."""
