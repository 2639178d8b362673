"""Domain-level exceptions.

All rule violations and usage errors are subclasses of DomainException
so the CLI layer can catch them uniformly and display friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A quantity was negative or not an integer."""


class InvalidAmountError(ValidationError):
    """A monetary amount was negative."""


class NotConfiguredError(DomainException):
    """An order action was invoked before its strategy was set."""
