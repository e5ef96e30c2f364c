"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer and the payment orchestrator can catch them uniformly and
turn them into user-facing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated, usually by user input."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidStateError(DomainException):
    """An operation was attempted in a state that does not allow it."""


class InvalidAmountError(DomainException):
    """A payment amount failed its precondition before reaching the gateway."""


class UnavailableError(DomainException):
    """One or more cart items cannot be supplied in the requested quantity."""


class PaymentError(DomainException):
    """The payment gateway declined the payment or reported a failure."""


class UnrecognizedError(DomainException):
    """The payment gateway answered with a response of unknown shape."""


class PersistenceError(DomainException):
    """A record could not be durably stored."""
