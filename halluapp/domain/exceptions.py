"""Errors raised by use cases.

They derive from ``ValueError`` so callers that only care about "the input
was not acceptable" can keep catching that, while routes map each subclass
to its own HTTP status.
"""


class DomainError(ValueError):
    """Base class for expected, user-facing failures."""


class NotFoundError(DomainError):
    """A referenced record does not exist."""


class ConflictError(DomainError):
    """The operation clashes with existing state (duplicate email, code, ...)."""


class InvitationCodeExhaustedError(ConflictError):
    """No unique invitation code could be produced within the attempt budget."""


class InvalidInvitationError(DomainError):
    """An invitation code is unknown, already used or expired."""


class AuthenticationError(DomainError):
    """Credentials or an identity token could not be verified."""


class MissingEmailClaimError(DomainError):
    """A verified external identity carries no email address."""


__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "InvalidInvitationError",
    "InvitationCodeExhaustedError",
    "MissingEmailClaimError",
    "NotFoundError",
]
