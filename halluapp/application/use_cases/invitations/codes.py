"""Generation of unique invitation codes."""

from __future__ import annotations

from collections.abc import Callable
import logging
import secrets
import string
import time

from halluapp.domain.entities import INVITATION_CODE_LENGTH
from halluapp.domain.exceptions import InvitationCodeExhaustedError

logger = logging.getLogger(__name__)

RANDOM_PART_LENGTH = 12
TIMESTAMP_PART_LENGTH = INVITATION_CODE_LENGTH - RANDOM_PART_LENGTH
TIMESTAMP_MODULUS = 100_000
RANDOM_ALPHABET = string.ascii_uppercase + string.digits
BASE36_DIGITS = string.digits + string.ascii_uppercase
DEFAULT_MAX_ATTEMPTS = 10


def to_base36(value: int) -> str:
    """Return the uppercase base-36 representation of a non-negative integer."""

    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def timestamp_suffix(now: float) -> str:
    """Encode ``now`` (Unix seconds) modulo 100000 as five base-36 characters."""

    return to_base36(int(now) % TIMESTAMP_MODULUS).rjust(TIMESTAMP_PART_LENGTH, "0")


def random_prefix() -> str:
    return "".join(secrets.choice(RANDOM_ALPHABET) for _ in range(RANDOM_PART_LENGTH))


def generate_invitation_code(
    exists: Callable[[str], bool],
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    clock: Callable[[], float] = time.time,
) -> str:
    """Return a 17-character code that ``exists`` reports as unused.

    The code is 12 random characters from ``A-Z0-9`` followed by the
    timestamp suffix. Collisions trigger a new random part; after
    ``max_attempts`` candidates ``InvitationCodeExhaustedError`` is raised.
    """

    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(1, max_attempts + 1):
        code = random_prefix() + timestamp_suffix(clock())
        if not exists(code):
            return code
        logger.debug("Invitation code collision on attempt %d", attempt)

    logger.error("Could not generate a unique invitation code after %d attempts", max_attempts)
    raise InvitationCodeExhaustedError("Could not generate a unique invitation code")


__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "generate_invitation_code",
    "random_prefix",
    "timestamp_suffix",
    "to_base36",
]
