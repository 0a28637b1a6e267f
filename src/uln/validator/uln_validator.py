"""ULN validation: format, checksum, and non-None preconditions.

A ULN is ten ASCII digits. The last digit is a check digit over the first
nine, computed with weights 10..2 and a modulus of 11 (see WSLP02 "Unique
Learner Number (ULN) Validation", Learning Records Service).

Two failure tiers:
- Structural problems (None, wrong length, non-digits) raise.
- A well-formed value with a bad check digit is a plain ``False`` from
  ``is_valid_uln``; ``require_valid_uln`` turns it into ``InvalidValueError``.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, overload

import structlog

from uln.core.exceptions import InvalidFormatError, InvalidValueError, NullInputError
from uln.core.types import MODULUS, WEIGHTS, CheckDigit, ULNString

if TYPE_CHECKING:
    from uln.models.uln import ULN

# Levels and handlers come from the stdlib "uln" logger.
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

# [0-9] rather than \d: str patterns treat other Unicode digits as \d.
ULN_PATTERN = re.compile(r"(?P<digits>[0-9]{9})(?P<check_digit>[0-9])")
PREFIX_PATTERN = re.compile(r"[0-9]{9}")


def _mask(value: str) -> str:
    return "*" * max(len(value) - 4, 0) + value[-4:]


def _remainder(prefix: str) -> int:
    return sum(weight * int(digit) for weight, digit in zip(WEIGHTS, prefix)) % MODULUS


def calculate_check_digit(prefix: str) -> CheckDigit | None:
    """Return the check digit for a nine-digit *prefix*.

    Returns ``None`` when the weighted sum is divisible by 11: no check digit
    makes such a prefix a valid ULN.

    Raises:
        NullInputError: if *prefix* is None.
        InvalidFormatError: if *prefix* is not exactly nine ASCII digits.
    """
    if prefix is None:
        raise NullInputError("ULN prefix cannot be None")
    if not isinstance(prefix, str) or PREFIX_PATTERN.fullmatch(prefix) is None:
        raise InvalidFormatError(prefix, "Invalid ULN prefix format")

    remainder = _remainder(prefix)
    if remainder == 0:
        return None
    return 10 - remainder


def is_valid_uln(value: ULNString) -> bool:
    """Check the format and checksum of a candidate ULN.

    Returns:
        ``True`` if the check digit matches, ``False`` if the value is well
        formed but fails the checksum.

    Raises:
        NullInputError: if *value* is None.
        InvalidFormatError: if *value* is not exactly ten ASCII digits.
    """
    if value is None:
        raise NullInputError("ULN value cannot be None")

    match = ULN_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        logger.debug(
            "uln_format_invalid",
            type=type(value).__name__,
            length=len(value) if isinstance(value, str) else None,
        )
        raise InvalidFormatError(value)

    # A remainder of 0 has no valid check digit.
    remainder = _remainder(match.group("digits"))
    if remainder == 0 or 10 - remainder != int(match.group("check_digit")):
        logger.debug("uln_checksum_failed", uln=_mask(value), remainder=remainder)
        return False
    return True


@overload
def require_valid_uln(value: ULN) -> ULN: ...


@overload
def require_valid_uln(value: ULNString) -> ULNString: ...


def require_valid_uln(value):
    """Return *value* unchanged if it is a valid ULN string or a ``ULN`` object.

    A ``ULN`` object is valid by construction, so only the None check applies
    to it.

    Raises:
        NullInputError: if *value* is None.
        InvalidValueError: if a string fails the format or checksum check.
    """
    from uln.models.uln import ULN

    if value is None:
        raise NullInputError("ULN value cannot be None")
    if isinstance(value, ULN):
        return value

    try:
        valid = is_valid_uln(value)
    except InvalidFormatError as exc:
        raise InvalidValueError(value) from exc
    if not valid:
        raise InvalidValueError(value)
    return value
