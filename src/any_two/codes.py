"""Closed vocabulary of breakdown codes.

Every event code must be drawn from :data:`VALID_CODES`. Code fields in the
raw observation rows are ``/``-delimited, for example ``"ACE / CON"``.
"""

from __future__ import annotations

from typing import Tuple

from any_two.configs import CODE_DELIMITER
from any_two.errors import InvalidCode

VALID_CODES: Tuple[str, ...] = (
    "ACE",
    "ACP",
    "ACX",
    "AJU",
    "ANT",
    "CON",
    "IMP",
    "PAS",
    "PEX",
    "PFC",
    "PPR",
    "RAN",
    "STP",
    "TED",
)

_VALID_CODE_SET = frozenset(VALID_CODES)


def is_valid_code(token: str) -> bool:
    """Return whether ``token`` is a member of the vocabulary."""

    return token in _VALID_CODE_SET


def validate_code(token: str) -> str:
    """Return ``token`` unchanged when it is a known code.

    Parameters
    ----------
    token:
        Candidate code, already stripped of surrounding whitespace.

    Returns
    -------
    str
        The validated code.

    Raises
    ------
    InvalidCode
        If ``token`` is outside the vocabulary.
    """

    if not is_valid_code(token):
        raise InvalidCode(token)
    return token


def split_codes(codes_field: str) -> Tuple[str, ...]:
    """Split and validate a ``/``-delimited code field.

    Order is preserved and duplicates are kept. Trailing empty tokens are
    dropped, so ``"ACE/"`` reads as ``("ACE",)``. A single invalid token
    fails the whole field.

    Raises
    ------
    InvalidCode
        If any remaining token is outside the vocabulary, including interior
        empty tokens such as the one in ``"ACE//CON"``.
    """

    tokens = [token.strip() for token in str(codes_field).split(CODE_DELIMITER)]
    while tokens and not tokens[-1]:
        tokens.pop()
    if not tokens:
        raise InvalidCode("")
    return tuple(validate_code(token) for token in tokens)
