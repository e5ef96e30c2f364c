"""Format checks for delivery info fields.

Each predicate answers True/False and never raises. Character classes are
checked per character through ``unicodedata`` categories instead of a
regex, so "letter" means exactly Unicode category L* (Vietnamese and
other non-Latin scripts included) and "number" means category N*.
"""

from __future__ import annotations

import unicodedata

PHONE_LENGTH = 10
PHONE_PREFIXES = frozenset({"03", "05", "07", "08", "09"})

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

ADDRESS_MIN_LENGTH = 5
ADDRESS_MAX_LENGTH = 200
ADDRESS_PUNCTUATION = frozenset(",./()-")

_ASCII_DIGITS = frozenset("0123456789")


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def _is_number(ch: str) -> bool:
    return unicodedata.category(ch).startswith("N")


def _has_clean_spacing(s: str, min_length: int, max_length: int) -> bool:
    """Shared shape rules for free-text fields.

    Non-blank, length within bounds (measured untrimmed), no leading or
    trailing space and no run of two spaces.
    """
    if not s.strip():
        return False
    if not min_length <= len(s) <= max_length:
        return False
    if s.startswith(" ") or s.endswith(" "):
        return False
    return "  " not in s


def validate_phone_number(phone: str | None) -> bool:
    """Vietnamese mobile number: 10 digits starting with 03/05/07/08/09."""
    if not isinstance(phone, str) or not phone:
        return False
    if len(phone) != PHONE_LENGTH:
        return False
    if not all(ch in _ASCII_DIGITS for ch in phone):
        return False
    return phone[:2] in PHONE_PREFIXES


def validate_name(name: str | None) -> bool:
    """Person name: 2-50 characters of letters separated by single spaces."""
    if not isinstance(name, str):
        return False
    if not _has_clean_spacing(name, NAME_MIN_LENGTH, NAME_MAX_LENGTH):
        return False
    return all(ch == " " or _is_letter(ch) for ch in name)


def validate_address(address: str | None) -> bool:
    """Street address: 5-200 characters of letters, digits and , . / ( ) -"""
    if not isinstance(address, str):
        return False
    if not _has_clean_spacing(address, ADDRESS_MIN_LENGTH, ADDRESS_MAX_LENGTH):
        return False
    return all(
        ch == " " or ch in ADDRESS_PUNCTUATION or _is_letter(ch) or _is_number(ch)
        for ch in address
    )
