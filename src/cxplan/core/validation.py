"""Syntactic gatekeeping for inbound PlannedProduction requests.

Every predicate is total: any input, including empty, very long or
control-character strings and non-string values, evaluates to a boolean.
Nothing here performs I/O.
"""

from __future__ import annotations

from typing import Any

from cxplan.core.patterns import (
    BPNL_PATTERN,
    NON_EMPTY_NON_VERTICAL_WHITESPACE_PATTERN,
    REPRESENTATION_VALUE,
    URN_OR_UUID_PATTERN,
)


def is_valid_partner_identifier(value: Any) -> bool:
    """Check that the value is a complete BPNL."""
    if not isinstance(value, str):
        return False
    return BPNL_PATTERN.fullmatch(value) is not None


def is_valid_material_identifier(value: Any) -> bool:
    """Check that the value is a complete URN or UUID."""
    if not isinstance(value, str):
        return False
    return URN_OR_UUID_PATTERN.fullmatch(value) is not None


def is_valid_representation(value: Any) -> bool:
    """Check that the value is exactly ``$value``."""
    return isinstance(value, str) and value == REPRESENTATION_VALUE


def is_display_safe(value: Any) -> bool:
    """Check whether an untrusted value may be echoed in diagnostics.

    Requires a non-empty string of printable characters with no
    vertical whitespace (line feed, carriage return, form feed, etc.).
    """
    if not isinstance(value, str):
        return False
    if NON_EMPTY_NON_VERTICAL_WHITESPACE_PATTERN.fullmatch(value) is None:
        return False
    return value.isprintable()


class IdentifierValidator:
    """Bundle of the request predicates, injected into the gateway."""

    def is_valid_partner_identifier(self, value: Any) -> bool:
        return is_valid_partner_identifier(value)

    def is_valid_material_identifier(self, value: Any) -> bool:
        return is_valid_material_identifier(value)

    def is_valid_representation(self, value: Any) -> bool:
        return is_valid_representation(value)

    def is_display_safe(self, value: Any) -> bool:
        return is_display_safe(value)
