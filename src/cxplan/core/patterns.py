"""Identifier grammars used in Catena-X data exchange.

BPNL (legal entity Business Partner Number):
    BPNL + 12 alphanumeric characters, e.g. BPNL1234567890AB

Material number (CX):
    Either a URN (RFC 8141 subset), e.g. urn:uuid:123e4567-e89b-12d3-a456-426614174000,
    or a bare UUID in canonical 8-4-4-4-12 form.

All patterns must be applied with ``fullmatch``. ``$`` alone would accept a
trailing newline.
"""

from __future__ import annotations

import re
from typing import Final

BPNL_PATTERN: Final[re.Pattern[str]] = re.compile(r"BPNL[0-9a-zA-Z]{12}")

UUID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

# urn:<NID>:<NSS>
URN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"urn:"
    r"[a-zA-Z0-9][a-zA-Z0-9-]{0,31}:"
    r"(?:[a-zA-Z0-9()+,\-.:=@;$_!*'/]|%[0-9a-fA-F]{2})+"
)

URN_OR_UUID_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"(?:{URN_PATTERN.pattern})|(?:{UUID_PATTERN.pattern})"
)

NON_EMPTY_NON_VERTICAL_WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(
    "[^\n\x0b\f\r\x85\u2028\u2029]+"
)

REPRESENTATION_VALUE: Final[str] = "$value"

# Stands in for a representation that must not be echoed
REPLACED_INVALID_REPRESENTATION: Final[str] = "<REPLACED_INVALID_REPRESENTATION>"
