"""Field decoders for realm value text.

Each decoder takes a field fragment (or a whole record for the global scans)
and returns a `Decoded` result. A failed match is never an error: callers fall
back to the zero value, and `decoded` tells the two cases apart.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from .scanner import Token, TokenKind, tokenize

T = TypeVar("T")

ADDRESS_RE = re.compile(r"g1[a-z0-9]{38}")
INT_KIND_RE = re.compile(r"u?int(8|16|32|64)?")
DIGITS_RE = re.compile(r"[0-9]+")
NAMED_AMOUNT_RE = re.compile(r"Amount:([0-9]+)")

AMOUNT_KIND = "int64"
BOOL_KIND = "bool"
NAMED_CLAIMED_TRUE = "IsClaimed:true"


@dataclass(frozen=True)
class Decoded(Generic[T]):
    """Result of a decoder: the value plus whether it was actually decoded."""
    value: Optional[T] = None
    decoded: bool = False

    def or_default(self, default: T) -> T:
        return self.value if self.decoded else default


def _hit(value: T) -> Decoded[T]:
    return Decoded(value=value, decoded=True)


MISSING: Decoded = Decoded()


class ApplicationStatus(str, Enum):
    """Application review status as stored by the realm."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    UNKNOWN = "Unknown"


STATUS_CODES = {
    0: ApplicationStatus.PENDING,
    1: ApplicationStatus.APPROVED,
    2: ApplicationStatus.REJECTED,
}


def _words(tokens: list[Token]) -> list[Token]:
    return [tok for tok in tokens if tok.kind == TokenKind.WORD]


def decode_uint(fragment: str) -> Decoded[int]:
    """Decode `<digits> <int kind>`, e.g. `7 uint64`."""
    words = _words(tokenize(fragment))
    if len(words) < 2:
        return MISSING
    value, kind = words[0], words[1]
    if DIGITS_RE.fullmatch(value.value) and INT_KIND_RE.fullmatch(kind.value):
        return _hit(int(value.value))
    return MISSING


def decode_address(fragment: str) -> Decoded[str]:
    """Decode a quoted `g1...` address from a single fragment."""
    for tok in tokenize(fragment):
        if tok.kind == TokenKind.STRING and ADDRESS_RE.fullmatch(tok.value):
            return _hit(tok.value)
    return MISSING


def decode_string(fragment: str) -> Decoded[str]:
    """Decode the first quoted string of a fragment."""
    for tok in tokenize(fragment):
        if tok.kind == TokenKind.STRING:
            return _hit(tok.value)
    return MISSING


def decode_status(fragment: str) -> Decoded[ApplicationStatus]:
    """
    Decode an application status code.

    Unmapped codes and unparseable fragments both give UNKNOWN; only the
    former counts as decoded.
    """
    words = _words(tokenize(fragment))
    if not words or not DIGITS_RE.fullmatch(words[0].value):
        return Decoded(value=ApplicationStatus.UNKNOWN, decoded=False)
    code = int(words[0].value)
    return _hit(STATUS_CODES.get(code, ApplicationStatus.UNKNOWN))


def scan_strings(record: str) -> list[str]:
    """All quoted strings of a record in order of appearance."""
    return [tok.value for tok in tokenize(record) if tok.kind == TokenKind.STRING]


def scan_addresses(record: str) -> list[str]:
    """All address-shaped substrings of a record, quoted or bare, in order."""
    found: list[str] = []
    for tok in tokenize(record):
        if tok.kind in (TokenKind.STRING, TokenKind.WORD):
            found.extend(ADDRESS_RE.findall(tok.value))
    return found


def decode_amount(record: str) -> Decoded[str]:
    """
    Decode a bounty amount as a digit string.

    Tries the positional form `(1000000 int64)` first, then the named form
    `Amount:1000000`.
    """
    tokens = tokenize(record)
    for i in range(len(tokens) - 3):
        open_, value, kind, close = tokens[i:i + 4]
        if (
            open_.kind == TokenKind.LPAREN
            and value.kind == TokenKind.WORD
            and DIGITS_RE.fullmatch(value.value)
            and kind.kind == TokenKind.WORD
            and kind.value == AMOUNT_KIND
            and close.kind == TokenKind.RPAREN
        ):
            return _hit(value.value)

    for tok in _words(tokens):
        match = NAMED_AMOUNT_RE.match(tok.value)
        if match:
            return _hit(match.group(1))

    return MISSING


def decode_bool_true(record: str) -> Decoded[bool]:
    """
    Detect a true boolean: positional `true bool` or named `IsClaimed:true`.

    There is no explicit false; absence decodes as not found.
    """
    words = _words(tokenize(record))
    for i, tok in enumerate(words):
        if tok.value == NAMED_CLAIMED_TRUE:
            return _hit(True)
        if tok.value == "true" and i + 1 < len(words) and words[i + 1].value == BOOL_KIND:
            return _hit(True)
    return MISSING


def decode_count(text: str) -> Decoded[int]:
    """Decode the first bare digit run, e.g. the `(3 uint64)` count result."""
    for tok in _words(tokenize(text)):
        match = DIGITS_RE.match(tok.value)
        if match:
            return _hit(int(match.group(0)))
    return MISSING
