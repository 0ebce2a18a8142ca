from .scanner import (
    Token,
    TokenKind,
    tokenize,
    find_sequence_body,
    is_empty_sequence,
    has_nil_sentinel,
)
from .records import split_records, split_fields
from .decoders import ApplicationStatus, Decoded, decode_count, scan_addresses
from .mappers import (
    BountyFieldDecoder,
    PositionalScanBountyDecoder,
    parse_bounty,
    parse_applications,
    parse_leaderboard,
)

__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "find_sequence_body",
    "is_empty_sequence",
    "has_nil_sentinel",
    "split_records",
    "split_fields",
    "ApplicationStatus",
    "Decoded",
    "decode_count",
    "scan_addresses",
    "BountyFieldDecoder",
    "PositionalScanBountyDecoder",
    "parse_bounty",
    "parse_applications",
    "parse_leaderboard",
]
