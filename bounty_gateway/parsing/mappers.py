"""Assemble domain records from realm value text.

Bounties are decoded by scanning the whole record text. Applications and
leaderboard entries are decoded per positional field, following the struct
layout of the realm:

    Application:      ID, BountyID, Applicant, PRLink, AppliedAt, Status, ...
    LeaderboardEntry: Address, BountiesCreated, BountiesApplied,
                      ValidationsPerformed, Score
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from bounty_gateway.models import Bounty, BountyApplication, LeaderboardEntry
from .decoders import (
    MISSING,
    ApplicationStatus,
    Decoded,
    decode_address,
    decode_amount,
    decode_bool_true,
    decode_status,
    decode_string,
    decode_uint,
    scan_addresses,
    scan_strings,
)
from .records import split_fields, split_records
from .scanner import find_sequence_body, is_empty_sequence

logger = logging.getLogger(__name__)

# Positional layout of the Application struct
APP_ID = 0
APP_APPLICANT = 2
APP_PR_LINK = 3
APP_STATUS = 5
APP_MIN_FIELDS = 6

LEADERBOARD_MIN_FIELDS = 5


# ---------------------------------------------------------------------------
# Bounty
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BountyFields:
    """Decoded bounty fields, before the caller-supplied ID is attached."""
    title: Decoded[str] = MISSING
    issue_url: Decoded[str] = MISSING
    description: Decoded[str] = MISSING
    amount: Decoded[str] = MISSING
    creator: Decoded[str] = MISSING
    claimer: Decoded[str] = MISSING
    is_claimed: Decoded[bool] = MISSING


class BountyFieldDecoder(Protocol):
    """Strategy turning a raw bounty payload into decoded fields."""

    def decode(self, text: str) -> BountyFields:
        ...


class PositionalScanBountyDecoder:
    """
    Decode a bounty by scanning the entire payload.

    The first three quoted strings are taken as title, issue URL and
    description; the first two addresses as creator and claimer. This relies
    on the realm's field order and breaks if an address-shaped value shows up
    in an earlier field.
    """

    def decode(self, text: str) -> BountyFields:
        strings = scan_strings(text)
        addresses = scan_addresses(text)

        title = issue_url = description = MISSING
        if len(strings) >= 3:
            title = Decoded(strings[0], True)
            issue_url = Decoded(strings[1], True)
            description = Decoded(strings[2], True)

        return BountyFields(
            title=title,
            issue_url=issue_url,
            description=description,
            amount=decode_amount(text),
            creator=Decoded(addresses[0], True) if addresses else MISSING,
            claimer=Decoded(addresses[1], True) if len(addresses) > 1 else MISSING,
            is_claimed=decode_bool_true(text),
        )


DEFAULT_BOUNTY_DECODER = PositionalScanBountyDecoder()


def parse_bounty(
    text: str,
    bounty_id: str,
    decoder: BountyFieldDecoder = DEFAULT_BOUNTY_DECODER,
) -> Bounty:
    """
    Build a Bounty from a GetBounty() payload.

    Args:
        text: Raw realm response
        bounty_id: ID the bounty was queried with
        decoder: Field decoding strategy

    Returns:
        Bounty with every field that could be decoded; the rest stay empty
    """
    fields = decoder.decode(text)
    return Bounty(
        id=bounty_id,
        title=fields.title.or_default(""),
        issueUrl=fields.issue_url.or_default(""),
        description=fields.description.or_default(""),
        amount=fields.amount.or_default(""),
        creator=fields.creator.or_default(""),
        claimer=fields.claimer.or_default(""),
        isClaimed=fields.is_claimed.or_default(False),
    )


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------

def sequence_records(text: str) -> list[str]:
    """Raw records of the sequence in `text`, empty for any empty sentinel."""
    if is_empty_sequence(text):
        return []
    body = find_sequence_body(text)
    if body is None:
        logger.debug("No sequence found in realm response")
        return []
    return split_records(body)


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ApplicationFields:
    id: Decoded[int] = MISSING
    applicant: Decoded[str] = MISSING
    pr_link: Decoded[str] = MISSING
    status: Decoded[ApplicationStatus] = MISSING


def decode_application_fields(fields: list[str]) -> ApplicationFields:
    """Decode the positional fields of one Application struct."""
    if len(fields) < APP_MIN_FIELDS:
        return ApplicationFields()
    return ApplicationFields(
        id=decode_uint(fields[APP_ID]),
        applicant=decode_address(fields[APP_APPLICANT]),
        pr_link=decode_string(fields[APP_PR_LINK]),
        status=decode_status(fields[APP_STATUS]),
    )


def parse_applications(text: str, bounty_id: str) -> list[BountyApplication]:
    """
    Build the applications of a GetApplicationsForBounty() payload.

    Records whose ID cannot be decoded are dropped. Validators are not
    attached here.
    """
    applications: list[BountyApplication] = []

    for record in sequence_records(text):
        decoded = decode_application_fields(split_fields(record))
        if not decoded.id.decoded:
            logger.debug(f"Skipping application record without ID for bounty {bounty_id}")
            continue

        status = decoded.status.value or ApplicationStatus.UNKNOWN
        applications.append(BountyApplication(
            id=str(decoded.id.value),
            bountyId=bounty_id,
            applicant=decoded.applicant.or_default(""),
            prLink=decoded.pr_link.or_default(""),
            status=status.value,
        ))

    return applications


# ---------------------------------------------------------------------------
# Leaderboard
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LeaderboardFields:
    address: Decoded[str] = MISSING
    counts: list[Decoded[int]] = field(default_factory=list)


def decode_leaderboard_fields(fields: list[str]) -> LeaderboardFields:
    """Decode the positional fields of one LeaderboardEntry struct."""
    if len(fields) < LEADERBOARD_MIN_FIELDS:
        return LeaderboardFields()
    return LeaderboardFields(
        address=decode_address(fields[0]),
        counts=[decode_uint(f) for f in fields[1:LEADERBOARD_MIN_FIELDS]],
    )


def parse_leaderboard(text: str) -> list[LeaderboardEntry]:
    """Build leaderboard entries from a GetLeaderboard() payload."""
    entries: list[LeaderboardEntry] = []

    for record in sequence_records(text):
        decoded = decode_leaderboard_fields(split_fields(record))
        if not decoded.address.decoded:
            continue

        created, applied, validations, score = (c.or_default(0) for c in decoded.counts)
        entries.append(LeaderboardEntry(
            address=decoded.address.value,
            bountiesCreated=created,
            bountiesApplied=applied,
            validationsPerformed=validations,
            score=score,
        ))

    return entries
