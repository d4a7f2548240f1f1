"""Parsing and display helpers for GitHub timestamps.

GitHub does not use one canonical timestamp format across endpoints and
fields: fractional seconds come and go, and UTC is written either as a
literal ``Z`` or as a numeric offset. ``TIMESTAMP_FORMATS`` lists every
format we accept, in the order they are tried.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Union

DISPLAY_FORMAT = "%B %d, %Y at %I:%M %p"


class TimestampParseError(ValueError):
    """Raised when a timestamp matches none of the known formats."""


@dataclass(frozen=True)
class TimestampFormat:
    """One entry of the fallback chain.

    ``zulu`` formats match the literal ``Z`` suffix and produce naive values
    that are pinned to UTC. Offset formats are applied to the string with a
    trailing ``Z`` rewritten to ``+00:00``.
    """

    pattern: str
    zulu: bool

    def parse(self, raw: str) -> datetime:
        if self.zulu:
            return datetime.strptime(raw, self.pattern).replace(tzinfo=timezone.utc)
        return datetime.strptime(_zulu_to_offset(raw), self.pattern)


TIMESTAMP_FORMATS: tuple[TimestampFormat, ...] = (
    TimestampFormat("%Y-%m-%dT%H:%M:%S.%fZ", zulu=True),
    TimestampFormat("%Y-%m-%dT%H:%M:%SZ", zulu=True),
    TimestampFormat("%Y-%m-%dT%H:%M:%S.%f%z", zulu=False),
    TimestampFormat("%Y-%m-%dT%H:%M:%S%z", zulu=False),
)


def _zulu_to_offset(raw: str) -> str:
    if raw.endswith("Z"):
        return f"{raw[:-1]}+00:00"
    return raw


def parse_timestamp(
    raw: str,
    formats: tuple[TimestampFormat, ...] = TIMESTAMP_FORMATS,
) -> datetime:
    """Parse ``raw`` with the first matching format and return it in UTC."""
    for fmt in formats:
        try:
            return fmt.parse(raw).astimezone(timezone.utc)
        except (TypeError, ValueError, OverflowError):
            # OverflowError: offset pushes the instant outside datetime's range.
            continue
    raise TimestampParseError(f"Could not parse date format: {raw}")


@dataclass(frozen=True)
class Parsed:
    instant: datetime
    raw: str


@dataclass(frozen=True)
class Unparsed:
    raw: str


ParsedInstant = Union[Parsed, Unparsed]


def parse_or_raw(raw: str) -> ParsedInstant:
    """Parse ``raw``, keeping the original text when no format matches."""
    try:
        return Parsed(instant=parse_timestamp(raw), raw=raw)
    except TimestampParseError:
        return Unparsed(raw=raw)


def format_local(instant: datetime, tz: tzinfo | None = None) -> str:
    """Render ``instant`` in ``tz``, or the machine's local timezone by default."""
    return instant.astimezone(tz).strftime(DISPLAY_FORMAT)
