"""Conversion between ``m:ss`` dialogue markers, seconds, and SRT timecodes."""

from __future__ import annotations

import math
import re

_MINUTES_SECONDS_RE = re.compile(r"(\d+):(\d+)", re.ASCII)


def parse_timestamp(value: str) -> int:
    """Return the elapsed seconds encoded by the first ``<digits>:<digits>`` in *value*.

    The first group is read as minutes and the second as seconds, so
    ``"1:05"`` gives ``65`` and ``"75:00"`` gives ``4500``.  Anything after
    the first match is ignored.  A string with no such pair returns ``0``
    instead of raising.
    """
    match = _MINUTES_SECONDS_RE.search(value)
    if match is None:
        return 0
    minutes, seconds = int(match.group(1)), int(match.group(2))
    return minutes * 60 + seconds


def format_srt_timestamp(seconds: float) -> str:
    """Format *seconds* as an SRT ``HH:MM:SS,mmm`` timecode.

    The value is floored to whole milliseconds once and every field is
    derived from that count, so the millisecond field never exceeds 999.
    Negative values are still formatted (with a sign on each affected field)
    rather than clamped, e.g. ``-0.001`` gives ``-1:-1:-1,-01``.
    """
    # Round away float noise such as 11.998999... before flooring.
    total_ms = math.floor(round(seconds * 1000, 6))
    hours = math.floor(total_ms / 3_600_000)
    minutes = math.floor(math.fmod(total_ms, 3_600_000) / 60_000)
    secs = math.floor(math.fmod(total_ms, 60_000) / 1000)
    ms = int(math.fmod(total_ms, 1000))
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{ms:03d}"
