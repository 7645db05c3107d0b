"""SRT cue timing and document rendering.

Each :class:`~srtgen.models.Entry` carries only a start marker.  The end of
a cue is inferred from the start of the next one, backed off by one
millisecond so that adjacent cues never share a boundary instant.  The last
cue runs until the end of the video.

Intervals are emitted exactly as computed: out-of-order input produces
inverted cues and a non-positive duration produces a degenerate last cue.
Neither is corrected or rejected here.
"""

from __future__ import annotations

from typing import Sequence

from srtgen.models import Cue, Entry
from srtgen.rendering.timestamps import parse_timestamp

# Gap between a cue's end and the next cue's start, in seconds.
CUE_BACKOFF_S = 0.001


def build_cues(entries: Sequence[Entry], video_duration_s: float) -> list[Cue]:
    """Compute 1-based, gap-free cues for *entries*.

    Args:
        entries: Parsed entries in display order.
        video_duration_s: Total video length; used as the final cue's end.

    Returns:
        One :class:`Cue` per entry, in the same order.
    """
    cues: list[Cue] = []
    for i, entry in enumerate(entries):
        start_s = parse_timestamp(entry.timestamp)
        if i + 1 < len(entries):
            end_s = parse_timestamp(entries[i + 1].timestamp) - CUE_BACKOFF_S
        else:
            end_s = video_duration_s
        cues.append(
            Cue(
                index=i + 1,
                start_s=start_s,
                end_s=end_s,
                text=f"{entry.speaker}: {entry.dialogue}",
            )
        )
    return cues


def render_document(entries: Sequence[Entry], video_duration_s: float) -> str:
    """Render *entries* as a complete SRT document with trailing whitespace trimmed."""
    document = "".join(
        f"{cue.to_block()}\n\n" for cue in build_cues(entries, video_duration_s)
    )
    return document.rstrip()
