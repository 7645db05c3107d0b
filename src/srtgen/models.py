from dataclasses import dataclass

from srtgen.rendering.timestamps import format_srt_timestamp


@dataclass(frozen=True)
class Entry:
    """A single parsed dialogue line, before any timing is applied."""

    timestamp: str      # Raw "m:ss" marker as captured, never reparsed here
    speaker: str
    dialogue: str       # Trimmed, one layer of surrounding quotes removed


@dataclass
class Cue:
    """A single rendered SRT cue with absolute timings."""

    index: int          # 1-based, gap-free
    start_s: float
    end_s: float        # May be below start_s for out-of-order input
    text: str           # "{speaker}: {dialogue}"

    def to_block(self) -> str:
        """Return the cue as an SRT block without the trailing blank line."""
        return (
            f"{self.index}\n"
            f"{format_srt_timestamp(self.start_s)} --> {format_srt_timestamp(self.end_s)}\n"
            f"{self.text}"
        )
