"""srtgen: timestamped dialogue lines to SRT subtitles."""

from srtgen.ingestion.dialogue import parse_entries
from srtgen.models import Cue, Entry
from srtgen.rendering.srt import build_cues, render_document
from srtgen.rendering.timestamps import format_srt_timestamp, parse_timestamp

__version__ = "0.1.0"

__all__ = [
    "Cue",
    "Entry",
    "build_cues",
    "format_srt_timestamp",
    "parse_entries",
    "parse_timestamp",
    "render_document",
]
