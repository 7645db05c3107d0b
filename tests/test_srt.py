"""Unit tests for srtgen.rendering.srt (cue timing and document rendering)."""

from __future__ import annotations

import pysubs2
import pytest

from srtgen.ingestion.dialogue import parse_entries
from srtgen.models import Cue, Entry
from srtgen.rendering.srt import CUE_BACKOFF_S, build_cues, render_document


_SAMPLE_INPUT = '(0:06) Subaru: "Hello there."\n\n(0:12) Beako: "Indeed."'

_SAMPLE_SRT = """\
1
00:00:06,000 --> 00:00:11,999
Subaru: Hello there.

2
00:00:12,000 --> 00:00:30,000
Beako: Indeed."""


def _entries(*pairs: tuple[str, str]) -> list[Entry]:
    return [Entry(timestamp=ts, speaker="S", dialogue=text) for ts, text in pairs]


class TestRenderDocument:
    def test_exact_output(self) -> None:
        entries, _ = parse_entries(_SAMPLE_INPUT)
        assert render_document(entries, 30) == _SAMPLE_SRT

    def test_no_trailing_whitespace(self) -> None:
        entries, _ = parse_entries(_SAMPLE_INPUT)
        doc = render_document(entries, 30)
        assert doc == doc.rstrip()

    def test_empty_entries(self) -> None:
        assert render_document([], 30) == ""

    def test_single_entry_uses_duration(self) -> None:
        doc = render_document(_entries(("0:05", "only")), 90)
        assert doc == "1\n00:00:05,000 --> 00:01:30,000\nS: only"

    def test_zero_duration_still_formatted(self) -> None:
        doc = render_document(_entries(("0:05", "only")), 0)
        assert "00:00:05,000 --> 00:00:00,000" in doc

    def test_negative_duration_still_formatted(self) -> None:
        doc = render_document(_entries(("0:05", "only")), -5)
        assert doc == "1\n00:00:05,000 --> -1:-1:-5,000\nS: only"

    def test_duration_just_below_whole_second(self) -> None:
        """A near-integer duration rolls over to the next second, never to ',1000'."""
        doc = render_document([Entry("0:01", "A", "hi")], 0.99999999996)
        assert doc == "1\n00:00:01,000 --> 00:00:01,000\nA: hi"

    def test_inverted_interval_not_corrected(self) -> None:
        """Out-of-order timestamps are emitted as computed (end < start)."""
        doc = render_document(_entries(("0:12", "late"), ("0:06", "early")), 30)
        assert "00:00:12,000 --> 00:00:05,999" in doc

    def test_loads_as_srt(self) -> None:
        """The rendered document is readable by a standard SRT parser."""
        entries, _ = parse_entries(_SAMPLE_INPUT)
        subs = pysubs2.SSAFile.from_string(render_document(entries, 30), format_="srt")

        assert len(subs) == 2
        assert (subs[0].start, subs[0].end) == (6000, 11999)
        assert (subs[1].start, subs[1].end) == (12000, 30000)
        assert subs[0].plaintext == "Subaru: Hello there."


class TestBuildCues:
    def test_adjacent_cues_do_not_overlap(self) -> None:
        cues = build_cues(_entries(("0:01", "a"), ("0:04", "b"), ("1:10", "c")), 120)
        for current, following in zip(cues, cues[1:]):
            assert current.end_s < following.start_s
            assert following.start_s - current.end_s == pytest.approx(CUE_BACKOFF_S)

    def test_last_cue_ends_at_duration(self) -> None:
        cues = build_cues(_entries(("0:01", "a"), ("0:04", "b")), 97.5)
        assert cues[-1].end_s == 97.5

    def test_indices_contiguous_after_skipped_blocks(self) -> None:
        raw = "(0:01) A: one\n\nbad\n\nalso bad\n\n(0:03) B: two\n\n(0:05) C: three"
        entries, warnings = parse_entries(raw)
        cues = build_cues(entries, 10)
        assert len(warnings) == 2
        assert [c.index for c in cues] == [1, 2, 3]

    def test_unparseable_timestamp_starts_at_zero(self) -> None:
        cues = build_cues(_entries(("soon", "a"), ("0:04", "b")), 10)
        assert cues[0].start_s == 0

    def test_cue_text(self) -> None:
        cues = build_cues([Entry(timestamp="0:01", speaker="Emilia", dialogue="Subaru!")], 5)
        assert cues[0].text == "Emilia: Subaru!"


class TestCueBlock:
    def test_to_block(self) -> None:
        cue = Cue(index=3, start_s=62.5, end_s=64.999, text="A: hi")
        assert cue.to_block() == "3\n00:01:02,500 --> 00:01:04,999\nA: hi"
