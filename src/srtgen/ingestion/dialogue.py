"""Dialogue block parser.

Turns informally written dialogue such as::

    (0:06) Subaru: "Hello there."

    (0:12) Beako: "Indeed."

into an ordered list of :class:`~srtgen.models.Entry`.  Blocks are separated
by one or more blank lines.  A block that does not have the
``(timestamp) speaker: dialogue`` shape is skipped and reported as a warning
instead of aborting the whole parse.
"""

from __future__ import annotations

import logging
import re

from srtgen.models import Entry

_logger = logging.getLogger("srtgen")

# Two or more consecutive newlines end a block.
_BLOCK_SEPARATOR_RE = re.compile(r"\n{2,}")

# (timestamp) speaker: "dialogue" -- DOTALL so dialogue may wrap across lines.
_ENTRY_RE = re.compile(r'^\(([^)]+)\)\s*([^:]+):\s*"?(.+?)"?$', re.DOTALL)


def split_blocks(raw_text: str) -> list[str]:
    """Return the blank-line separated blocks of *raw_text*, in order."""
    text = raw_text.strip()
    if not text:
        return []
    return _BLOCK_SEPARATOR_RE.split(text)


def parse_block(block: str) -> Entry | None:
    """Parse a single block into an :class:`Entry`, or ``None`` if it does not match."""
    match = _ENTRY_RE.match(block.strip())
    if match is None:
        return None
    timestamp, speaker, dialogue = match.groups()
    return Entry(
        timestamp=timestamp,
        speaker=speaker.strip(),
        dialogue=_strip_quotes(dialogue.strip()),
    )


def parse_entries(raw_text: str) -> tuple[list[Entry], list[str]]:
    """Parse *raw_text* into entries plus warnings for skipped blocks.

    Parameters
    ----------
    raw_text:
        Free-form dialogue text, blocks separated by blank lines.

    Returns
    -------
    tuple[list[Entry], list[str]]
        Entries in source order, and one human-readable warning per block
        that did not match the entry shape.  Empty input yields two empty
        lists.
    """
    entries: list[Entry] = []
    warnings: list[str] = []

    for block in split_blocks(raw_text):
        entry = parse_block(block)
        if entry is None:
            warning = f"Invalid subtitle format: {block}"
            _logger.warning(warning)
            warnings.append(warning)
            continue
        entries.append(entry)

    _logger.debug("Parsed %d entries (%d blocks skipped)", len(entries), len(warnings))
    return entries, warnings


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _strip_quotes(text: str) -> str:
    """Remove one leading and one trailing double quote, each only if present."""
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text
