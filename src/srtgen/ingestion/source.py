"""Raw dialogue text sources: interactive line entry or a text file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from srtgen.errors import DialogueSourceError


def collect_until_blank(lines: Iterable[str]) -> str:
    """Join stripped *lines* until two empty lines in a row (or until *lines* runs out).

    A single empty line is kept so that blocks typed interactively stay
    separated; pressing Enter twice on an empty prompt ends the input.
    Each kept line is terminated with ``\\n``.
    """
    collected: list[str] = []
    previous_blank = False
    for line in lines:
        line = line.strip()
        if line == "":
            if previous_blank or not collected:
                break
            previous_blank = True
            collected.append("\n")
            continue
        previous_blank = False
        collected.append(f"{line}\n")
    return "".join(collected)


def read_dialogue_file(path: Path) -> str:
    """Return the UTF-8 contents of *path*. Raises ``DialogueSourceError`` on failure."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DialogueSourceError(path, str(exc)) from exc
