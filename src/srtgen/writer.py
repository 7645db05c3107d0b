"""Atomic SRT document writer."""
import contextlib
import os
import tempfile
from pathlib import Path

from srtgen.errors import OutputWriteError

SRT_SUFFIX = ".srt"


def resolve_output_path(name: str, output_dir: Path) -> Path:
    """Return the ``.srt`` path for *name*, relative names resolved against *output_dir*.

    ``.srt`` is appended unless *name* already ends with it (any case).
    """
    if not name.lower().endswith(SRT_SUFFIX):
        name = f"{name}{SRT_SUFFIX}"
    path = Path(name).expanduser()
    if not path.is_absolute():
        path = output_dir / path
    return path


def write_document(text: str, path: Path) -> Path:
    """Atomically write *text* to *path* using tempfile + os.replace().

    The temp file is created in the destination directory so os.replace()
    stays on one filesystem.  A reader sees either the old file or the
    complete new one.
    """
    data = text.encode("utf-8")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".srt.tmp")
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc
    closed = False
    try:
        os.write(fd, data)
        os.fsync(fd)
        os.close(fd)
        closed = True
        os.replace(tmp_path, path)
    except Exception as exc:
        # Cleanup failures must not mask the original error.
        with contextlib.suppress(OSError):
            if not closed:
                os.close(fd)
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        if isinstance(exc, OSError):
            raise OutputWriteError(path, str(exc)) from exc
        raise
    return path
