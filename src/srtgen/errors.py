from pathlib import Path


class SrtGenError(Exception):
    """Base class for all srtgen errors."""


class InvalidDurationError(SrtGenError):
    def __init__(self, value: str, detail: str) -> None:
        super().__init__(
            f"Invalid video length '{value}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Enter the length as minutes:seconds, e.g. 2:30.\n"
            f"  Tip: The length must be greater than 0:00."
        )
        self.value = value
        self.detail = detail


class DialogueSourceError(SrtGenError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Cannot read dialogue file '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Does the file exist and is it UTF-8 text?"
        )
        self.path = path
        self.detail = detail


class OutputWriteError(SrtGenError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Failed to write subtitle file '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Is '{path.parent}' writable and is there free disk space?"
        )
        self.path = path
        self.detail = detail
