"""Run configuration for a single dialogue → SRT conversion.

Defaults can be overridden through environment variables:

- ``SRTGEN_DEFAULT_DURATION``: video length used when none is entered (``2:30``)
- ``SRTGEN_DEFAULT_OUTPUT``: output file name used when none is entered (``output``)
- ``SRTGEN_OUTPUT_DIR``: directory that relative output names resolve against (cwd)
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from srtgen.errors import InvalidDurationError
from srtgen.rendering.timestamps import parse_timestamp

FALLBACK_DURATION = "2:30"
FALLBACK_OUTPUT_NAME = "output"


def get_default_duration() -> str:
    """Return the duration used when the user leaves the prompt empty."""
    return os.environ.get("SRTGEN_DEFAULT_DURATION") or FALLBACK_DURATION


def get_default_output_name() -> str:
    """Return the output name used when the user leaves the prompt empty."""
    return os.environ.get("SRTGEN_DEFAULT_OUTPUT") or FALLBACK_OUTPUT_NAME


def get_output_dir() -> Path:
    """Return the directory for relative output names.

    Respects the SRTGEN_OUTPUT_DIR environment variable.
    Falls back to the current working directory when the variable is not set.
    """
    env_val = os.environ.get("SRTGEN_OUTPUT_DIR")
    if env_val is not None:
        return Path(env_val).expanduser().resolve()
    return Path.cwd()


class ConversionSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    duration_s: float = Field(gt=0.0, description="Total video length in seconds; bounds the last cue")
    output_name: str = FALLBACK_OUTPUT_NAME
    output_dir: Path

    @field_validator("output_name", mode="before")
    @classmethod
    def default_blank_name(cls, v: Optional[str]) -> str:
        name = (v or "").strip()
        return name or get_default_output_name()


def load_settings(
    duration_text: Optional[str],
    output_name: Optional[str],
    output_dir: Optional[Path] = None,
) -> ConversionSettings:
    """Build validated settings from raw user input. Raises InvalidDurationError on a bad duration.

    The duration is read as ``mm:ss`` with the same rules as dialogue
    timestamps, so unparseable text becomes ``0`` and is rejected here.
    """
    duration_text = (duration_text or "").strip() or get_default_duration()
    try:
        return ConversionSettings(
            duration_s=parse_timestamp(duration_text),
            output_name=output_name,
            output_dir=output_dir if output_dir is not None else get_output_dir(),
        )
    except ValidationError as e:
        duration_errors = [err for err in e.errors() if err["loc"] == ("duration_s",)]
        if duration_errors:
            raise InvalidDurationError(duration_text, duration_errors[0]["msg"]) from e
        raise
