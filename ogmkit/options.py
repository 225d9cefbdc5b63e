"""Parsing of the per-file command line values: stream lists, sync and ranges."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass

from ogmkit.binary import OgmError

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class OptionError(OgmError):
    """Raised when a command line value cannot be parsed."""


@dataclass
class AudioSync:
    """Delay in ms and linear drift factor applied to a stream."""

    displacement: int = 0
    linear: float = 1.0


@dataclass
class TimeRange:
    """Start and end of the part to process, in seconds; end 0 means open."""

    start: float = 0.0
    end: float = 0.0


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _stream_number(digits: str) -> int:
    number = _leading_int(digits)
    if not 1 <= number <= 255:
        raise OptionError(f"stream number out of range (1..255): {number}")
    return number


def parse_streams(text: str) -> list[int]:
    """Parse a comma separated list of stream numbers in 1..255."""
    streams: list[int] = []
    pending: str | None = None
    for char in text:
        if char.isdigit():
            pending = char if pending is None else pending + char
        elif char == ",":
            if pending is not None:
                streams.append(_stream_number(pending))
                pending = None
            else:
                warnings.warn("useless use of ','", stacklevel=2)
        elif char.isspace():
            if pending is not None:
                pending += char
        else:
            raise OptionError(
                f"unrecognized character in stream list: {char!r}"
            )
    if pending is not None:
        streams.append(_stream_number(pending))
    return streams


def parse_sync(text: str) -> AudioSync:
    """Parse 'd[,o[/p]]': a delay in ms and an optional linear drift o/p."""
    delay, comma, linear_text = text.partition(",")
    if comma:
        numerator, slash, denominator = linear_text.partition("/")
        if slash:
            divisor = _leading_float(denominator)
            if divisor == 0.0:
                raise OptionError("linear sync: division by zero?")
            linear = _leading_float(numerator) / divisor
        else:
            linear = _leading_float(numerator) / 1000.0
        if linear <= 0.0:
            raise OptionError("linear sync value may not be <= 0.")
    else:
        linear = 1.0
    return AudioSync(displacement=_leading_int(delay), linear=linear)


def parse_time(text: str) -> float:
    """Parse 'HH:MM:SS.mmm', 'MM:SS.mmm' or 'SS.mmm' into seconds."""
    whole, dot, fraction = text.partition(".")
    for char in whole:
        if char != ":" and not char.isdigit():
            raise OptionError(f"illegal character {char!r} in time range.")
    parts = whole.split(":")
    if len(parts) > 3:
        raise OptionError(f"illegal time range: {whole}.")
    seconds = 0.0
    for part in parts:
        seconds = seconds * 60 + _leading_int(part)
    if dot:
        seconds += _leading_float(fraction) / 1000.0
    return seconds


def parse_range(text: str) -> TimeRange:
    """Parse 's-e'; either side may be omitted."""
    start_text, dash, end_text = text.partition("-")
    end = parse_time(end_text) if dash else 0.0
    start = parse_time(start_text)
    if end != 0 and end < start:
        raise OptionError("end time is set before start time.")
    return TimeRange(start=start, end=end)