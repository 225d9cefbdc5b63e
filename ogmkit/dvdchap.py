"""Chapter listings for DVD titles: arguments, cell time decoding and output."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ogmkit.binary import OgmError

VERSION = "0.1.0"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class UsageError(OgmError):
    """Raised when the command line cannot be understood."""


@dataclass
class ChapterRequest:
    """What the user asked for on the command line.

    start is the zero based index of the first chapter to list; end is the
    one based number of the last one, or 0 for "to the end of the title".
    """

    source: Optional[str] = None
    title: int = 1
    start: int = 0
    end: int = 0
    verbose: int = 0
    show_help: bool = False
    show_version: bool = False


def usage() -> str:
    """Return the help text."""
    return (
        f"ogmtools v{VERSION}\n"
        "Usage: dvdxchap [options] DVD-SOURCE\n\n"
        " options:\n"
        "   -t, --title num            Use title 'num'. Default is 1.\n"
        "   -c, --chapter start[-end]  Chapter to start at (to end at). Default 1.\n"
        "   -v, --verbose              Increase verbosity\n"
        "   -V, --version              Show version information\n"
        "   -h, --help                 Show this help\n"
    )


def _scan_int(text: str, pos: int) -> tuple[Optional[int], int]:
    match = _INT_PREFIX.match(text, pos)
    if match is None:
        return None, pos
    return int(match.group(1)), match.end()


def _parse_chapter_range(
    text: str, start: int, end: int
) -> tuple[int, int]:
    first, pos = _scan_int(text, 0)
    if first is None:
        raise UsageError(f"'{text}' is not a valid chapter range.")
    start = first
    if text[pos:pos + 1] == "-":
        second, _ = _scan_int(text, pos + 1)
        if second is not None:
            end = second
    if start < 0:
        end = -start
        start = 0
    if start > end > 0:
        start, end = end, start
    if start > 0:
        start -= 1
    return start, end


def parse_args(argv: Optional[Sequence[str]]) -> ChapterRequest:
    """Turn command line arguments (without the program name) into a request."""
    args = list(argv or [])
    request = ChapterRequest()
    if not args:
        request.show_help = True
        return request

    items = iter(args)
    for arg in items:
        if arg in ("-h", "--help"):
            request.show_help = True
            return request
        if arg in ("-v", "--verbose"):
            request.verbose += 1
        elif arg in ("-V", "--version"):
            request.show_version = True
            return request
        elif arg in ("-t", "--title"):
            value = next(items, None)
            if value is None:
                raise UsageError("-t lacks a title number.")
            title, _ = _scan_int(value, 0)
            if title is None or title < 1:
                raise UsageError(f"'{value}' is not a valid title number.")
            request.title = title
        elif arg in ("-c", "--chapter"):
            value = next(items, None)
            if value is None:
                raise UsageError("-c lacks a chapter number.")
            request.start, request.end = _parse_chapter_range(
                value, request.start, request.end
            )
        else:
            if request.source is not None:
                raise UsageError("more than one source given.")
            request.source = arg

    if request.source is None:
        raise UsageError("No source given.")
    return request


def _bcd(value: int) -> int:
    return ((value & 0xF0) >> 4) * 10 + (value & 0x0F)


def decode_playback_time(hour: int, minute: int, second: int, frame_u: int) -> int:
    """Convert a BCD encoded cell playback time into milliseconds.

    The two top bits of frame_u select the frame rate: 1 means 25 fps,
    anything else 29.97 fps.
    """
    fps = 25.0 if ((frame_u & 0xC0) >> 6) == 1 else 29.97
    frames = _bcd(frame_u & 0x3F)
    ms = int(frames * 1000.0 / fps)
    return (
        _bcd(hour) * 3600000
        + _bcd(minute) * 60000
        + _bcd(second) * 1000
        + ms
    )


def format_chapter(number: int, milliseconds: int) -> str:
    """Return the CHAPTERnn= and CHAPTERnnNAME= lines for one chapter."""
    return (
        f"CHAPTER{number:02d}={milliseconds // 3600000:02d}:"
        f"{milliseconds // 60000 % 60:02d}:{milliseconds // 1000 % 60:02d}."
        f"{milliseconds % 1000:03d}\n"
        f"CHAPTER{number:02d}NAME=Chapter {number:02d}\n"
    )


def format_chapters(durations: Sequence[int], start: int = 0, end: int = 0) -> str:
    """List chapter start times of a title, relative to chapter start.

    durations holds the length in ms of each chapter of the title in order;
    the length of the last chapter is not needed. start and end are as in
    ChapterRequest.
    """
    count = len(durations)
    if count < 1:
        raise OgmError("the title contains no chapters.")
    if end > 0 and (end <= start or end > count):
        raise OgmError("Invalid end chapter.")

    lines: list[str] = []
    overall = 0
    start_time = 0
    for index, duration in enumerate(durations[:-1]):
        if index == start:
            start_time = overall
        if index >= start and (index < end or end <= 0):
            lines.append(format_chapter(index + 1 - start, overall - start_time))
        overall += duration

    last = count - 1
    if end <= 0 or last == end:
        lines.append(format_chapter(last + 1 - start, overall - start_time))
    return "".join(lines)