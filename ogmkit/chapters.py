"""Chapter files: detection, reading and cutting to a time range."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import IO, Optional

VENDOR = "ogmtools"

_DIGITS = "0123456789"
_LINE_LIMIT = 199


@dataclass
class VorbisComment:
    """A vendor string and an ordered list of user comments."""

    vendor: str = VENDOR
    comments: list[str] = field(default_factory=list)

    def add(self, comment: str) -> None:
        """Append a user comment."""
        self.comments.append(comment)


def _digits(text: str, start: int, count: int) -> bool:
    chunk = text[start:start + count]
    return len(chunk) == count and all(c in _DIGITS for c in chunk)


def is_timestamp(text: str) -> bool:
    """True if text begins with HH:MM:SS.mmm."""
    return (
        _digits(text, 0, 2)
        and text[2:3] == ":"
        and _digits(text, 3, 2)
        and text[5:6] == ":"
        and _digits(text, 6, 2)
        and text[8:9] == "."
        and _digits(text, 9, 3)
    )


def is_chapter(line: str) -> bool:
    """True for a line of the form CHAPTERnn=HH:MM:SS.mmm."""
    return (
        len(line) == 22
        and line.startswith("CHAPTER")
        and _digits(line, 7, 2)
        and line[9:10] == "="
        and is_timestamp(line[10:])
    )


def is_chapter_name(line: str) -> bool:
    """True for a line of the form CHAPTERnnNAME=text."""
    return (
        len(line) > 14
        and line.startswith("CHAPTER")
        and _digits(line, 7, 2)
        and line[9:13] == "NAME"
        and line[13:14] == "="
    )


def _as_text(line: str | bytes) -> str:
    return line.decode("latin-1") if isinstance(line, bytes) else line


def probe_chapters(file: IO, size: int) -> bool:
    """Check whether an open file starts like a chapter file."""
    if size < 37:
        return False
    try:
        file.seek(0)
    except (OSError, io.UnsupportedOperation):
        return False
    first = _as_text(file.readline(_LINE_LIMIT))
    if not first.endswith("\n"):
        return False
    if not first.startswith("CHAPTER") or first[9:10] != "=":
        return False
    if not is_timestamp(first[10:]):
        return False
    second = _as_text(file.readline(_LINE_LIMIT))
    if not second.endswith("\n"):
        return False
    return second.startswith("CHAPTER") and second[9:14] == "NAME="


def read_chapters(path: str) -> VorbisComment:
    """Read every non-empty line of a chapter file into a comment set."""
    chapters = VorbisComment()
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        while True:
            chunk = handle.readline(_LINE_LIMIT)
            if not chunk:
                break
            text = chunk.rstrip("\r\n")
            if text:
                chapters.add(text)
    return chapters


def _format_chapter(number: int, offset_ms: int) -> str:
    return (
        f"CHAPTER{number:02d}={offset_ms // 3600000:02d}:"
        f"{offset_ms // 60000 % 60:02d}:{offset_ms // 1000 % 60:02d}."
        f"{offset_ms % 1000:03d}"
    )


def adjust_chapters(
    comment: Optional[VorbisComment], start: float, end: float
) -> Optional[VorbisComment]:
    """Keep chapters starting in [start, end) ms, renumbered and shifted.

    If the range begins inside a chapter, that chapter is carried over as
    chapter 01 at time zero with " (continued)" appended to its name.
    """
    if comment is None:
        return None

    result = VorbisComment()
    copied: set[int] = set()
    chapter_sub = -1
    last_name: Optional[str] = None

    for line in comment.comments:
        if is_chapter(line):
            chapter = int(line[7:9])
            cstart = (
                int(line[19:22])
                + 1000.0 * int(line[16:18])
                + 60000.0 * int(line[13:15])
                + 3600000.0 * int(line[10:12])
            )
            if not start <= cstart < end:
                continue
            copied.add(chapter)
            if chapter_sub == -1:
                chapter_sub = chapter - 1
                if last_name and cstart > start:
                    result.add(_format_chapter(1, 0))
                    result.add("CHAPTER01" + last_name[9:] + " (continued)")
                    chapter_sub -= 1
            result.add(_format_chapter(chapter - chapter_sub, int(cstart - start)))
        elif is_chapter_name(line):
            chapter = int(line[7:9])
            if chapter in copied:
                result.add(f"CHAPTER{chapter - chapter_sub:02d}" + line[9:])
            elif chapter_sub == -1:
                last_name = line
        else:
            result.add(line)

    return result