"""User comment lists given on the command line, and the file type listing."""

from __future__ import annotations

import sys
from typing import Optional

from ogmkit.binary import OgmError

_LINE_LIMIT = 1022

_FILE_TYPES = (
    ("demultiplexers:", ""),
    ("ogg", "general OGG media stream, Vorbis audio embedded in OGG"),
    ("avi", "AVI (Audio/Video Interleaved)"),
    ("wav", "WAVE (uncompressed PCM)"),
    ("srt", "SRT text subtitles"),
    ("   ", "MicroDVD text subtitles"),
    ("mp3", "MPEG1 layer III audio (CBR and VBR/ABR)"),
    ("ac3", "A/52 (aka AC3)"),
    ("output modules:", ""),
    ("   ", "Vorbis audio"),
    ("   ", "Video (not MPEG1/2)"),
    ("   ", "uncompressed PCM audio"),
    ("   ", "text subtitles"),
    ("   ", "MP3 audio"),
    ("   ", "AC3 audio"),
)


def unpack_comments(
    line: Optional[str], comments: Optional[list[str]] = None
) -> Optional[list[str]]:
    """Split 'A=B#C=D' on '#' and append the pieces to comments.

    An empty or missing line leaves comments as they are.
    """
    if not line:
        return comments
    return [*(comments or []), *line.split("#")]


def read_comments_file(
    filename: Optional[str], comments: Optional[list[str]] = None
) -> Optional[list[str]]:
    """Append every non-empty line of a file to comments.

    A leading '@' on the file name is dropped. A name shorter than two
    characters yields None.
    """
    if not filename or len(filename) < 2:
        return None
    if filename.startswith("@"):
        filename = filename[1:]
    result = list(comments or [])
    print(f"Reading comments from '{filename}'...", file=sys.stderr)
    try:
        handle = open(filename, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise OgmError(
            f"Could not open '{filename}' for reading comments from it."
        ) from exc
    with handle:
        while True:
            chunk = handle.readline(_LINE_LIMIT)
            if not chunk:
                break
            text = chunk.rstrip("\r\n")
            if text:
                result.append(text)
    return result


def list_file_types() -> str:
    """Return the table of supported input types and output modules."""
    lines = [
        "Known file types:",
        "  ext  description",
        "  ---  --------------------------",
    ]
    lines.extend(f"  {ext}  {desc}" for ext, desc in _FILE_TYPES)
    return "\n".join(lines) + "\n"