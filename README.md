# ogmkit

ogmkit is a small library of building blocks for OGG media (OGM) tools. It
uses only the standard library.

## Modules

### `ogmkit.binary`

- `get_uint16(buf, offset=0)`, `get_uint32(buf, offset=0)` and
  `get_uint64(buf, offset=0)` read unsigned little-endian integers. If the
  buffer is too short, they raise `OgmError`.
- `put_uint16(value)`, `put_uint32(value)` and `put_uint64(value)` return the
  low 16, 32 or 64 bits of `value` as little-endian bytes.
- `fourcc(code)` turns a four-character string or bytes value into its
  big-endian integer. If the code is not exactly four characters, it raises
  `OgmError`.
- `FileType` is an `IntEnum` of input kinds: `UNKNOWN`, `OGM`, `AVI`, `WAV`,
  `SRT`, `MP3`, `AC3`, `CHAPTERS`, `MICRODVD` and `VOBSUB`.
- `OgmError` is the base exception of the package.

### `ogmkit.mp3`

- `find_mp3_header(buf)` looks for the first plausible MPEG audio frame
  header. It returns `(offset, header)`, or `None` if there is none. It
  skips `RIFF` and `ID3` markers.
- `decode_mp3_header(header)` returns a frozen `Mp3Header` with these
  fields:
  - `lsf`, `mpeg25` and `mode`
  - `error_protection`
  - `stereo` (the channel count)
  - `ssize`
  - `bitrate_index`
  - `sampling_frequency` (an index into `MP3_FREQS`)
  - `padding`
  - `framesize`

### `ogmkit.chapters`

This module works on chapter files made of `CHAPTERnn=HH:MM:SS.mmm` and
`CHAPTERnnNAME=text` lines.

- `VorbisComment` holds a `vendor` string and a `comments` list. Its
  `add(comment)` method appends a comment.
- `is_timestamp(text)`, `is_chapter(line)` and `is_chapter_name(line)` check
  single lines.
- `probe_chapters(file, size)` tells whether an open file starts like a
  chapter file.
- `read_chapters(path)` loads every non-empty line into a `VorbisComment`.
- `adjust_chapters(comment, start, end)` keeps the chapters that begin in
  `[start, end)`, given in milliseconds. It renumbers them and shifts them
  to the new start. Lines that are not chapter lines are copied unchanged.
  If the range begins inside a chapter, that chapter is carried over as
  chapter 01 at time zero, and its name gets " (continued)" appended.

### `ogmkit.options`

- `parse_streams(text)` parses `"1,3"` into `[1, 3]`.
  - Numbers must be in 1..255.
  - An empty item between commas produces a warning.
- `parse_sync(text)` parses `"d[,o[/p]]"` into an `AudioSync` with a
  `displacement` in ms and a `linear` factor. `p` defaults to 1000.
- `parse_time(text)` accepts `HH:MM:SS.mmm`, `MM:SS.mmm` or `SS.mmm` and
  returns seconds.
- `parse_range(text)` parses `"s-e"` into a `TimeRange`. Either side may be
  omitted, and an `end` of 0 means open-ended.
- All of these raise `OptionError` on bad input.

### `ogmkit.comments`

- `unpack_comments(line, comments=None)` splits `"A=B#C=D"` on `#` and
  appends the pieces.
- `read_comments_file(filename, comments=None)` appends each non-empty line
  of a file.
  - A leading `@` on the name is dropped.
  - If the file cannot be opened, it raises `OgmError`.
- `list_file_types()` returns the table of supported input types and output
  modules as text.

### `ogmkit.dvdchap`

- `parse_args(argv)` reads `-t/--title`, `-c/--chapter start[-end]`,
  `-v/--verbose`, `-V/--version`, `-h/--help` and one source into a
  `ChapterRequest`. On bad input it raises `UsageError`.
- `usage()` returns the help text.
- `decode_playback_time(hour, minute, second, frame_u)` converts a
  BCD-coded cell playback time to milliseconds. It uses 25 fps or
  29.97 fps, depending on the frame-rate bits.
- `format_chapter(number, milliseconds)` writes the `CHAPTERnn=` and
  `CHAPTERnnNAME=` lines for one chapter.
- `format_chapters(durations, start=0, end=0)` writes them for a whole title,
  given the length of each chapter.

## Example

```python
from ogmkit.binary import get_uint32, put_uint32
from ogmkit.options import parse_time, parse_streams
from ogmkit.chapters import VorbisComment, adjust_chapters

assert get_uint32(put_uint32(0x12345678)) == 0x12345678
assert parse_time("00:01:00.500") == 60.5
assert parse_streams("1,3") == [1, 3]

chapters = VorbisComment(comments=[
    "CHAPTER01=00:00:00.000", "CHAPTER01NAME=Intro",
    "CHAPTER02=00:10:00.000", "CHAPTER02NAME=Main",
])
cut = adjust_chapters(chapters, 300_000, float("inf"))
assert cut.comments == [
    "CHAPTER01=00:00:00.000", "CHAPTER01NAME=Intro (continued)",
    "CHAPTER02=00:05:00.000", "CHAPTER02NAME=Main",
]
```

## What it does not do

ogmkit is a library only. It installs no commands. It does not read,
write, multiplex or demultiplex Ogg streams, and it does not decode Vorbis
or any other codec. It does not read DVDs either: `ogmkit.dvdchap` formats
chapter lists from cell times that you supply.