import pytest

from ogmkit.binary import OgmError
from ogmkit.chapters import is_chapter, is_chapter_name
from ogmkit.dvdchap import (
    ChapterRequest,
    UsageError,
    decode_playback_time,
    format_chapter,
    format_chapters,
    parse_args,
    usage,
)


def _times(text):
    result = []
    for line in text.splitlines():
        if is_chapter(line):
            result.append(
                int(line[10:12]) * 3600000
                + int(line[13:15]) * 60000
                + int(line[16:18]) * 1000
                + int(line[19:22])
            )
    return result


def test_usage_mentions_options():
    text = usage()
    assert "Usage: dvdxchap [options] DVD-SOURCE" in text
    assert "--chapter" in text


def test_no_arguments_asks_for_help():
    assert parse_args([]).show_help is True


def test_help_and_version():
    assert parse_args(["-h"]).show_help is True
    assert parse_args(["--version"]).show_version is True


def test_source_and_defaults():
    request = parse_args(["/dev/dvd"])
    assert request == ChapterRequest(source="/dev/dvd")


def test_title_and_verbose():
    request = parse_args(["-v", "-v", "-t", "3", "disc"])
    assert request.title == 3
    assert request.verbose == 2
    assert request.source == "disc"


@pytest.mark.parametrize("value", ["0", "abc", "-2"])
def test_bad_title(value):
    with pytest.raises(UsageError):
        parse_args(["-t", value, "disc"])


def test_missing_values():
    with pytest.raises(UsageError):
        parse_args(["disc", "-t"])
    with pytest.raises(UsageError):
        parse_args(["disc", "-c"])


def test_chapter_range_variants():
    assert (parse_args(["-c", "2-5", "d"]).start, parse_args(["-c", "2-5", "d"]).end) == (1, 5)
    req = parse_args(["-c", "5-2", "d"])
    assert (req.start, req.end) == (1, 5)
    req = parse_args(["-c", "-4", "d"])
    assert (req.start, req.end) == (0, 4)
    req = parse_args(["-c", "3", "d"])
    assert (req.start, req.end) == (2, 0)


def test_bad_chapter_range():
    with pytest.raises(UsageError):
        parse_args(["-c", "x", "disc"])


def test_two_sources_and_no_source():
    with pytest.raises(UsageError):
        parse_args(["a", "b"])
    with pytest.raises(UsageError):
        parse_args(["-v"])


def test_decode_bcd_scaling():
    assert decode_playback_time(0x10, 0, 0, 0) == 10 * decode_playback_time(0x01, 0, 0, 0)
    assert decode_playback_time(0, 0x01, 0, 0) * 60 == decode_playback_time(0x01, 0, 0, 0)


def test_decode_frames_at_25_fps():
    assert decode_playback_time(0, 0, 0, 0x40 | 0x25) == decode_playback_time(0, 0, 0x01, 0)


def test_decode_frames_at_ntsc_rate_is_longer():
    assert decode_playback_time(0, 0, 0, 0x30) > decode_playback_time(0, 0, 0x01, 0)
    assert decode_playback_time(0, 0, 0, 0xC0 | 0x30) == decode_playback_time(0, 0, 0, 0x30)


def test_format_chapter_zero():
    text = format_chapter(1, 0)
    first, second = text.splitlines()
    assert first == "CHAPTER01=00:00:00.000"
    assert second == "CHAPTER01NAME=Chapter 01"


@pytest.mark.parametrize("ms", [0, 999, 61001, 3723456, 35999999])
def test_format_chapter_round_trip(ms):
    text = format_chapter(7, ms)
    lines = text.splitlines()
    assert is_chapter(lines[0])
    assert is_chapter_name(lines[1])
    assert _times(text) == [ms]


def test_format_chapters_all():
    text = format_chapters([1000, 2000, 3000], 0, 0)
    assert _times(text) == [0, 1000, 1000 + 2000]
    assert len(text.splitlines()) == 6


def test_format_chapters_from_second():
    text = format_chapters([1000, 2000, 3000, 4000], 1, 0)
    assert _times(text) == [0, 2000, 2000 + 3000]
    assert text.splitlines()[0].startswith("CHAPTER01=")


def test_format_chapters_with_end_marker():
    text = format_chapters([1000, 2000, 3000, 4000], 0, 3)
    assert _times(text) == [0, 1000, 1000 + 2000, 1000 + 2000 + 3000]


def test_format_chapters_invalid_end():
    with pytest.raises(OgmError):
        format_chapters([1000, 2000], 1, 1)
    with pytest.raises(OgmError):
        format_chapters([1000, 2000], 0, 5)


def test_format_chapters_empty():
    with pytest.raises(OgmError):
        format_chapters([], 0, 0)