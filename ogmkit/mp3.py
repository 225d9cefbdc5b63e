"""Locating and decoding MPEG audio frame headers."""

from __future__ import annotations

from dataclasses import dataclass

from ogmkit.binary import OgmError, fourcc

MP3_TABSEL = (
    (0, 32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 0),
    (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160, 0),
)

MP3_FREQS = (44100, 48000, 32000, 22050, 24000, 16000, 11025, 12000, 8000)

_RIFF = fourcc("RIFF")
_ID3 = fourcc("ID3 ")


@dataclass(frozen=True)
class Mp3Header:
    """Fields decoded from a 32-bit MPEG audio frame header."""

    lsf: int
    mpeg25: int
    mode: int
    error_protection: int
    stereo: int
    ssize: int
    bitrate_index: int
    sampling_frequency: int
    padding: int
    framesize: int


def _is_valid(header: int) -> bool:
    if header == _RIFF or (header & 0xFFFFFF00) == _ID3:
        return False
    if (header & 0xFFE00000) != 0xFFE00000:
        return False
    if not (header >> 17) & 3:
        return False
    bitrate = (header >> 12) & 0xF
    if bitrate in (0, 0xF):
        return False
    if ((header >> 10) & 3) == 3:
        return False
    if (header >> 19) & 1 and ((header >> 17) & 3) == 3 and (header >> 16) & 1:
        return False
    if (header & 0xFFFF0000) == 0xFFFE0000:
        return False
    return True


def find_mp3_header(buf: bytes) -> tuple[int, int] | None:
    """Return (offset, header) of the first plausible frame header, or None."""
    data = bytes(buf)
    for pos in range(len(data) - 3):
        header = int.from_bytes(data[pos:pos + 4], "big")
        if _is_valid(header):
            return pos, header
    return None


def decode_mp3_header(header: int) -> Mp3Header:
    """Decode a frame header found by find_mp3_header."""
    if header & (1 << 20):
        lsf = 0 if header & (1 << 19) else 1
        mpeg25 = 0
    else:
        lsf = 1
        mpeg25 = 1
    mode = (header >> 6) & 3
    error_protection = ((header >> 16) & 1) ^ 1
    stereo = 1 if mode == 3 else 2
    if lsf:
        ssize = 9 if stereo == 1 else 17
    else:
        ssize = 17 if stereo == 1 else 32
    if error_protection:
        ssize += 2
    bitrate_index = (header >> 12) & 15
    if mpeg25:
        sampling_frequency = 6 + ((header >> 10) & 3)
    else:
        sampling_frequency = ((header >> 10) & 3) + lsf * 3
    if sampling_frequency >= len(MP3_FREQS):
        raise OgmError(f"invalid sampling frequency index in header {header:#010x}")
    padding = (header >> 9) & 1
    framesize = MP3_TABSEL[lsf][bitrate_index] * 144000
    framesize //= MP3_FREQS[sampling_frequency] << lsf
    framesize = framesize + padding - 4
    return Mp3Header(
        lsf=lsf,
        mpeg25=mpeg25,
        mode=mode,
        error_protection=error_protection,
        stereo=stereo,
        ssize=ssize,
        bitrate_index=bitrate_index,
        sampling_frequency=sampling_frequency,
        padding=padding,
        framesize=framesize,
    )