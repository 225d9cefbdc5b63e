import warnings

import pytest

from ogmkit.binary import OgmError
from ogmkit.options import (
    AudioSync,
    OptionError,
    TimeRange,
    parse_range,
    parse_streams,
    parse_sync,
    parse_time,
)


def test_parse_streams_list():
    assert parse_streams("1,2,3") == [1, 2, 3]


def test_parse_streams_single_and_spaces():
    assert parse_streams(" 7 ") == [7]
    assert parse_streams("4, 5") == [4, 5]


def test_parse_streams_bounds():
    assert parse_streams("255") == [255]
    with pytest.raises(OptionError):
        parse_streams("256")
    with pytest.raises(OptionError):
        parse_streams("0")


def test_parse_streams_bad_character():
    with pytest.raises(OptionError):
        parse_streams("1;2")


def test_parse_streams_useless_comma_warns():
    with pytest.warns(UserWarning):
        result = parse_streams(",3")
    assert result == [3]


def test_parse_streams_empty():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert parse_streams("") == []


def test_option_error_is_ogm_error():
    with pytest.raises(OgmError):
        parse_streams("x")


def test_parse_sync_plain_delay():
    assert parse_sync("100") == AudioSync(displacement=100, linear=1.0)
    assert parse_sync("-250").displacement == -250


def test_parse_sync_default_divisor():
    assert parse_sync("0,1000").linear == 1.0


def test_parse_sync_ratio_matches_default_divisor():
    assert parse_sync("10,2/4").linear == pytest.approx(parse_sync("10,500").linear)
    assert parse_sync("10,2/4").displacement == 10


def test_parse_sync_errors():
    with pytest.raises(OptionError):
        parse_sync("0,5/0")
    with pytest.raises(OptionError):
        parse_sync("0,-5")
    with pytest.raises(OptionError):
        parse_sync("0,0")


def test_parse_time_examples_from_usage():
    assert parse_time("00:01:00.500") == pytest.approx(60.5)
    assert parse_time("60.500") == pytest.approx(60.5)


def test_parse_time_colon_forms_agree():
    assert parse_time("01:00:00") == parse_time("3600")
    assert parse_time("02:30") == parse_time("150")


def test_parse_time_errors():
    with pytest.raises(OptionError):
        parse_time("1:2:3:4")
    with pytest.raises(OptionError):
        parse_time("1a")


def test_parse_range_both():
    result = parse_range("00:00:10-00:01:00.500")
    assert result == TimeRange(start=parse_time("00:00:10"),
                               end=parse_time("00:01:00.500"))


def test_parse_range_open_ends():
    assert parse_range("30") == TimeRange(start=30.0, end=0.0)
    assert parse_range("-45").start == 0.0
    assert parse_range("-45").end == 45.0


def test_parse_range_end_before_start():
    with pytest.raises(OptionError):
        parse_range("60-30")


def test_defaults():
    assert AudioSync() == AudioSync(displacement=0, linear=1.0)
    assert TimeRange() == TimeRange(start=0.0, end=0.0)