from datetime import datetime, timezone

import pytest

from logdrain import parse
from logdrain.errors import InvalidTimestamp
from logdrain.timestamps import parse_timestamp


def test_nanosecond_fraction_is_truncated_to_microseconds():
    ts = parse_timestamp("2016-10-15T08:59:08.123456789Z")
    assert ts == datetime(2016, 10, 15, 8, 59, 8, 123456, tzinfo=timezone.utc)


def test_fraction_is_optional():
    ts = parse_timestamp("2012-11-30T06:45:26+00:00")
    assert ts == datetime(2012, 11, 30, 6, 45, 26, tzinfo=timezone.utc)


def test_negative_offset_converted_to_utc():
    ts = parse_timestamp("2012-11-30T01:45:26-05:00")
    assert ts == datetime(2012, 11, 30, 6, 45, 26, tzinfo=timezone.utc)
    assert ts.tzinfo == timezone.utc


@pytest.mark.parametrize(
    "word",
    [
        "",
        "-",
        "2016-10-15",
        "2016-10-15T08:59:08",
        "2016-10-15 08:59:08Z",
        "2016-10-15T08:59:08.Z",
        "2016-13-15T08:59:08Z",
        "2016-10-15T08:59:08.1234567890Z",
        "Oct 15 08:59:08",
        "2016-10-15T24:00:00Z",
        "2016-10-15T08:60:08Z",
        "2016-10-15T08:59:60Z",
        "2016-10-15T08:59:08Z\n",
    ],
)
def test_rejects_non_rfc3339(word):
    with pytest.raises(InvalidTimestamp):
        parse_timestamp(word)


def test_hour_24_is_not_rolled_into_next_day():
    with pytest.raises(InvalidTimestamp):
        parse(b"89 <45>1 2016-10-15T24:00:00Z host app web.1 - hi")


def test_last_second_of_day_is_accepted():
    ts = parse_timestamp("2016-10-15T23:59:59.999999Z")
    assert ts == datetime(2016, 10, 15, 23, 59, 59, 999999, tzinfo=timezone.utc)
