import datetime

import pytest

from examplekit.textutils import iso8601_matches, sum_numbers, to_string

SAMPLE = """
2014-06-06
2014-11-01
2014-11-01T10:01:13+00:00
2014-11-01T10:01:13Z
2014-W44
2014-W44-6
2014-305
2014-23
"""


def test_to_string_booleans():
    assert to_string(True) == "true"
    assert to_string(False) == "false"


def test_to_string_plain_values():
    assert to_string(42) == "42"
    assert to_string("foobar") == "foobar"
    assert to_string(b"lorem") == "lorem"
    assert to_string(None) == "<nil>"


def test_to_string_durations():
    assert to_string(datetime.timedelta(minutes=5)) == "5m0s"
    assert to_string(datetime.timedelta(0)) == "0s"
    assert to_string(datetime.timedelta(seconds=-90)) == "-1m30s"


def test_to_string_utc_time_uses_z():
    moment = datetime.datetime(2014, 11, 1, 10, 1, 13, tzinfo=datetime.timezone.utc)
    assert to_string(moment) == "2014-11-01T10:01:13Z"


def test_to_string_time_with_offset():
    zone = datetime.timezone(datetime.timedelta(hours=2))
    moment = datetime.datetime(2014, 5, 30, 0, 51, 14, tzinfo=zone)
    assert to_string(moment) == "2014-05-30T00:51:14+02:00"


def test_to_string_floats_and_lists():
    assert to_string(3.5) == "3.5"
    assert to_string(1e6) == "1e+06"
    assert to_string(["a", 1, True]) == "[a 1 true]"


def test_iso8601_finds_sample_dates():
    found = [m["ISO8601"] for m in iso8601_matches(SAMPLE)]
    assert found == [
        "2014-06-06",
        "2014-11-01",
        "2014-11-01T10:01:13+00:00",
        "2014-11-01T10:01:13",
        "2014-W44-6",
        "2014-305",
        "2014-23",
    ]


def test_iso8601_groups_of_week_date():
    (match,) = iso8601_matches("2014-W44-6")
    assert match == {"ISO8601": "2014-W44-6", "year": "2014", "week": "44", "weekday": "6"}


def test_iso8601_groups_of_date_time():
    (match,) = iso8601_matches("2014-11-01T10:01:13+00:00")
    assert match["month"] == "11"
    assert match["day"] == "01"
    assert match["hour"] == "10"
    assert match["min"] == "01"
    assert match["sec"] == "13"
    assert "week" not in match


def test_iso8601_ordinal_date():
    (match,) = iso8601_matches("2014-305")
    assert match == {"ISO8601": "2014-305", "year": "2014", "yearday": "305"}


def test_iso8601_no_match():
    assert iso8601_matches("no dates here 123") == []


def test_sum_numbers_adds_fields():
    assert sum_numbers("1 2 3.5\n") == pytest.approx(6.5)


def test_sum_numbers_skips_invalid(capsys):
    assert sum_numbers("1 x 2 1_000") == pytest.approx(3.0)
    assert "invalid syntax" in capsys.readouterr().err


def test_sum_numbers_empty():
    assert sum_numbers("   ") == 0.0