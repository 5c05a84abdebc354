# Copyright (c) 2026 elParaguayo
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
from datetime import datetime

import pytest

from qtile_sprechuhr.formatter import (
    ClockReading,
    Configuration,
    FormatResult,
    LayoutVariant,
    format_time,
    hour_phrase,
    minute_phrase,
    round_minute,
    select_layout,
    weekday_label,
)
from qtile_sprechuhr.resources import sprechuhr as tables

EXACT = Configuration(fuzzy=False)


def test_tables_sizes():
    assert len(tables.MINUTES) == 60
    assert len(tables.HOURS) == 12
    assert len(tables.WEEKDAYS) == 7
    assert tables.HOURS[0] == "zwölf"


@pytest.mark.parametrize("minute", range(60))
def test_round_minute_total(minute):
    assert round_minute(minute, False) == minute

    rounded = round_minute(minute, True)
    assert 0 <= rounded <= 60
    assert rounded % 5 == 0
    assert abs(rounded - minute) <= 2


@pytest.mark.parametrize(
    "minute,expected",
    [(0, 0), (1, 0), (2, 0), (3, 5), (4, 5), (5, 5), (7, 5), (8, 10), (43, 45), (58, 60), (59, 60)],
)
def test_round_minute_fuzzy(minute, expected):
    assert round_minute(minute, True) == expected


def test_layout_exhaustive_and_exclusive():
    for minute in range(61):
        matches = [
            name
            for name, ranges in tables.LAYOUTS.items()
            if any(minute in r for r in ranges)
        ]
        assert len(matches) == 1, f"minute {minute} matched {matches}"
        assert select_layout(minute) == LayoutVariant(matches[0])


@pytest.mark.parametrize(
    "minute,layout",
    [
        (0, LayoutVariant.TWO_LINE_BIG),
        (12, LayoutVariant.TWO_LINE_BIG),
        (13, LayoutVariant.TWO_LINE_LONG),
        (15, LayoutVariant.TWO_LINE_BIG),
        (19, LayoutVariant.TWO_LINE_LONG),
        (20, LayoutVariant.THREE_LINE),
        (29, LayoutVariant.THREE_LINE),
        (30, LayoutVariant.TWO_LINE_BIG),
        (31, LayoutVariant.THREE_LINE),
        (40, LayoutVariant.THREE_LINE),
        (41, LayoutVariant.TWO_LINE_LONG),
        (45, LayoutVariant.TWO_LINE_BIG),
        (47, LayoutVariant.TWO_LINE_LONG),
        (48, LayoutVariant.TWO_LINE_BIG),
        (60, LayoutVariant.TWO_LINE_BIG),
    ],
)
def test_layout_boundaries(minute, layout):
    assert select_layout(minute) == layout


@pytest.mark.parametrize("minute", [-1, 61])
def test_layout_gap_raises(minute):
    with pytest.raises(LookupError):
        select_layout(minute)


def test_minute_phrase_lines():
    text, lines, carry = minute_phrase(25, EXACT)
    assert text == "fünf vor halb"
    assert lines == ("", "fünf vor halb")
    assert not carry

    text, lines, _ = minute_phrase(45, EXACT)
    assert text == "dreiviertel"
    assert lines == ("drei-", "viertel")

    text, lines, _ = minute_phrase(22, EXACT)
    assert text == "acht vor halb"
    assert lines == ("acht", "vor", "halb")


def test_minute_sixty_is_top_of_hour():
    assert minute_phrase(60, EXACT)[:2] == minute_phrase(0, EXACT)[:2]
    assert minute_phrase(60, EXACT)[0] == "punkt"


def test_hour_carry():
    for hour in range(24):
        for minute in range(21):
            assert hour_phrase(hour, minute) == tables.HOURS[hour % 12]
        for minute in range(21, 61):
            assert hour_phrase(hour, minute) == tables.HOURS[(hour + 1) % 12]


def test_hour_carry_forced():
    assert hour_phrase(8, 15, hour_carry=True) == "neun"
    assert hour_phrase(23, 15, hour_carry=True) == "zwölf"


@pytest.mark.parametrize("flag,minute", [("dialect_nrw", 45), ("dialect_wien", 15)])
def test_dialect_isolation(flag, minute):
    dialect = Configuration(fuzzy=False, **{flag: True})
    for hour in range(24):
        for m in range(60):
            reading = ClockReading(hour, m)
            baseline = format_time(reading, EXACT)
            result = format_time(reading, dialect)
            if m == minute:
                assert result != baseline
                assert result.layout == baseline.layout
            else:
                assert result == baseline


def test_both_dialects():
    config = Configuration(fuzzy=False, dialect_nrw=True, dialect_wien=True)
    assert format_time(ClockReading(14, 45), config).minute_text == "viertel vor"
    assert format_time(ClockReading(14, 15), config).minute_text == "viertel"


def test_weekday_label():
    assert weekday_label(0, 3) == "so 3"
    assert weekday_label(6, 31) == "sa 31"


def test_idempotent():
    reading = ClockReading(10, 33, 2, 14)
    config = Configuration(dialect_nrw=True)
    assert format_time(reading, config) == format_time(reading, config)


def test_default_configuration():
    config = Configuration()
    assert config.fuzzy
    assert not config.dialect_nrw
    assert not config.dialect_wien
    assert config.right_align

    # Default configuration is fuzzy
    assert format_time(ClockReading(15, 7)).minute_text == "fünf nach"


def test_scenario_fuzzy_five_past():
    result = format_time(ClockReading(15, 7), Configuration(fuzzy=True))
    assert result.adjusted_minute == 5
    assert result.minute_text == "fünf nach"
    assert result.layout == LayoutVariant.TWO_LINE_BIG
    assert result.hour_text == "drei"


def test_scenario_nrw():
    result = format_time(ClockReading(14, 45), Configuration(fuzzy=False, dialect_nrw=True))
    assert result.minute_text == "viertel vor"
    assert result.minute_lines == ("viertel vor",)
    assert result.layout == LayoutVariant.TWO_LINE_BIG
    assert result.hour_text == "drei"


def test_scenario_wien():
    result = format_time(ClockReading(8, 15), Configuration(fuzzy=False, dialect_wien=True))
    assert result.minute_text == "viertel"
    assert result.layout == LayoutVariant.TWO_LINE_BIG
    assert result.hour_text == "neun"


def test_scenario_end_of_day():
    result = format_time(ClockReading(23, 59), Configuration(fuzzy=True))
    assert result.adjusted_minute == 60
    assert result.hour_text == "zwölf"
    assert result.minute_text == "punkt"
    assert result.layout == LayoutVariant.TWO_LINE_BIG


def test_scenario_weekday():
    result = format_time(ClockReading(12, 0, weekday=0, day_of_month=3))
    assert result.weekday_text == "so 3"


def test_half_past():
    result = format_time(ClockReading(14, 30), EXACT)
    assert result.minute_text == "halb"
    assert result.hour_text == "drei"


@pytest.mark.parametrize(
    "values",
    [(24, 0, 0, 1), (-1, 0, 0, 1), (0, 60, 0, 1), (0, -1, 0, 1), (0, 0, 7, 1), (0, 0, 0, 0)],
)
def test_invalid_reading(values):
    with pytest.raises(ValueError):
        ClockReading(*values)


def test_reading_from_datetime():
    # 2024-03-03 was a Sunday
    reading = ClockReading.from_datetime(datetime(2024, 3, 3, 14, 25))
    assert reading == ClockReading(14, 25, 0, 3)

    # Monday
    reading = ClockReading.from_datetime(datetime(2024, 3, 4, 0, 0))
    assert reading.weekday == 1


def test_result_as_dict():
    result = format_time(ClockReading(14, 25, 1, 4), EXACT)
    assert isinstance(result, FormatResult)
    assert result.as_dict() == {
        "minute_text": "fünf vor halb",
        "hour_text": "drei",
        "weekday_text": "mo 4",
        "layout": "three_line",
        "minute_lines": ["", "fünf vor halb"],
        "adjusted_minute": 25,
    }
