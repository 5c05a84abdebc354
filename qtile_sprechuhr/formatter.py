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
"""
Converts a clock reading into the German phrases shown by the SprechUhr.

``format_time`` is the entry point. Everything here is a pure function of
its arguments: the phrases and layout ranges are static tables in
``qtile_sprechuhr.resources.sprechuhr`` and no state is kept between calls.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import TYPE_CHECKING

from qtile_sprechuhr.resources import sprechuhr as tables

if TYPE_CHECKING:
    from datetime import datetime


class LayoutVariant(Enum):
    THREE_LINE = "three_line"
    TWO_LINE_LONG = "two_line_long"
    TWO_LINE_BIG = "two_line_big"


@dataclass(frozen=True)
class ClockReading:
    hour: int
    minute: int
    weekday: int = 0
    day_of_month: int = 1

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"Invalid hour: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Invalid minute: {self.minute}")
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"Invalid weekday: {self.weekday}")
        if not 1 <= self.day_of_month <= 31:
            raise ValueError(f"Invalid day of month: {self.day_of_month}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> ClockReading:
        # datetime counts weekdays from Monday, the tables start on Sunday
        return cls(dt.hour, dt.minute, dt.isoweekday() % 7, dt.day)


@dataclass(frozen=True)
class Configuration:
    fuzzy: bool = True
    dialect_nrw: bool = False
    dialect_wien: bool = False
    right_align: bool = True
    show_date: bool = True


@dataclass(frozen=True)
class FormatResult:
    minute_text: str
    hour_text: str
    weekday_text: str
    layout: LayoutVariant
    minute_lines: tuple[str, ...] = ()
    adjusted_minute: int = 0

    def as_dict(self):
        info = asdict(self)
        info["layout"] = self.layout.value
        info["minute_lines"] = list(self.minute_lines)
        return info


def round_minute(minute: int, fuzzy: bool) -> int:
    """
    Returns the minute used to look up the phrases.

    In fuzzy mode the minute is moved to the nearest multiple of five.
    Minutes 58 and 59 become 60, which is drawn as the top of the next
    hour. The hour itself is never changed here.
    """
    if not fuzzy:
        return minute

    return minute + tables.FUZZY_OFFSETS[minute % 10]


def select_layout(adjusted_minute: int) -> LayoutVariant:
    """Returns the minute container that fits the phrase for this minute."""
    for name, ranges in tables.LAYOUTS.items():
        if any(adjusted_minute in r for r in ranges):
            return LayoutVariant(name)

    raise LookupError(f"No layout defined for minute {adjusted_minute}.")


def _join_lines(template):
    words = []
    for line in template.split("\n"):
        if not line:
            continue
        if words and words[-1].endswith("-"):
            words[-1] = words[-1][:-1] + line
        else:
            words.append(line)

    return " ".join(words)


def minute_phrase(adjusted_minute: int, config: Configuration) -> tuple[str, tuple[str, ...], bool]:
    """
    Looks up the minute phrase.

    Returns the phrase as a single line of text, the phrase split into
    display lines and whether the hour must be carried forward because
    of a dialect phrase.
    """
    template = tables.MINUTES[adjusted_minute % 60]
    hour_carry = False

    if config.dialect_nrw and adjusted_minute in tables.DIALECT_NRW:
        template = tables.DIALECT_NRW[adjusted_minute]

    if config.dialect_wien and adjusted_minute in tables.DIALECT_WIEN:
        template = tables.DIALECT_WIEN[adjusted_minute]
        hour_carry = adjusted_minute in tables.DIALECT_WIEN_HOUR_CARRY

    return _join_lines(template), tuple(template.split("\n")), hour_carry


def hour_phrase(hour: int, adjusted_minute: int, hour_carry: bool = False) -> str:
    # "fünf vor drei" at 14:55: later phrases name the next hour
    if hour_carry or adjusted_minute > tables.HOUR_INCREMENT_TIME:
        hour += 1

    return tables.HOURS[hour % 12]


def weekday_label(weekday: int, day_of_month: int) -> str:
    return f"{tables.WEEKDAYS[weekday]} {day_of_month}"


def format_time(reading: ClockReading, config: Configuration | None = None) -> FormatResult:
    """Builds the phrases and layout for a clock reading."""
    if config is None:
        config = Configuration()

    minute = round_minute(reading.minute, config.fuzzy)
    text, lines, hour_carry = minute_phrase(minute, config)

    return FormatResult(
        minute_text=text,
        hour_text=hour_phrase(reading.hour, minute, hour_carry),
        weekday_text=weekday_label(reading.weekday, reading.day_of_month),
        layout=select_layout(minute),
        minute_lines=lines,
        adjusted_minute=minute,
    )
