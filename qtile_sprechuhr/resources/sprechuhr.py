# -*- coding: utf-8 -*-
"""Phrase tables for the SprechUhr widget.

    The module must provide the following variables:
        MINUTES:  The minute phrases, one for each minute of the hour.
        HOURS:    The hour names on a 12 hour basis. "zwölf" is index 0.
        WEEKDAYS: Short weekday names, Sunday first.
        LAYOUTS:  The minute ranges drawn by each of the minute containers.
        FRAMES:   Position and font size of each container on the face.
"""

# Minute phrases. "\n" starts a new display line. A leading "\n" leaves the
# first line empty so that short phrases sit lower in the container. A line
# ending in "-" is a hyphenated break inside a single word.
# Phrases after minute 20 refer to the following hour.
MINUTES = (
    "\npunkt",
    "eins\nnach",
    "zwei\nnach",
    "drei\nnach",
    "vier\nnach",
    "fünf\nnach",
    "sechs\nnach",
    "sieben\nnach",
    "acht\nnach",
    "neun\nnach",
    "zehn\nnach",
    "elf\nnach",
    "zwölf\nnach",
    "dreizehn nach",
    "vierzehn nach",
    "viertel nach",
    "sechzehn nach",
    "siebzehn nach",
    "achtzehn nach",
    "neunzehn nach",
    "\nzwanzig nach",
    "neun\nvor\nhalb",
    "acht\nvor\nhalb",
    "sieben\nvor\nhalb",
    "sechs\nvor\nhalb",
    "\nfünf vor halb",
    "vier\nvor\nhalb",
    "drei\nvor\nhalb",
    "zwei\nvor\nhalb",
    "eins\nvor\nhalb",
    "\nhalb",
    "eins\nnach\nhalb",
    "zwei\nnach\nhalb",
    "drei\nnach\nhalb",
    "vier\nnach\nhalb",
    "\nfünf nach halb",
    "sechs\nnach\nhalb",
    "sieben\nnach\nhalb",
    "acht\nnach\nhalb",
    "neun\nnach\nhalb",
    "\nzwanzig vor",
    "neunzehn vor",
    "achtzehn vor",
    "siebzehn vor",
    "sechzehn vor",
    "drei-\nviertel",
    "vierzehn vor",
    "dreizehn vor",
    "zwölf\nvor",
    "elf\nvor",
    "zehn\nvor",
    "neun\nvor",
    "acht\nvor",
    "sieben\nvor",
    "sechs\nvor",
    "fünf\nvor",
    "vier\nvor",
    "drei\nvor",
    "zwei\nvor",
    "eins\nvor",
)

HOURS = (
    "zwölf",
    "eins",
    "zwei",
    "drei",
    "vier",
    "fünf",
    "sechs",
    "sieben",
    "acht",
    "neun",
    "zehn",
    "elf",
)

WEEKDAYS = ("so", "mo", "di", "mi", "do", "fr", "sa")

# Correction added to the minute in fuzzy mode, keyed by the last digit.
# 15:07 is shown as "fünf nach drei", 15:08 as "zehn nach drei".
FUZZY_OFFSETS = {
    0: 0,
    1: -1,
    2: -2,
    3: 2,
    4: 1,
    5: 0,
    6: -1,
    7: -2,
    8: 2,
    9: 1,
}

# Regional phrases.
# NRW: "viertel vor drei" at xx:45 instead of "dreiviertel drei".
# Wien: "viertel drei" at xx:15 instead of "viertel nach zwei".
DIALECT_NRW = {45: "viertel vor"}
DIALECT_WIEN = {15: "\nviertel"}

# Minutes with a carried hour regardless of the minute.
DIALECT_WIEN_HOUR_CARRY = (15,)

# Phrases up to and including this minute refer to the current hour.
HOUR_INCREMENT_TIME = 20

# Minute ranges for each minute container, checked in order. Minute 60 can
# be reached in fuzzy mode and is drawn like the top of the hour.
LAYOUTS = {
    "three_line": (range(20, 30), range(31, 41)),
    "two_line_long": (range(13, 15), range(16, 20), range(41, 45), range(46, 48)),
    "two_line_big": (range(0, 13), (15, 30, 45), range(48, 61)),
}

# Reference face size. Frames are scaled to the screen.
FACE_WIDTH = 144
FACE_HEIGHT = 168

# Frame instructions:
#   "x", "y":   Top left corner of the container on the reference face.
#   "width":    Width of the container. None = full face width.
#   "fontsize": Font size on the reference face.
#   "bold":     Bold weight.
#   "align":    "text" follows the right_align setting, otherwise "left".
FRAMES = {
    "three_line": {"x": 0, "y": 10, "width": None, "fontsize": 34, "bold": False, "align": "text"},
    "two_line_long": {
        "x": 0,
        "y": 44,
        "width": None,
        "fontsize": 34,
        "bold": False,
        "align": "text",
    },
    "two_line_big": {"x": 0, "y": 23, "width": None, "fontsize": 42, "bold": False, "align": "text"},
    "hour": {"x": 0, "y": 109, "width": None, "fontsize": 42, "bold": True, "align": "text"},
    "date": {"x": 57, "y": 0, "width": 87, "fontsize": 18, "bold": False, "align": "left"},
}
